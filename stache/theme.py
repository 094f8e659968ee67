"""Theme definitions and lookup helpers for Stache."""

from dataclasses import dataclass
import curses
from typing import Optional

from .constants import (
    C_BODY,
    C_BORDER_ACTIVE,
    C_BORDER_INACTIVE,
    C_ERROR,
    C_HEADER_AVAILABLE,
    C_HEADER_MANAGED,
    C_HELP,
    C_SELECTED,
    C_STATUS,
)

# Test doubles may expose only a subset of color constants.
for _name, _fallback in {
    "COLOR_BLACK": 0,
    "COLOR_RED": 1,
    "COLOR_GREEN": 2,
    "COLOR_YELLOW": 3,
    "COLOR_BLUE": 4,
    "COLOR_MAGENTA": 5,
    "COLOR_CYAN": 6,
    "COLOR_WHITE": 7,
}.items():
    if not hasattr(curses, _name):
        setattr(curses, _name, _fallback)

# Terminal default color (requires use_default_colors()).
DEFAULT_COLOR = -1

DEFAULT_THEME = "pastel"

ROLE_TO_PAIR_ID = {
    "body": C_BODY,
    "border_active": C_BORDER_ACTIVE,
    "border_inactive": C_BORDER_INACTIVE,
    "header_available": C_HEADER_AVAILABLE,
    "header_managed": C_HEADER_MANAGED,
    "selected": C_SELECTED,
    "help": C_HELP,
    "status": C_STATUS,
    "error": C_ERROR,
}


def _mk_pairs(fg_bg):
    return {
        "body": fg_bg[0],
        "border_active": fg_bg[1],
        "border_inactive": fg_bg[2],
        "header_available": fg_bg[3],
        "header_managed": fg_bg[4],
        "selected": fg_bg[5],
        "help": fg_bg[6],
        "status": fg_bg[7],
        "error": fg_bg[8],
    }


@dataclass(frozen=True)
class Theme:
    """Stache semantic theme definition."""

    key: str
    label: str
    pairs_base: dict[str, tuple[int, int]]
    pairs_256: Optional[dict[str, tuple[int, int]]] = None


THEMES = {
    "pastel": Theme(
        key="pastel",
        label="Pastel",
        pairs_base=_mk_pairs(
            (
                (DEFAULT_COLOR, DEFAULT_COLOR),
                (curses.COLOR_CYAN, DEFAULT_COLOR),
                (curses.COLOR_WHITE, DEFAULT_COLOR),
                (curses.COLOR_RED, DEFAULT_COLOR),
                (curses.COLOR_GREEN, DEFAULT_COLOR),
                (curses.COLOR_YELLOW, curses.COLOR_MAGENTA),
                (curses.COLOR_WHITE, DEFAULT_COLOR),
                (curses.COLOR_BLACK, curses.COLOR_CYAN),
                (curses.COLOR_RED, DEFAULT_COLOR),
            )
        ),
        pairs_256=_mk_pairs(
            (
                (245, DEFAULT_COLOR),   # soft gray text
                (86, DEFAULT_COLOR),    # focused border
                (240, DEFAULT_COLOR),   # unfocused border
                (211, DEFAULT_COLOR),   # pastel red
                (121, DEFAULT_COLOR),   # mint green
                (229, 57),              # soft yellow on violet
                (245, DEFAULT_COLOR),
                (235, 153),             # sky blue bar
                (211, DEFAULT_COLOR),
            )
        ),
    ),
    "classic": Theme(
        key="classic",
        label="Classic",
        pairs_base=_mk_pairs(
            (
                (curses.COLOR_WHITE, curses.COLOR_BLUE),
                (curses.COLOR_YELLOW, curses.COLOR_BLUE),
                (curses.COLOR_CYAN, curses.COLOR_BLUE),
                (curses.COLOR_WHITE, curses.COLOR_BLUE),
                (curses.COLOR_WHITE, curses.COLOR_BLUE),
                (curses.COLOR_BLACK, curses.COLOR_CYAN),
                (curses.COLOR_CYAN, curses.COLOR_BLUE),
                (curses.COLOR_BLACK, curses.COLOR_WHITE),
                (curses.COLOR_RED, curses.COLOR_WHITE),
            )
        ),
    ),
    "mono": Theme(
        key="mono",
        label="Monochrome",
        pairs_base=_mk_pairs(
            (
                (DEFAULT_COLOR, DEFAULT_COLOR),
                (curses.COLOR_WHITE, DEFAULT_COLOR),
                (DEFAULT_COLOR, DEFAULT_COLOR),
                (DEFAULT_COLOR, DEFAULT_COLOR),
                (DEFAULT_COLOR, DEFAULT_COLOR),
                (curses.COLOR_BLACK, curses.COLOR_WHITE),
                (DEFAULT_COLOR, DEFAULT_COLOR),
                (curses.COLOR_BLACK, curses.COLOR_WHITE),
                (DEFAULT_COLOR, DEFAULT_COLOR),
            )
        ),
    ),
}


def list_themes():
    """Return available themes in display order."""
    return [THEMES[key] for key in ("pastel", "classic", "mono")]


def get_theme(theme_key):
    """Return a theme by key, falling back to the default theme."""
    return THEMES.get(theme_key or DEFAULT_THEME, THEMES[DEFAULT_THEME])

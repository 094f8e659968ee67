"""Keyboard routing helpers for Stache."""

import curses

from ..utils import normalize_key_code
from .actions import AppAction

CTRL_C = 3


def _key_bindings():
    bindings = {
        9: AppAction.SWITCH_COLUMN,
        10: AppAction.TOGGLE,
        ord(' '): AppAction.TOGGLE,
        ord('k'): AppAction.MOVE_UP,
        ord('j'): AppAction.MOVE_DOWN,
        ord('b'): AppAction.PAGE_UP,
        ord('f'): AppAction.PAGE_DOWN,
        ord('g'): AppAction.GO_TOP,
        ord('G'): AppAction.GO_BOTTOM,
        ord('x'): AppAction.EMIT_PLAN,
        ord('y'): AppAction.COPY_PLAN,
        ord('q'): AppAction.QUIT,
        CTRL_C: AppAction.QUIT,
    }
    # Test doubles may expose only a subset of key constants.
    for name, action in (
        ('KEY_UP', AppAction.MOVE_UP),
        ('KEY_DOWN', AppAction.MOVE_DOWN),
        ('KEY_PPAGE', AppAction.PAGE_UP),
        ('KEY_NPAGE', AppAction.PAGE_DOWN),
        ('KEY_HOME', AppAction.GO_TOP),
        ('KEY_END', AppAction.GO_BOTTOM),
        ('KEY_ENTER', AppAction.TOGGLE),
        ('KEY_BTAB', AppAction.SWITCH_COLUMN),
    ):
        code = getattr(curses, name, None)
        if code is not None:
            bindings[code] = action
    return bindings


KEY_BINDINGS = _key_bindings()


def normalize_app_key(key):
    """Normalize key values from get_wch()/getch() into common control codes."""
    return normalize_key_code(key)


def action_for_key(key):
    """Map one raw key to an AppAction, or None when unbound."""
    key_code = normalize_app_key(key)
    if key_code is None:
        return None
    return KEY_BINDINGS.get(key_code)

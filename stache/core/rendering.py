"""Rendering helpers for Stache."""

import curses

from ..constants import (
    ASCII_BL, ASCII_BR, ASCII_H, ASCII_TL, ASCII_TR, ASCII_V,
    COLUMN_TITLES, HELP_TEXT, MIN_TERM_HEIGHT, MIN_TERM_WIDTH,
    SB_BL, SB_BR, SB_H, SB_TL, SB_TR, SB_V,
)
from ..utils import fit_text_to_cells, safe_addstr, theme_attr
from .navigation import AVAILABLE, COLUMNS

HEADER_ROWS = 3
STATUS_ROWS = 2


def box_chars(use_unicode):
    if use_unicode:
        return SB_TL, SB_TR, SB_BL, SB_BR, SB_H, SB_V
    return ASCII_TL, ASCII_TR, ASCII_BL, ASCII_BR, ASCII_H, ASCII_V


def column_layout(width):
    """Return ``(x, w)`` for the left and right column boxes."""
    left_w = width // 2
    right_w = max(0, width - left_w - 1)
    return (0, left_w), (left_w, right_w)


def terminal_too_small(h, w):
    return h < MIN_TERM_HEIGHT or w < MIN_TERM_WIDTH


def draw_too_small(app):
    h, w = app.stdscr.getmaxyx()
    msg = f'Terminal too small ({w}x{h}), need {MIN_TERM_WIDTH}x{MIN_TERM_HEIGHT}'
    safe_addstr(app.stdscr, h // 2, max(0, (w - len(msg)) // 2), msg, theme_attr('error'))


def draw_column(app, column, x, w, items, col_state, is_active):
    """Draw one bordered column with its visible slice of items."""
    if w < 4:
        return
    stdscr = app.stdscr
    tl, tr, bl, br, hz, vt = box_chars(app.use_unicode)
    vh = app.engine.nav.viewport_height
    inner = w - 2

    border_attr = theme_attr('border_active' if is_active else 'border_inactive')
    header_attr = theme_attr('header_available' if column == AVAILABLE else 'header_managed')

    safe_addstr(stdscr, 0, x, tl + hz * inner + tr, border_attr)
    title = f' {COLUMN_TITLES[column]} ({len(items)})'
    safe_addstr(stdscr, 1, x, vt, border_attr)
    safe_addstr(stdscr, 1, x + 1, fit_text_to_cells(title, inner), header_attr | curses.A_BOLD)
    safe_addstr(stdscr, 1, x + w - 1, vt, border_attr)
    safe_addstr(stdscr, 2, x, vt, border_attr)
    safe_addstr(stdscr, 2, x + 1, hz * inner, header_attr)
    safe_addstr(stdscr, 2, x + w - 1, vt, border_attr)

    body_attr = theme_attr('body')
    for k in range(vh):
        row_y = HEADER_ROWS + k
        idx = col_state.scroll_offset + k
        safe_addstr(stdscr, row_y, x, vt, border_attr)
        safe_addstr(stdscr, row_y, x + w - 1, vt, border_attr)
        if idx >= len(items):
            continue
        line = fit_text_to_cells(f' {items[idx].entry.label}', inner)
        attr = body_attr
        if is_active and idx == col_state.cursor:
            attr = theme_attr('selected')
        safe_addstr(stdscr, row_y, x + 1, line, attr)

    safe_addstr(stdscr, HEADER_ROWS + vh, x, bl + hz * inner + br, border_attr)


def draw_columns(app):
    """Draw both columns side by side."""
    _, w = app.stdscr.getmaxyx()
    nav = app.engine.nav
    for column, (x, col_w) in zip(COLUMNS, column_layout(w)):
        draw_column(
            app,
            column,
            x,
            col_w,
            app.engine.partition_for(column),
            nav.column(column),
            is_active=(column == nav.active_column),
        )


def draw_messages(app):
    """Draw the status message rows above the help line."""
    h, w = app.stdscr.getmaxyx()
    attr = theme_attr('error' if app.status_is_error else 'body')
    top = h - 2 - STATUS_ROWS
    for i, line in enumerate(app.status_lines[:STATUS_ROWS]):
        safe_addstr(app.stdscr, top + i, 1, line[: max(0, w - 2)], attr)


def draw_help(app):
    h, _ = app.stdscr.getmaxyx()
    safe_addstr(app.stdscr, h - 2, 1, HELP_TEXT, theme_attr('help'))


def draw_statusbar(app, version):
    """Draw the bottom status bar."""
    h, w = app.stdscr.getmaxyx()
    attr = theme_attr('status')
    available, managed = app.engine.lengths()
    text = (
        f' Stache v{version} | Available: {available} | Managed: {managed}'
        f' | Target: {app.target_path}'
    )
    safe_addstr(app.stdscr, h - 1, 0, ' ' * (w - 1), attr)
    safe_addstr(app.stdscr, h - 1, 0, text, attr)

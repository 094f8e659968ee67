"""Terminal bootstrap helpers for Stache startup."""

import curses


def configure_terminal(stdscr):
    """Apply core curses terminal setup.

    Raw mode delivers Ctrl+C as a key so it can be bound to quit, and also
    turns off XON/XOFF flow control.
    """
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.noecho()
    curses.raw()
    stdscr.keypad(True)
    stdscr.nodelay(False)
    stdscr.timeout(-1)

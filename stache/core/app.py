"""
Main Stache application class.
"""
import logging

from .. import __version__
from ..constants import CHROME_ROWS
from ..utils import check_unicode_support, init_colors
from .actions import ActionResult, ActionType, AppAction
from .bootstrap import configure_terminal
from .clipboard import copy_text
from .event_loop import run_app_loop
from .key_router import action_for_key
from .plan import format_plan, resolve_target_dir
from .rendering import (
    draw_columns,
    draw_help,
    draw_messages,
    draw_statusbar,
    draw_too_small,
    terminal_too_small,
)

LOGGER = logging.getLogger(__name__)


class StacheApp:
    """Curses front end around a ClassifierEngine."""

    def __init__(self, stdscr, engine, theme=None, setup_terminal=True):
        self.stdscr = stdscr
        self.engine = engine
        self.running = True
        self.use_unicode = check_unicode_support()
        self.status_lines = []
        self.status_is_error = False
        self.last_plan = None
        self.target_path = resolve_target_dir(engine.home_dir, engine.target_dir)

        if setup_terminal:
            configure_terminal(stdscr)
            init_colors(theme)
        self.engine.set_viewport_height(self.viewport_height())

    def viewport_height(self):
        h, _ = self.stdscr.getmaxyx()
        return max(1, h - CHROME_ROWS)

    # --- Input ---

    def handle_key(self, key):
        action = action_for_key(key)
        if action is None:
            LOGGER.debug('unbound key: %r', key)
            return None
        return self.execute_action(action)

    def handle_resize(self):
        self.engine.set_viewport_height(self.viewport_height())

    def execute_action(self, action):
        """Run one command and apply its result to the app state."""
        if action == AppAction.COPY_PLAN:
            result = self.copy_plan()
        else:
            result = self.engine.dispatch(action)
        self._apply_result(result)
        return result

    def copy_plan(self):
        operations = self.engine.plan()
        if not operations:
            return ActionResult(ActionType.INFO, 'No managed files to copy.')
        if not copy_text('\n'.join(format_plan(operations))):
            return ActionResult(ActionType.ERROR, 'Clipboard unavailable; plan not copied.')
        return ActionResult(ActionType.INFO, f'Copied plan for {len(operations)} file(s) to clipboard.')

    def _apply_result(self, result):
        if result.type == ActionType.QUIT:
            self.running = False
        elif result.type == ActionType.PLAN:
            self.last_plan = result.payload
            self._set_status(self._plan_summary(result.payload))
        elif result.type == ActionType.INFO:
            self._set_status([result.payload])
        elif result.type == ActionType.ERROR:
            self._set_status([result.payload], error=True)
        elif result.type == ActionType.REFRESH:
            self._set_status([])

    def _plan_summary(self, operations):
        if not operations:
            return ['Plan is empty: no managed files.']
        first = operations[0].describe()[0]
        more = f' (+{len(operations) - 1} more)' if len(operations) > 1 else ''
        return [
            f'Plan: {len(operations)} link(s) into {self.target_path}, printed on exit.',
            first + more,
        ]

    def _set_status(self, lines, error=False):
        self.status_lines = list(lines)
        self.status_is_error = error

    # --- Output ---

    def draw(self):
        h, w = self.stdscr.getmaxyx()
        if terminal_too_small(h, w):
            draw_too_small(self)
            return
        draw_columns(self)
        draw_messages(self)
        draw_help(self)
        draw_statusbar(self, __version__)

    def plan_lines(self):
        """Text of the last emitted plan, or an empty list."""
        if self.last_plan is None:
            return []
        return format_plan(self.last_plan)

    def run(self):
        run_app_loop(self)

    def cleanup(self):
        LOGGER.debug('session finished, managed=%d', self.engine.lengths()[1])

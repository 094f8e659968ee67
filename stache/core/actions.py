"""
Typed command contract between key routing, the engine and the app.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ActionType(str, Enum):
    """Outcome kinds returned by command handlers."""

    REFRESH = "refresh"
    NOOP = "noop"
    PLAN = "plan"
    INFO = "info"
    ERROR = "error"
    QUIT = "quit"


class AppAction(str, Enum):
    """The closed set of commands the app understands."""

    SWITCH_COLUMN = "switch_column"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    GO_TOP = "go_top"
    GO_BOTTOM = "go_bottom"
    TOGGLE = "toggle"
    EMIT_PLAN = "emit_plan"
    COPY_PLAN = "copy_plan"
    QUIT = "quit"


NAVIGATION_ACTIONS = frozenset({
    AppAction.SWITCH_COLUMN,
    AppAction.MOVE_UP,
    AppAction.MOVE_DOWN,
    AppAction.PAGE_UP,
    AppAction.PAGE_DOWN,
    AppAction.GO_TOP,
    AppAction.GO_BOTTOM,
    AppAction.TOGGLE,
})


@dataclass(frozen=True)
class ActionResult:
    """Message emitted by command handlers."""

    type: ActionType
    payload: Any = None

"""
Classification engine: store, navigation and the toggle between columns.
"""
from __future__ import annotations

import logging

from .actions import ActionResult, ActionType, AppAction
from .errors import IndexOutOfRange, NoSelection
from .navigation import AVAILABLE, MANAGED, NavigationState
from .plan import LinkOperation, plan
from .store import Entry, EntryStore, PartitionItem, partition

LOGGER = logging.getLogger(__name__)


class ClassifierEngine:
    """Owns the entry store and the navigation state for one session."""

    def __init__(self, store: EntryStore, home_dir: str, target_dir: str,
                 viewport_height: int = 10, strict: bool = False):
        self.store = store
        self.home_dir = home_dir
        self.target_dir = target_dir
        self.strict = bool(strict)
        self.nav = NavigationState(viewport_height=viewport_height)

    @classmethod
    def from_items(cls, items, home_dir, target_dir, **kwargs):
        return cls(EntryStore.load(items), home_dir, target_dir, **kwargs)

    # --- Views ---

    def partition_for(self, column: int) -> tuple[PartitionItem, ...]:
        return partition(self.store, column == MANAGED)

    def available(self) -> tuple[PartitionItem, ...]:
        return self.partition_for(AVAILABLE)

    def managed(self) -> tuple[PartitionItem, ...]:
        return self.partition_for(MANAGED)

    def lengths(self) -> tuple[int, int]:
        managed = sum(1 for entry in self.store.all() if entry.managed)
        return len(self.store) - managed, managed

    def active_length(self) -> int:
        return self.lengths()[self.nav.active_column]

    def selected_item(self):
        """Partition item under the active cursor, or None."""
        items = self.partition_for(self.nav.active_column)
        position = self.nav.selection(len(items))
        if position is None:
            return None
        return items[position]

    # --- Mutations ---

    def toggle(self, active_column: int, visible_position: int) -> Entry:
        """Move the entry at ``visible_position`` of ``active_column`` to the other column."""
        active_is_managed = active_column == MANAGED
        items = partition(self.store, active_is_managed)
        if not 0 <= visible_position < len(items):
            raise NoSelection(active_column, visible_position, len(items))
        store_index = items[visible_position].store_index
        entry = self.store.set_managed(store_index, not active_is_managed)
        LOGGER.debug('toggled %s -> managed=%s', entry.label, entry.managed)
        self.nav.reclamp_column(active_column, len(items) - 1)
        return entry

    def toggle_selected(self) -> Entry:
        column = self.nav.active_column
        return self.toggle(column, self.nav.active.cursor)

    def set_viewport_height(self, height: int):
        self.nav.set_viewport_height(height, self.lengths())

    def plan(self) -> tuple[LinkOperation, ...]:
        return plan(self.store, self.home_dir, self.target_dir)

    # --- Dispatch ---

    def dispatch(self, action: AppAction) -> ActionResult:
        """Apply one command and report what the caller should do next."""
        LOGGER.debug('dispatch: %s', action)
        nav = self.nav
        n = self.active_length()

        if action == AppAction.SWITCH_COLUMN:
            nav.switch_column()
        elif action == AppAction.MOVE_UP:
            nav.move_up()
        elif action == AppAction.MOVE_DOWN:
            nav.move_down(n)
        elif action == AppAction.PAGE_UP:
            nav.page_up(n)
        elif action == AppAction.PAGE_DOWN:
            nav.page_down(n)
        elif action == AppAction.GO_TOP:
            nav.go_top(n)
        elif action == AppAction.GO_BOTTOM:
            nav.go_bottom(n)
        elif action == AppAction.TOGGLE:
            return self._dispatch_toggle()
        elif action == AppAction.EMIT_PLAN:
            operations = self.plan()
            LOGGER.info('plan emitted with %d operation(s)', len(operations))
            return ActionResult(ActionType.PLAN, operations)
        elif action == AppAction.QUIT:
            return ActionResult(ActionType.QUIT)
        else:
            LOGGER.debug('engine ignores action: %s', action)
            return ActionResult(ActionType.NOOP)
        return ActionResult(ActionType.REFRESH)

    def _dispatch_toggle(self) -> ActionResult:
        try:
            entry = self.toggle_selected()
        except NoSelection as exc:
            LOGGER.debug('toggle ignored: %s', exc)
            return ActionResult(ActionType.NOOP)
        except IndexOutOfRange:
            if self.strict:
                raise
            LOGGER.error('toggle hit an invalid store index', exc_info=True)
            self.nav.reclamp(self.active_length())
            return ActionResult(ActionType.NOOP)
        return ActionResult(ActionType.REFRESH, entry)

import random
import unittest
from unittest import mock

from stache.core.actions import ActionType, AppAction, NAVIGATION_ACTIONS
from stache.core.engine import ClassifierEngine
from stache.core.errors import IndexOutOfRange, NoSelection
from stache.core.navigation import AVAILABLE, MANAGED
from stache.core.store import labels


def _engine(names, viewport_height=10, strict=False):
    items = [(name, f"/home/u/{name}") for name in names]
    return ClassifierEngine.from_items(
        items, "/home/u", ".stache", viewport_height=viewport_height, strict=strict
    )


class ToggleScenarioTests(unittest.TestCase):
    def test_toggle_out_and_back_restores_order(self):
        engine = _engine(["a", "b", "c"])

        moved = engine.toggle(AVAILABLE, 1)
        self.assertEqual(moved.label, "b")
        self.assertTrue(moved.managed)
        self.assertEqual(labels(engine.available()), ["a", "c"])
        self.assertEqual(labels(engine.managed()), ["b"])

        engine.toggle(MANAGED, 0)
        self.assertEqual(labels(engine.available()), ["a", "b", "c"])
        self.assertEqual(labels(engine.managed()), [])

    def test_moved_entry_lands_in_discovery_order(self):
        engine = _engine(["a", "b", "c", "d"])
        engine.toggle(AVAILABLE, 3)  # d
        engine.toggle(AVAILABLE, 0)  # a
        engine.toggle(AVAILABLE, 1)  # c
        self.assertEqual(labels(engine.managed()), ["a", "c", "d"])
        self.assertEqual(labels(engine.available()), ["b"])

    def test_toggle_invalid_position_raises_no_selection(self):
        engine = _engine(["a"])
        with self.assertRaises(NoSelection):
            engine.toggle(MANAGED, 0)
        with self.assertRaises(NoSelection):
            engine.toggle(AVAILABLE, 1)
        with self.assertRaises(NoSelection):
            engine.toggle(AVAILABLE, -1)
        self.assertEqual(labels(engine.available()), ["a"])

    def test_toggle_last_row_pulls_cursor_back(self):
        engine = _engine(["a", "b", "c"])
        engine.dispatch(AppAction.GO_BOTTOM)
        self.assertEqual(engine.nav.active.cursor, 2)

        result = engine.dispatch(AppAction.TOGGLE)

        self.assertEqual(result.type, ActionType.REFRESH)
        self.assertEqual(result.payload.label, "c")
        self.assertEqual(engine.nav.active.cursor, 1)
        self.assertEqual(engine.selected_item().entry.label, "b")

    def test_toggle_middle_row_keeps_cursor_position(self):
        engine = _engine(["a", "b", "c"])
        engine.dispatch(AppAction.MOVE_DOWN)
        engine.dispatch(AppAction.TOGGLE)
        self.assertEqual(engine.nav.active.cursor, 1)
        self.assertEqual(engine.selected_item().entry.label, "c")

    def test_toggle_on_inactive_column_reclamps_that_column(self):
        engine = _engine(["a", "b"])
        engine.toggle(AVAILABLE, 0)
        engine.toggle(AVAILABLE, 0)
        engine.nav.columns[MANAGED].cursor = 1
        engine.toggle(MANAGED, 1)
        self.assertEqual(engine.nav.columns[MANAGED].cursor, 0)
        self.assertEqual(engine.nav.active_column, AVAILABLE)


class DispatchTests(unittest.TestCase):
    def test_navigation_actions_refresh(self):
        engine = _engine(["a", "b"])
        for action in NAVIGATION_ACTIONS - {AppAction.TOGGLE}:
            self.assertEqual(engine.dispatch(action).type, ActionType.REFRESH)

    def test_switch_then_toggle_back(self):
        engine = _engine(["a", "b", "c"])
        engine.dispatch(AppAction.MOVE_DOWN)
        engine.dispatch(AppAction.TOGGLE)
        engine.dispatch(AppAction.SWITCH_COLUMN)
        self.assertEqual(engine.nav.active_column, MANAGED)
        self.assertEqual(engine.selected_item().entry.label, "b")
        engine.dispatch(AppAction.TOGGLE)
        self.assertEqual(labels(engine.available()), ["a", "b", "c"])
        self.assertIsNone(engine.selected_item())

    def test_toggle_on_empty_column_is_noop(self):
        engine = _engine(["a"])
        engine.dispatch(AppAction.SWITCH_COLUMN)
        with self.assertLogs("stache.core.engine", level="DEBUG") as logs:
            result = engine.dispatch(AppAction.TOGGLE)
        self.assertEqual(result.type, ActionType.NOOP)
        self.assertTrue(any("toggle ignored" in line for line in logs.output))
        self.assertEqual(labels(engine.available()), ["a"])

    def test_empty_store_is_safe(self):
        engine = _engine([])
        for action in (AppAction.MOVE_UP, AppAction.MOVE_DOWN, AppAction.TOGGLE,
                       AppAction.PAGE_DOWN, AppAction.GO_BOTTOM, AppAction.SWITCH_COLUMN,
                       AppAction.TOGGLE):
            engine.dispatch(action)
        self.assertEqual(engine.lengths(), (0, 0))
        self.assertEqual(engine.nav.active.cursor, 0)
        self.assertEqual(engine.dispatch(AppAction.EMIT_PLAN).payload, ())

    def test_index_out_of_range_is_clamped_outside_strict_mode(self):
        engine = _engine(["a", "b"])
        with mock.patch.object(engine.store, "set_managed", side_effect=IndexOutOfRange(7, 2)):
            with self.assertLogs("stache.core.engine", level="ERROR"):
                result = engine.dispatch(AppAction.TOGGLE)
        self.assertEqual(result.type, ActionType.NOOP)
        self.assertEqual(labels(engine.available()), ["a", "b"])

    def test_index_out_of_range_propagates_in_strict_mode(self):
        engine = _engine(["a", "b"], strict=True)
        with mock.patch.object(engine.store, "set_managed", side_effect=IndexOutOfRange(7, 2)):
            with self.assertRaises(IndexOutOfRange):
                engine.dispatch(AppAction.TOGGLE)

    def test_emit_plan_and_quit(self):
        engine = _engine(["a", "b"])
        engine.dispatch(AppAction.MOVE_DOWN)
        engine.dispatch(AppAction.TOGGLE)

        result = engine.dispatch(AppAction.EMIT_PLAN)
        self.assertEqual(result.type, ActionType.PLAN)
        self.assertEqual([op.source for op in result.payload], ["/home/u/b"])
        self.assertEqual(engine.dispatch(AppAction.QUIT).type, ActionType.QUIT)

    def test_engine_ignores_actions_it_does_not_own(self):
        engine = _engine(["a"])
        self.assertEqual(engine.dispatch(AppAction.COPY_PLAN).type, ActionType.NOOP)

    def test_set_viewport_height_uses_current_lengths(self):
        engine = _engine([str(i) for i in range(20)], viewport_height=10)
        engine.dispatch(AppAction.GO_BOTTOM)
        engine.set_viewport_height(4)
        self.assertEqual(engine.nav.active.cursor, 19)
        self.assertEqual(engine.nav.active.scroll_offset, 16)


class InvariantPropertyTests(unittest.TestCase):
    ACTIONS = [
        AppAction.SWITCH_COLUMN,
        AppAction.MOVE_UP,
        AppAction.MOVE_DOWN,
        AppAction.MOVE_DOWN,
        AppAction.PAGE_UP,
        AppAction.PAGE_DOWN,
        AppAction.GO_TOP,
        AppAction.GO_BOTTOM,
        AppAction.TOGGLE,
        AppAction.TOGGLE,
        AppAction.TOGGLE,
    ]

    def _check(self, engine, discovery):
        available = engine.available()
        managed = engine.managed()
        store = engine.store

        # completeness and disjointness
        self.assertEqual(len(available) + len(managed), len(store))
        avail_idx = [item.store_index for item in available]
        managed_idx = [item.store_index for item in managed]
        self.assertFalse(set(avail_idx) & set(managed_idx))

        # store order never changes, each partition follows it
        self.assertEqual([e.label for e in store.all()], discovery)
        self.assertEqual(avail_idx, sorted(avail_idx))
        self.assertEqual(managed_idx, sorted(managed_idx))

        # cursor validity for both columns
        nav = engine.nav
        for column, n in zip((AVAILABLE, MANAGED), engine.lengths()):
            col = nav.column(column)
            self.assertGreaterEqual(col.cursor, 0)
            self.assertLess(col.cursor, max(1, n))
            if n > nav.viewport_height:
                self.assertLessEqual(col.scroll_offset, col.cursor)
                self.assertLess(col.cursor, col.scroll_offset + nav.viewport_height)
            else:
                self.assertEqual(col.scroll_offset, 0)

    def test_random_command_sequences_keep_invariants(self):
        rng = random.Random(1234)
        for size in (0, 1, 2, 5, 13, 40):
            discovery = [f".f{i:02d}" for i in range(size)]
            engine = _engine(discovery, viewport_height=rng.randint(1, 6))
            for step in range(300):
                engine.dispatch(rng.choice(self.ACTIONS))
                if step % 50 == 0:
                    engine.set_viewport_height(rng.randint(1, 8))
                self._check(engine, discovery)

    def test_toggle_twice_restores_classification_and_position(self):
        rng = random.Random(99)
        discovery = [f".f{i}" for i in range(12)]
        engine = _engine(discovery)
        for idx in rng.sample(range(12), 5):
            engine.store.set_managed(idx, True)

        for _ in range(30):
            column = rng.choice((AVAILABLE, MANAGED))
            items = engine.partition_for(column)
            if not items:
                continue
            before_available = labels(engine.available())
            before_managed = labels(engine.managed())
            position = rng.randrange(len(items))

            entry = engine.toggle(column, position)
            other = MANAGED if column == AVAILABLE else AVAILABLE
            new_position = labels(engine.partition_for(other)).index(entry.label)
            engine.toggle(other, new_position)

            self.assertEqual(labels(engine.available()), before_available)
            self.assertEqual(labels(engine.managed()), before_managed)


if __name__ == "__main__":
    unittest.main()

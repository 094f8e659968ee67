"""Cursor and scroll bookkeeping for the two columns."""

from __future__ import annotations

from dataclasses import dataclass, field

AVAILABLE = 0
MANAGED = 1
COLUMNS = (AVAILABLE, MANAGED)


@dataclass
class ColumnCursor:
    """Cursor row and first visible row of one column."""

    cursor: int = 0
    scroll_offset: int = 0

    def reset(self):
        self.cursor = 0
        self.scroll_offset = 0


@dataclass
class NavigationState:
    """Navigation over whichever column is active.

    Every operation leaves the active column with
    ``0 <= cursor < max(1, n)`` and, when the column is taller than the
    viewport, ``scroll_offset <= cursor < scroll_offset + viewport_height``.
    Columns that fit in the viewport always have ``scroll_offset == 0``.
    """

    viewport_height: int = 10
    active_column: int = AVAILABLE
    columns: list = field(default_factory=lambda: [ColumnCursor(), ColumnCursor()])

    def __post_init__(self):
        self.viewport_height = max(1, int(self.viewport_height))

    @property
    def active(self) -> ColumnCursor:
        return self.columns[self.active_column]

    def column(self, index: int) -> ColumnCursor:
        return self.columns[index]

    def selection(self, n: int):
        """Return the active cursor row, or None when the column is empty."""
        if n <= 0:
            return None
        return self.active.cursor

    def move_up(self):
        col = self.active
        col.cursor = max(0, col.cursor - 1)
        if col.cursor < col.scroll_offset:
            col.scroll_offset = col.cursor

    def move_down(self, n: int):
        if n <= 0:
            return
        col = self.active
        col.cursor = min(n - 1, col.cursor + 1)
        if col.cursor >= col.scroll_offset + self.viewport_height:
            col.scroll_offset = col.cursor - self.viewport_height + 1

    def page_up(self, n: int):
        col = self.active
        col.cursor = max(0, col.cursor - self.viewport_height)
        self._fit_window(col, n)

    def page_down(self, n: int):
        if n <= 0:
            return
        col = self.active
        col.cursor = min(n - 1, col.cursor + self.viewport_height)
        self._fit_window(col, n)

    def go_top(self, n: int):
        col = self.active
        col.cursor = 0
        self._fit_window(col, n)

    def go_bottom(self, n: int):
        col = self.active
        col.cursor = max(0, n - 1)
        self._fit_window(col, n)

    def switch_column(self) -> int:
        """Activate the other column, starting it from the top."""
        self.active_column = MANAGED if self.active_column == AVAILABLE else AVAILABLE
        self.active.reset()
        return self.active_column

    def reclamp(self, n: int):
        """Re-validate the active column after its length changed to ``n``."""
        self._reclamp_column(self.active, n)

    def reclamp_column(self, index: int, n: int):
        self._reclamp_column(self.columns[index], n)

    def set_viewport_height(self, height: int, lengths=(0, 0)):
        """Resize the viewport and re-validate both columns."""
        self.viewport_height = max(1, int(height))
        for col, n in zip(self.columns, lengths):
            self._reclamp_column(col, n)

    def _reclamp_column(self, col: ColumnCursor, n: int):
        if col.cursor >= n:
            col.cursor = max(0, n - 1)
        if col.cursor < 0:
            col.cursor = 0
        self._fit_window(col, n)

    def _fit_window(self, col: ColumnCursor, n: int):
        height = self.viewport_height
        if n <= height:
            col.scroll_offset = 0
            return
        if col.cursor < col.scroll_offset:
            col.scroll_offset = col.cursor
        elif col.cursor >= col.scroll_offset + height:
            col.scroll_offset = col.cursor - height + 1
        col.scroll_offset = max(0, min(col.scroll_offset, n - height))

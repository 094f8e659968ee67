"""Exceptions raised by the classification engine."""


class StacheError(Exception):
    """Base class for Stache errors."""


class IndexOutOfRange(StacheError, IndexError):
    """Entry store addressed outside ``0 <= index < len(store)``."""

    def __init__(self, index, size):
        super().__init__(f"store index {index} out of range for {size} entries")
        self.index = index
        self.size = size


class NoSelection(StacheError):
    """Toggle requested where the active column has nothing under the cursor."""

    def __init__(self, column, position, size):
        super().__init__(f"no entry at position {position} in column {column} ({size} rows)")
        self.column = column
        self.position = position
        self.size = size

"""
Entry store and the partition views derived from it.

The store keeps every discovered file in discovery order and never reorders
it. Classification lives in a per-entry flag, so each column is a filtered
projection of the same sequence rather than a list of its own.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, NamedTuple

from .errors import IndexOutOfRange

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    """One candidate file found in the home directory."""

    label: str
    path: str
    managed: bool = False


class PartitionItem(NamedTuple):
    """An entry paired with its position in the store."""

    store_index: int
    entry: Entry


class EntryStore:
    """Ordered, fixed-length collection of entries."""

    def __init__(self, entries: Iterable[Entry] = ()):
        self._entries = list(entries)

    @classmethod
    def load(cls, items: Iterable[tuple[str, str]]) -> "EntryStore":
        """Build a store from ``(label, path)`` pairs, all unmanaged."""
        store = cls(Entry(label, path) for label, path in items)
        LOGGER.debug("loaded %d entries", len(store))
        return store

    def all(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    def set_managed(self, index: int, value: bool) -> Entry:
        """Set the classification flag of the entry at ``index``."""
        size = len(self._entries)
        if not isinstance(index, int) or not 0 <= index < size:
            raise IndexOutOfRange(index, size)
        updated = replace(self._entries[index], managed=bool(value))
        self._entries[index] = updated
        return updated

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(tuple(self._entries))

    def __getitem__(self, index):
        return self._entries[index]


def partition(store: EntryStore, want_managed: bool) -> tuple[PartitionItem, ...]:
    """Return entries whose flag equals ``want_managed``, in store order."""
    return tuple(
        PartitionItem(idx, entry)
        for idx, entry in enumerate(store.all())
        if entry.managed == want_managed
    )


def labels(items: Iterable[PartitionItem]) -> list[str]:
    return [item.entry.label for item in items]

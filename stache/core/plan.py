"""Link plan for the managed column.

The plan only describes what would be linked. Creating the links, handling
existing targets and permissions is left to whoever consumes it.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

from .store import EntryStore, partition


@dataclass(frozen=True)
class LinkOperation:
    """Intended link of one managed file into the target directory."""

    source: str
    target_dir: str
    target_path: str

    def describe(self) -> list[str]:
        return [
            f"Linking {self.source} to {self.target_dir}",
            f"Final location: {self.target_path}",
        ]


def resolve_target_dir(home_dir: str, target_dir: str) -> str:
    """Return ``target_dir`` as an absolute path, relative ones under ``home_dir``."""
    expanded = os.path.expanduser(target_dir)
    if os.path.isabs(expanded):
        return os.path.normpath(expanded)
    return os.path.normpath(os.path.join(home_dir, expanded))


def plan(store: EntryStore, home_dir: str, target_dir: str) -> tuple[LinkOperation, ...]:
    """One operation per managed entry, in store order. Touches no files."""
    target = resolve_target_dir(home_dir, target_dir)
    return tuple(
        LinkOperation(
            source=item.entry.path,
            target_dir=target,
            target_path=os.path.join(target, item.entry.label),
        )
        for item in partition(store, True)
    )


def format_plan(operations: Iterable[LinkOperation]) -> list[str]:
    lines = []
    for op in operations:
        lines.extend(op.describe())
    return lines

"""Ordering of listing levels by name, extension, or modification time."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import replace
from enum import Enum

from .types import Entry, Snapshot


class SortMode(str, Enum):
    NAME = "name"
    EXTENSION = "extension"
    TIME = "time"


def name_key(entry: Entry) -> bytes:
    """Byte-wise sort key for a filename."""
    return os.fsencode(entry.name)


def extension_of(name: str) -> str:
    """Return the substring from the last ``.`` on, or ``""`` when absent."""
    dot = name.rfind(".")
    if dot < 0:
        return ""
    return name[dot:]


def sort_entries(entries: Iterable[Entry], mode: SortMode, reverse: bool = False) -> list[Entry]:
    """Return ``entries`` ordered for display.

    Name and extension modes invert the comparison when ``reverse`` is set.
    Time mode lists newest first and ``reverse`` switches to oldest first;
    equal timestamps keep ascending name order in both directions.
    """
    if mode is SortMode.TIME:
        by_name = sorted(entries, key=name_key)
        return sorted(by_name, key=lambda entry: entry.mtime, reverse=not reverse)
    if mode is SortMode.EXTENSION:
        return sorted(
            entries,
            key=lambda entry: (os.fsencode(extension_of(entry.name)), name_key(entry)),
            reverse=reverse,
        )
    return sorted(entries, key=name_key, reverse=reverse)


def sort_snapshot(snapshot: Snapshot, mode: SortMode, reverse: bool = False) -> Snapshot:
    """Return a new snapshot with entries in display order."""
    return replace(snapshot, entries=tuple(sort_entries(snapshot.entries, mode, reverse)))


__all__ = [
    "SortMode",
    "name_key",
    "extension_of",
    "sort_entries",
    "sort_snapshot",
]

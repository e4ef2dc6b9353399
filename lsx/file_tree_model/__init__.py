"""Listing domain model and filesystem-backed metadata source.

This package is the boundary between raw ``lstat`` data and rendering:
``types`` holds the immutable entries, ``fs`` reads one level at a time,
and ``sorting`` orders a level for display.
"""

from __future__ import annotations

from .fs import ListingError, entry_from_path, list_directory_entries, load_snapshot, matches_pattern
from .sorting import SortMode, extension_of, name_key, sort_entries, sort_snapshot
from .types import Entry, EntryKind, Snapshot

__all__ = [
    "Entry",
    "EntryKind",
    "Snapshot",
    "ListingError",
    "entry_from_path",
    "list_directory_entries",
    "load_snapshot",
    "matches_pattern",
    "SortMode",
    "extension_of",
    "name_key",
    "sort_entries",
    "sort_snapshot",
]

"""Immutable listing options resolved once per invocation."""

from __future__ import annotations

from dataclasses import dataclass

from .file_tree_model.sorting import SortMode

# Depth used by -R; large but finite so expansion always terminates.
INFINITE_DEPTH = 999


@dataclass(frozen=True)
class ListingOptions:
    show_hidden: bool = False
    long_format: bool = False
    human_readable: bool = False
    omit_group: bool = False
    add_slash: bool = False
    show_inode: bool = False
    reverse: bool = False
    sort_by_extension: bool = False
    sort_by_time: bool = False
    numeric_ids: bool = False
    comma_mode: bool = False
    quote_names: bool = False
    depth: int = 0
    pattern: str | None = None

    @property
    def sort_mode(self) -> SortMode:
        """Time sort wins over extension sort when both are requested."""
        if self.sort_by_time:
            return SortMode.TIME
        if self.sort_by_extension:
            return SortMode.EXTENSION
        return SortMode.NAME


__all__ = [
    "INFINITE_DEPTH",
    "ListingOptions",
]

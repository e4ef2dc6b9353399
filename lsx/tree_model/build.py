"""Inline subtree enumeration beneath a directory row.

Enumeration is kept separate from emission: :func:`iter_inline_rows` yields
plain records and never formats or prints, so tree shape can be tested
without capturing output. Only one level's entries are held per frame.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from ..file_tree_model.fs import list_directory_entries
from ..file_tree_model.sorting import sort_entries
from ..file_tree_model.types import Entry
from ..glyphs import GlyphTable
from ..options import ListingOptions

logger = logging.getLogger(__name__)

INDENT_SEGMENT = "  "


@dataclass(frozen=True)
class InlineRow:
    """One nested entry with its tree position."""

    entry: Entry
    level: int
    is_last: bool
    prefix: str


def indent_prefix(level: int, is_last: bool, glyphs: GlyphTable) -> str:
    """Return the dimmed tree prefix for a row nested ``level`` deep."""
    if level <= 0:
        return ""
    branch = glyphs.branch_last if is_last else glyphs.branch_mid
    return INDENT_SEGMENT * (level - 1) + INDENT_SEGMENT + branch


def iter_inline_rows(
    directory: Path,
    options: ListingOptions,
    glyphs: GlyphTable,
    level: int = 1,
) -> Iterator[InlineRow]:
    """Yield rows for ``directory``'s children, depth first.

    Stops once ``level`` exceeds ``options.depth``, so depth ``N`` shows ``N``
    nested levels and depth ``0`` yields nothing. A directory that cannot be
    read contributes no rows.
    """
    if options.depth <= 0 or level > options.depth:
        return

    entries, scan_error = list_directory_entries(directory, options.show_hidden, options.pattern)
    if scan_error is not None:
        logger.debug("skipping unreadable subtree %s: %s", directory, scan_error)
        return

    ordered = sort_entries(entries, options.sort_mode, options.reverse)
    last_index = len(ordered) - 1
    for index, child in enumerate(ordered):
        is_last = index == last_index
        yield InlineRow(
            entry=child,
            level=level,
            is_last=is_last,
            prefix=indent_prefix(level, is_last, glyphs),
        )
        if child.is_dir:
            yield from iter_inline_rows(child.path, options, glyphs, level + 1)


__all__ = [
    "INDENT_SEGMENT",
    "InlineRow",
    "indent_prefix",
    "iter_inline_rows",
]

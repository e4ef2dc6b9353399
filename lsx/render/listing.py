"""Listing orchestration: load, sort, frame, and write one box.

``render_box_lines`` and ``render_comma_line`` are pure with respect to
output; ``render_listing`` is the only function that writes to a stream.
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from ..file_tree_model.fs import load_snapshot
from ..file_tree_model.sorting import sort_snapshot
from ..file_tree_model.types import Entry, Snapshot
from ..glyphs import GlyphTable
from ..options import ListingOptions
from ..tree_model.build import iter_inline_rows
from ..ui_theme import UITheme
from .box import BoxRenderer
from .rows import IdResolver, format_comma_item, format_long_row, format_simple_row, long_format_columns


def render_comma_line(snapshot: Snapshot, options: ListingOptions, theme: UITheme) -> str:
    """Return every top-level name on one line separated by ``", "``."""
    return ", ".join(format_comma_item(entry, options, theme) for entry in snapshot.entries)


def render_box_lines(
    snapshot: Snapshot,
    options: ListingOptions,
    *,
    width: int,
    glyphs: GlyphTable,
    theme: UITheme,
    now: float | None = None,
    ids: IdResolver | None = None,
) -> Iterator[str]:
    """Yield the box for an already sorted snapshot, one line at a time.

    Nested directories are read lazily while lines are consumed.
    """
    box = BoxRenderer(glyphs, theme)
    current_time = time.time() if now is None else now
    resolver = ids if ids is not None else IdResolver(numeric=options.numeric_ids)

    def format_row(entry: Entry, prefix: str = "") -> str:
        if options.long_format:
            content = format_long_row(entry, options, theme, resolver, current_time, prefix)
        else:
            content = format_simple_row(entry, options, theme, prefix)
        return box.row(width, content)

    yield box.border_top(width)
    yield from box.header_row(width, str(snapshot.path))
    if options.long_format:
        yield from box.column_header_row(width, long_format_columns(options))

    for entry in snapshot.entries:
        yield format_row(entry)
        if options.depth > 0 and entry.is_dir:
            for inline in iter_inline_rows(entry.path, options, glyphs):
                yield format_row(inline.entry, inline.prefix)

    yield box.border_bottom(width)
    yield f"{theme.muted}  {len(snapshot)} items total{theme.reset}"


def render_listing(
    target: Path,
    options: ListingOptions,
    *,
    width: int,
    glyphs: GlyphTable,
    theme: UITheme,
    out: TextIO,
) -> int:
    """Render ``target`` to ``out`` and return the top-level item count.

    Raises ``ListingError`` before writing anything when the target is
    unreadable.
    """
    snapshot = sort_snapshot(
        load_snapshot(target, options.show_hidden, options.pattern),
        options.sort_mode,
        options.reverse,
    )
    if options.comma_mode:
        out.write(render_comma_line(snapshot, options, theme) + "\n")
        return len(snapshot)

    for line in render_box_lines(snapshot, options, width=width, glyphs=glyphs, theme=theme):
        out.write(line + "\n")
    return len(snapshot)


__all__ = [
    "render_comma_line",
    "render_box_lines",
    "render_listing",
]

"""Bordered box drawing sized to a fixed column width.

All methods return single lines without trailing newlines. A content row is
padded so its visible width equals the box width; content wider than the box
is not truncated and pushes the right border out.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..ansi import visible_width
from ..glyphs import GlyphTable
from ..ui_theme import UITheme

APP_TITLE = "lsx"


@dataclass(frozen=True)
class Column:
    """One fixed-width field of the long-format column header."""

    label: str
    width: int = 0
    align_right: bool = False
    gap: int = 1

    def render(self, color: str, reset: str) -> str:
        if self.align_right:
            text = self.label.rjust(self.width)
        else:
            text = self.label.ljust(self.width)
        return f"{color}{text}{reset}" + " " * self.gap


class BoxRenderer:
    def __init__(self, glyphs: GlyphTable, theme: UITheme) -> None:
        self.glyphs = glyphs
        self.theme = theme

    def _border(self, width: int, left: str, right: str) -> str:
        interior = max(1, width - 2)
        return f"{self.theme.border}{left}{self.glyphs.horizontal * interior}{right}{self.theme.reset}"

    def border_top(self, width: int) -> str:
        return self._border(width, self.glyphs.top_left, self.glyphs.top_right)

    def border_mid(self, width: int) -> str:
        return self._border(width, self.glyphs.junction_left, self.glyphs.junction_right)

    def border_bottom(self, width: int) -> str:
        return self._border(width, self.glyphs.bottom_left, self.glyphs.bottom_right)

    def row(self, width: int, content: str) -> str:
        """Frame ``content`` as ``│ content<pad>│`` spanning ``width`` columns."""
        inner = max(1, width - 2)
        padding = max(0, inner - (1 + visible_width(content)))
        edge = f"{self.theme.border}{self.glyphs.vertical}{self.theme.reset}"
        return f"{edge} {content}{' ' * padding}{edge}"

    def header_row(self, width: int, title: str) -> list[str]:
        """Return the title row followed by its separating mid border."""
        theme = self.theme
        content = f"{theme.title}{APP_TITLE}{theme.reset} {title}"
        return [self.row(width, content), self.border_mid(width)]

    def column_header_row(self, width: int, columns: Sequence[Column]) -> list[str]:
        """Return the long-format column names followed by a mid border."""
        theme = self.theme
        content = "".join(column.render(theme.column_header, theme.reset) for column in columns)
        return [self.row(width, content), self.border_mid(width)]


__all__ = [
    "APP_TITLE",
    "Column",
    "BoxRenderer",
]

"""Inline tree expansion for nested directory rows."""

from __future__ import annotations

from .build import INDENT_SEGMENT, InlineRow, indent_prefix, iter_inline_rows

__all__ = [
    "INDENT_SEGMENT",
    "InlineRow",
    "indent_prefix",
    "iter_inline_rows",
]

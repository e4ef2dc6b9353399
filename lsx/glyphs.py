"""Box-drawing glyph tables and process-level glyph selection.

The table is resolved once at startup and passed into renderers; nothing in
the render path reads the environment or locale again.
"""

from __future__ import annotations

import locale
import os
from collections.abc import Mapping
from dataclasses import dataclass

ASCII_ENV_VAR = "LSX_ASCII"


@dataclass(frozen=True)
class GlyphTable:
    """The eight border glyphs plus tree-branch markers."""

    name: str
    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    junction_left: str
    junction_right: str
    branch_last: str
    branch_mid: str


UNICODE_GLYPHS = GlyphTable(
    name="unicode",
    horizontal="─",
    vertical="│",
    top_left="┌",
    top_right="┐",
    bottom_left="└",
    bottom_right="┘",
    junction_left="├",
    junction_right="┤",
    branch_last="└─ ",
    branch_mid="├─ ",
)

ASCII_GLYPHS = GlyphTable(
    name="ascii",
    horizontal="-",
    vertical="|",
    top_left="+",
    top_right="+",
    bottom_left="+",
    bottom_right="+",
    junction_left="+",
    junction_right="+",
    branch_last="`- ",
    branch_mid="|- ",
)


def locale_supports_utf8(ctype: str | None = None) -> bool:
    """Return whether the active ``LC_CTYPE`` names a UTF-8 codeset."""
    if ctype is None:
        try:
            ctype = locale.setlocale(locale.LC_CTYPE)
        except locale.Error:
            return False
    normalized = (ctype or "").upper().replace("-", "")
    return "UTF8" in normalized


def resolve_glyphs(
    env: Mapping[str, str] | None = None,
    *,
    force_ascii: bool = False,
    ctype: str | None = None,
) -> GlyphTable:
    """Pick the glyph table for this process.

    ``LSX_ASCII`` (any non-empty value) and ``force_ascii`` win over locale
    detection. Without them, Unicode glyphs are used only when the locale's
    character type is UTF-8.
    """
    environ = os.environ if env is None else env
    if force_ascii or environ.get(ASCII_ENV_VAR):
        return ASCII_GLYPHS
    if locale_supports_utf8(ctype):
        return UNICODE_GLYPHS
    return ASCII_GLYPHS


__all__ = [
    "ASCII_ENV_VAR",
    "GlyphTable",
    "UNICODE_GLYPHS",
    "ASCII_GLYPHS",
    "locale_supports_utf8",
    "resolve_glyphs",
]

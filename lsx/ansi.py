"""ANSI-aware text measurement for box layout.

Every padding decision in the box renderer goes through :func:`visible_width`.
Escape sequences count as zero columns and wide glyphs as two, so the right
border stays aligned when names carry color codes or CJK text.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[^@-~]*[@-~]?")

# Characters with no advance of their own besides combining marks.
_ZERO_WIDTH_CHARS = frozenset({"\u200b", "\u200c", "\u200d", "\u2060", "\ufeff"})


def char_display_width(ch: str) -> int:
    """Return terminal column width for one decoded character.

    Combining marks and zero-width joiners take no columns, East Asian
    wide/fullwidth characters take two. Control characters and undecodable
    bytes (surrogate escapes) count as one column.
    """
    code = ord(ch)
    if 0xDC80 <= code <= 0xDCFF:
        return 1
    if code < 0x20 or 0x7F <= code < 0xA0:
        return 1
    if ch in _ZERO_WIDTH_CHARS or unicodedata.combining(ch):
        return 0
    if unicodedata.category(ch) == "Mn":
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def _as_text(text: str | bytes) -> str:
    if isinstance(text, bytes):
        # Each undecodable byte becomes its own surrogate and measures 1 column.
        return text.decode("utf-8", errors="surrogateescape")
    return text


def visible_width(text: str | bytes) -> int:
    """Return the number of terminal columns ``text`` occupies.

    A CSI sequence is ``ESC [`` followed by any non-final bytes and terminated
    by the first byte in ``@``..``~``; it contributes nothing, including when
    it is unterminated at the end of the string. ``bytes`` input is decoded as
    UTF-8 with malformed bytes counted one column each.
    """
    value = _as_text(text)
    cols = 0
    i = 0
    n = len(value)
    while i < n:
        if value[i] == "\x1b" and i + 1 < n and value[i + 1] == "[":
            match = ANSI_ESCAPE_RE.match(value, i)
            if match:
                i = match.end()
                continue
        cols += char_display_width(value[i])
        i += 1
    return cols


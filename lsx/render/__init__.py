"""Box, row, and listing rendering.

Everything here produces text; only ``render_listing`` writes to a stream.
"""

from __future__ import annotations

from .box import APP_TITLE, BoxRenderer, Column
from .listing import render_box_lines, render_comma_line, render_listing

__all__ = [
    "APP_TITLE",
    "BoxRenderer",
    "Column",
    "render_box_lines",
    "render_comma_line",
    "render_listing",
]

"""Terminal width probing.

The width is read once per invocation and reused for every border and row.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

logger = logging.getLogger(__name__)

MIN_WIDTH = 20
MAX_WIDTH = 1000
DEFAULT_WIDTH = 80


def clamp_width(value: int) -> int:
    """Clamp a column count to the renderable range."""
    return max(MIN_WIDTH, min(MAX_WIDTH, int(value)))


def width_from_fd(fd: int) -> int:
    """Return the window width of a tty ``fd``, or ``0`` when unavailable."""
    try:
        if fd < 0 or not os.isatty(fd):
            return 0
        return int(os.get_terminal_size(fd).columns)
    except OSError:
        return 0


def _width_from_env(env: Mapping[str, str]) -> int:
    raw = env.get("COLUMNS", "").strip()
    if not raw:
        return 0
    digits = ""
    for ch in raw.lstrip("+"):
        if not ch.isdigit():
            break
        digits += ch
    if not digits:
        return 0
    return int(digits)


def _stream_fd(stream) -> int:
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return -1


def _controlling_tty_width() -> int:
    try:
        fd = os.open("/dev/tty", os.O_RDONLY)
    except OSError:
        return 0
    try:
        return width_from_fd(fd)
    finally:
        os.close(fd)


def terminal_width(env: Mapping[str, str] | None = None) -> int:
    """Resolve the render width.

    Probes stdout, then ``COLUMNS``, then stdin and stderr, then the
    controlling terminal. The first positive answer is clamped to
    ``[20, 1000]``; with no answer the width is 80.
    """
    environ = os.environ if env is None else env
    probes = (
        lambda: width_from_fd(_stream_fd(sys.stdout)),
        lambda: _width_from_env(environ),
        lambda: width_from_fd(_stream_fd(sys.stdin)),
        lambda: width_from_fd(_stream_fd(sys.stderr)),
        _controlling_tty_width,
    )
    for probe in probes:
        width = probe()
        if width > 0:
            return clamp_width(width)
    logger.debug("terminal width unavailable, using %d", DEFAULT_WIDTH)
    return DEFAULT_WIDTH


__all__ = [
    "MIN_WIDTH",
    "MAX_WIDTH",
    "DEFAULT_WIDTH",
    "clamp_width",
    "width_from_fd",
    "terminal_width",
]

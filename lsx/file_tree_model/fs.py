"""Filesystem scanning for listing levels.

This is the only module that touches the filesystem for metadata. Each call
re-reads the directory, so two levels of one render never share entries.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .types import Entry, EntryKind, Snapshot

logger = logging.getLogger(__name__)


class ListingError(Exception):
    """Raised when the listing target itself cannot be read."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot access '{path}': {reason}")


def matches_pattern(name: str, pattern: str | None) -> bool:
    """Return whether ``name`` passes a ``*.ext`` style filter.

    Only patterns starting with ``*.`` filter anything; they match names whose
    final extension (including the dot) equals the pattern's suffix. Any other
    pattern accepts every name.
    """
    if not pattern:
        return True
    if pattern.startswith("*."):
        dot = name.rfind(".")
        if dot < 0:
            return False
        return name[dot:] == pattern[1:]
    return True


def _entry_from_stat(name: str, path: Path, st: os.stat_result | None) -> Entry:
    if st is None:
        return Entry(name=name, path=path, kind=EntryKind.OTHER)
    return Entry(
        name=name,
        path=path,
        kind=EntryKind.from_mode(st.st_mode),
        mode=st.st_mode,
        size=int(st.st_size),
        mtime=float(st.st_mtime),
        uid=int(st.st_uid),
        gid=int(st.st_gid),
        inode=int(st.st_ino),
    )


def entry_from_path(path: Path) -> Entry:
    """Build one entry from ``lstat(path)``; raises ``OSError`` on failure."""
    st = os.lstat(path)
    name = path.name or str(path)
    return _entry_from_stat(name, path, st)


def list_directory_entries(
    directory: Path,
    show_hidden: bool,
    pattern: str | None = None,
) -> tuple[list[Entry], OSError | None]:
    """List one directory's visible entries in scan order.

    Returns ``(entries, scan_error)``. ``scan_error`` is set when the directory
    cannot be opened or scanned; in that case ``entries`` is empty. A child
    whose ``lstat`` fails is still listed, with kind ``other``.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as scanned:
            for child in scanned:
                name = child.name
                if name in {".", ".."}:
                    continue
                if not show_hidden and name.startswith("."):
                    continue
                if not matches_pattern(name, pattern):
                    continue
                try:
                    st = child.stat(follow_symlinks=False)
                except OSError as exc:
                    logger.debug("lstat failed for %s: %s", child.path, exc)
                    st = None
                entries.append(_entry_from_stat(name, Path(child.path), st))
    except OSError as exc:
        return [], exc
    return entries, None


def load_snapshot(target: Path, show_hidden: bool, pattern: str | None = None) -> Snapshot:
    """Load the top-level snapshot for a listing target.

    A directory yields its children. A target that is not a directory falls
    back to a single-entry snapshot describing the target itself. Any other
    failure raises :class:`ListingError`.
    """
    entries, scan_error = list_directory_entries(target, show_hidden, pattern)
    if scan_error is None:
        return Snapshot(path=target, entries=tuple(entries))
    if not isinstance(scan_error, NotADirectoryError):
        raise ListingError(target, scan_error)

    try:
        entry = entry_from_path(target)
    except OSError as exc:
        raise ListingError(target, exc) from exc
    return Snapshot(path=target, entries=(entry,))


__all__ = [
    "ListingError",
    "matches_pattern",
    "entry_from_path",
    "list_directory_entries",
    "load_snapshot",
]

"""Row payload formatting for simple and long listings.

Functions here build the colored text placed between the box borders. Long
format fields are fixed-width, so columns line up without measuring content.
"""

from __future__ import annotations

import grp
import pwd
import stat
import time
from functools import lru_cache

from ..file_tree_model.types import Entry
from ..options import ListingOptions
from ..ui_theme import UITheme
from .box import Column

ID_FIELD_WIDTH = 8
INODE_FIELD_WIDTH = 8
PERMS_FIELD_WIDTH = 10
SIZE_FIELD_WIDTH = 10
TIME_FIELD_WIDTH = 12
DIR_SIZE_LABEL = "<DIR>"
UNKNOWN_TIME = "??? ?? ??:??"
RECENT_SECONDS = 60 * 60 * 24 * 2
LARGE_FILE_BYTES = 50 * 1024 * 1024
HUGE_FILE_BYTES = 1024 * 1024 * 1024

_PERMISSION_BITS: tuple[tuple[int, str], ...] = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


@lru_cache(maxsize=256)
def _user_name(uid: int) -> str | None:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return None


@lru_cache(maxsize=256)
def _group_name(gid: int) -> str | None:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return None


class IdResolver:
    """Map uid/gid values to display text, falling back to the number."""

    def __init__(self, numeric: bool = False) -> None:
        self.numeric = numeric

    def owner(self, uid: int) -> str:
        if self.numeric:
            return str(uid)
        name = _user_name(uid)
        return name[:ID_FIELD_WIDTH] if name else str(uid)

    def group(self, gid: int) -> str:
        if self.numeric:
            return str(gid)
        name = _group_name(gid)
        return name[:ID_FIELD_WIDTH] if name else str(gid)


def entry_icon(entry: Entry, theme: UITheme) -> tuple[str, str]:
    """Return ``(icon, name_color)`` for an entry.

    Directory wins over symlink, symlink over owner-executable, executable
    over hidden.
    """
    if entry.is_dir:
        return "D", theme.name_dir
    if entry.is_symlink:
        return "@", theme.name_symlink
    if entry.executable:
        return "*", theme.name_exec
    if entry.hidden:
        return ".", theme.name_hidden
    return "-", theme.name_plain


def display_name(entry: Entry, quote: bool) -> str:
    return f'"{entry.name}"' if quote else entry.name


def format_name_cell(entry: Entry, options: ListingOptions, theme: UITheme) -> str:
    """Icon, optional quotes, and optional trailing slash for one entry."""
    icon, name_color = entry_icon(entry, theme)
    cell = f"{theme.icon}{icon}{theme.reset} {name_color}{display_name(entry, options.quote_names)}{theme.reset}"
    if options.add_slash and entry.is_dir:
        cell += f"{theme.muted}/{theme.reset}"
    return cell


def _prefix_cell(prefix: str, theme: UITheme) -> str:
    if not prefix:
        return ""
    return f"{theme.muted}{prefix}{theme.reset}"


def format_simple_row(entry: Entry, options: ListingOptions, theme: UITheme, prefix: str = "") -> str:
    return _prefix_cell(prefix, theme) + format_name_cell(entry, options, theme)


def permission_string(mode: int, theme: UITheme) -> str:
    """Return the colored 10-character ``drwxr-xr-x`` style field."""
    if stat.S_ISDIR(mode):
        parts = [f"{theme.perm_type_dir}d{theme.reset}"]
    elif stat.S_ISLNK(mode):
        parts = [f"{theme.perm_type_link}l{theme.reset}"]
    else:
        parts = [f"{theme.muted}-{theme.reset}"]

    colors = {"r": theme.perm_read, "w": theme.perm_write, "x": theme.perm_exec}
    for bit, letter in _PERMISSION_BITS:
        if mode & bit:
            parts.append(f"{colors[letter]}{letter}{theme.reset}")
        else:
            parts.append(f"{theme.muted}-{theme.reset}")
    return "".join(parts)


def format_size(size: int, human_readable: bool) -> str:
    """Format a byte count as raw digits or a one-decimal B/K/M/G label."""
    if not human_readable:
        return str(size)
    if size < 1024:
        return f"{size}B"
    if size < 1024 * 1024:
        return f"{size / 1024.0:.1f}K"
    if size < 1024 * 1024 * 1024:
        return f"{size / (1024.0 * 1024.0):.1f}M"
    return f"{size / (1024.0 * 1024.0 * 1024.0):.1f}G"


def size_color(entry: Entry, theme: UITheme) -> str:
    if entry.is_dir:
        return theme.size_dir
    if entry.size >= HUGE_FILE_BYTES:
        return theme.size_huge
    if entry.size >= LARGE_FILE_BYTES:
        return theme.size_large
    return theme.size_small


def format_mtime(mtime: float) -> str:
    """Format a timestamp as local ``Mon DD HH:MM``."""
    try:
        local = time.localtime(mtime)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN_TIME
    return time.strftime("%b %d %H:%M", local)


def format_long_row(
    entry: Entry,
    options: ListingOptions,
    theme: UITheme,
    ids: IdResolver,
    now: float,
    prefix: str = "",
) -> str:
    """Build one long-format row.

    Field order: inode (with ``-i``), permissions, owner, group (unless
    ``-g``), size, modification time, then the icon and name cell.
    """
    parts = [_prefix_cell(prefix, theme)]
    reset = theme.reset

    if options.show_inode:
        parts.append(f"{theme.inode}{entry.inode:<{INODE_FIELD_WIDTH}}{reset} ")

    parts.append(permission_string(entry.mode, theme) + " ")

    parts.append(f"{theme.owner}{ids.owner(entry.uid):<{ID_FIELD_WIDTH}}{reset} ")
    if not options.omit_group:
        parts.append(f"{theme.owner}{ids.group(entry.gid):<{ID_FIELD_WIDTH}}{reset} ")

    size_text = DIR_SIZE_LABEL if entry.is_dir else format_size(entry.size, options.human_readable)
    parts.append(f"{size_color(entry, theme)}{size_text:>{SIZE_FIELD_WIDTH}}{reset}  ")

    time_color = theme.time_recent if now - entry.mtime < RECENT_SECONDS else theme.muted
    parts.append(f"{time_color}{format_mtime(entry.mtime):<{TIME_FIELD_WIDTH}}{reset}  ")

    parts.append(format_name_cell(entry, options, theme))
    return "".join(parts)


def long_format_columns(options: ListingOptions) -> list[Column]:
    """Column header layout matching :func:`format_long_row` field widths."""
    columns: list[Column] = []
    if options.show_inode:
        columns.append(Column("INODE", INODE_FIELD_WIDTH))
    columns.append(Column("PERMS", PERMS_FIELD_WIDTH))
    if options.numeric_ids:
        owner_label, group_label = "UID", "GID"
    else:
        owner_label, group_label = "OWNER", "GROUP"
    columns.append(Column(owner_label, ID_FIELD_WIDTH))
    if not options.omit_group:
        columns.append(Column(group_label, ID_FIELD_WIDTH))
    columns.append(Column("SIZE", SIZE_FIELD_WIDTH, align_right=True, gap=2))
    columns.append(Column("MODIFIED", TIME_FIELD_WIDTH, gap=2))
    columns.append(Column("NAME", gap=0))
    return columns


def format_comma_item(entry: Entry, options: ListingOptions, theme: UITheme) -> str:
    """Colored name for comma mode; executable is checked before symlink."""
    if entry.is_dir:
        color = theme.list_dir
    elif entry.executable:
        color = theme.list_exec
    elif entry.is_symlink:
        color = theme.list_symlink
    else:
        color = theme.list_plain
    return f"{color}{display_name(entry, options.quote_names)}{theme.reset}"


__all__ = [
    "IdResolver",
    "entry_icon",
    "display_name",
    "format_name_cell",
    "format_simple_row",
    "permission_string",
    "format_size",
    "size_color",
    "format_mtime",
    "format_long_row",
    "long_format_columns",
    "format_comma_item",
]

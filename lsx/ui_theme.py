"""ANSI palette definitions and selection helpers.

Every colored fragment of a listing comes from a ``UITheme`` field, so
``--no-color`` swaps in ``PLAIN_THEME`` and the output carries no escapes.
"""

from __future__ import annotations

from dataclasses import dataclass

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
CYAN = "\033[36m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
MAGENTA = "\033[35m"
RED = "\033[31m"
WHITE = "\033[97m"
GRAY = "\033[37m"
BG_CYAN = "\033[46;30m"


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    border: str
    title: str
    column_header: str
    icon: str
    name_dir: str
    name_symlink: str
    name_exec: str
    name_hidden: str
    name_plain: str
    list_dir: str
    list_exec: str
    list_symlink: str
    list_plain: str
    muted: str
    inode: str
    owner: str
    perm_type_dir: str
    perm_type_link: str
    perm_read: str
    perm_write: str
    perm_exec: str
    size_dir: str
    size_small: str
    size_large: str
    size_huge: str
    time_recent: str


DEFAULT_THEME = UITheme(
    name="default",
    reset=RESET,
    border=WHITE,
    title=BG_CYAN + BOLD,
    column_header=YELLOW + BOLD,
    icon=WHITE,
    name_dir=CYAN + BOLD,
    name_symlink=MAGENTA + BOLD,
    name_exec=GREEN + BOLD,
    name_hidden=DIM + MAGENTA,
    name_plain=RESET,
    list_dir=CYAN,
    list_exec=GREEN,
    list_symlink=MAGENTA,
    list_plain=RESET,
    muted=DIM + GRAY,
    inode=MAGENTA,
    owner=CYAN,
    perm_type_dir=CYAN + BOLD,
    perm_type_link=MAGENTA + BOLD,
    perm_read=GREEN,
    perm_write=YELLOW,
    perm_exec=RED + BOLD,
    size_dir=CYAN + BOLD,
    size_small=GREEN,
    size_large=YELLOW + BOLD,
    size_huge=RED + BOLD,
    time_recent=GREEN + BOLD,
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    title="",
    column_header="",
    icon="",
    name_dir="",
    name_symlink="",
    name_exec="",
    name_hidden="",
    name_plain="",
    list_dir="",
    list_exec="",
    list_symlink="",
    list_plain="",
    muted="",
    inode="",
    owner="",
    perm_type_dir="",
    perm_type_link="",
    perm_read="",
    perm_write="",
    perm_exec="",
    size_dir="",
    size_small="",
    size_large="",
    size_huge="",
    time_recent="",
)


def resolve_theme(*, no_color: bool = False) -> UITheme:
    """Return concrete theme for the requested color mode."""
    if no_color:
        return PLAIN_THEME
    return DEFAULT_THEME


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "resolve_theme",
]

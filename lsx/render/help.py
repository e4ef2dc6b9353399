"""Usage and environment help text."""

from __future__ import annotations

USAGE_OPTION_LINES: tuple[tuple[str, str], ...] = (
    ("-a", "Show all files including hidden"),
    ("-l", "Long format (table)"),
    ("-h", "Human readable sizes (with -l)"),
    ("-g", "Omit group column"),
    ("-F", "Add slash to directories"),
    ("-i", "Show inode numbers"),
    ("-R", "Recursive listing (infinite inline depth)"),
    ("-D N", "Inline depth inside one box (like tree -L). Example: -D 5"),
    ("--depth N", "Same as -D"),
    ("-r", "Reverse sort order"),
    ("-X", "Sort by extension"),
    ("-t", "Sort by modification time"),
    ("-n", "Show numeric UIDs/GIDs"),
    ("-m", "Comma-separated output"),
    ("-Q", "Quote filenames"),
    ("--width N", "Render width in columns (default: terminal width)"),
    ("--no-color", "Disable ANSI colors"),
    ("--help", "Show this help and exit"),
)

USAGE_ENV_LINES: tuple[tuple[str, str], ...] = (
    ("LSX_ASCII=1", "Force ASCII borders (no UTF-8 box drawing)"),
    ("LSX_DEBUG=1", "Log skipped subtrees and probes to stderr"),
    ("COLUMNS=N", "Width used when no terminal is attached"),
)


def usage_text(prog: str = "lsx") -> str:
    """Return the full usage message, newline terminated."""
    lines = [f"Usage: {prog} [OPTIONS] [DIRECTORY|FILE|*.EXT]", "Options:"]
    lines.extend(f"  {flag:<14}{text}" for flag, text in USAGE_OPTION_LINES)
    lines.append("")
    lines.append("Environment:")
    lines.extend(f"  {name:<14}{text}" for name, text in USAGE_ENV_LINES)
    return "\n".join(lines) + "\n"


__all__ = [
    "USAGE_OPTION_LINES",
    "USAGE_ENV_LINES",
    "usage_text",
]

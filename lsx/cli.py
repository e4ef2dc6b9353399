"""Command-line front door for lsx.

Parses flags, merges config-file defaults, and resolves the target, glyph
table, palette, and width once. Then renders a single listing.
"""

from __future__ import annotations

import argparse
import locale
import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from .config import load_listing_defaults
from .file_tree_model.fs import ListingError
from .glyphs import resolve_glyphs
from .options import INFINITE_DEPTH, ListingOptions
from .render.help import usage_text
from .render.listing import render_listing
from .terminal import clamp_width, terminal_width
from .ui_theme import resolve_theme

logger = logging.getLogger(__name__)

DEBUG_ENV_VAR = "LSX_DEBUG"


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        sys.stderr.write(usage_text(self.prog))
        self.exit(1, f"{self.prog}: {message}\n")


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _depth_int(value: str) -> int:
    """argparse type for depth values; range is checked after parsing."""
    try:
        return int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid depth value: {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="lsx", add_help=False)
    parser.add_argument("path", nargs="?", default=None)
    parser.add_argument("-a", dest="show_hidden", action="store_true")
    parser.add_argument("-l", dest="long_format", action="store_true")
    parser.add_argument("-h", dest="human_readable", action="store_true")
    parser.add_argument("-g", dest="omit_group", action="store_true")
    parser.add_argument("-F", dest="add_slash", action="store_true")
    parser.add_argument("-i", dest="show_inode", action="store_true")
    parser.add_argument("-R", dest="recursive", action="store_true")
    parser.add_argument("-D", "--depth", dest="depth", type=_depth_int, default=None)
    parser.add_argument("-r", dest="reverse", action="store_true")
    parser.add_argument("-X", dest="sort_by_extension", action="store_true")
    parser.add_argument("-t", dest="sort_by_time", action="store_true")
    parser.add_argument("-n", dest="numeric_ids", action="store_true")
    parser.add_argument("-m", dest="comma_mode", action="store_true")
    parser.add_argument("-Q", dest="quote_names", action="store_true")
    parser.add_argument("--width", type=_positive_int, default=None)
    parser.add_argument("--no-color", dest="no_color", action="store_true")
    parser.add_argument("--help", dest="show_help", action="store_true")
    return parser


def configure_logging(env: Mapping[str, str] | None = None) -> None:
    environ = os.environ if env is None else env
    level = logging.DEBUG if environ.get(DEBUG_ENV_VAR) else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def resolve_target(raw: str | None, default_path: Path) -> tuple[Path, str | None]:
    """Return ``(target, pattern)`` for the positional argument.

    An argument containing ``*`` is a filter over the current directory.
    """
    if raw is None:
        return default_path, None
    if "*" in raw:
        return Path("."), raw
    return Path(raw), None


def build_options(args: argparse.Namespace, defaults: dict[str, object], pattern: str | None) -> ListingOptions:
    """Merge parsed flags over config defaults; flags only turn options on."""

    def flag(name: str) -> bool:
        return bool(getattr(args, name)) or bool(defaults.get(name, False))

    if args.depth is not None:
        depth = args.depth
    else:
        depth = int(defaults.get("depth", 0))  # type: ignore[arg-type]
    if args.recursive and depth == 0:
        depth = INFINITE_DEPTH

    return ListingOptions(
        show_hidden=flag("show_hidden"),
        long_format=flag("long_format"),
        human_readable=flag("human_readable"),
        omit_group=flag("omit_group"),
        add_slash=flag("add_slash"),
        show_inode=args.show_inode,
        reverse=args.reverse,
        sort_by_extension=args.sort_by_extension,
        sort_by_time=args.sort_by_time,
        numeric_ids=flag("numeric_ids"),
        comma_mode=args.comma_mode,
        quote_names=flag("quote_names"),
        depth=depth,
        pattern=pattern,
    )


def _prepare_stdout() -> None:
    """Write undecodable filename bytes back out unchanged."""
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def _silence_stdout() -> None:
    # Route the final flush at interpreter exit away from the closed pipe.
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and print one listing.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is listed. Exits with status 1 on bad flags or an unreadable
    target.
    """
    configure_logging()
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error as exc:
        logger.debug("locale setup failed: %s", exc)

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.show_help:
        sys.stdout.write(usage_text(parser.prog))
        return
    if args.depth is not None and args.depth < 0:
        raise SystemExit("lsx: --depth must be >= 0")

    defaults = load_listing_defaults()
    if default_path is None:
        default_path = Path.cwd()
    target, pattern = resolve_target(args.path, default_path)
    options = build_options(args, defaults, pattern)

    glyphs = resolve_glyphs(force_ascii=bool(defaults.get("ascii_borders", False)))
    theme = resolve_theme(no_color=args.no_color or bool(defaults.get("no_color", False)))
    width = clamp_width(args.width) if args.width is not None else terminal_width()

    _prepare_stdout()
    try:
        render_listing(target, options, width=width, glyphs=glyphs, theme=theme, out=sys.stdout)
        sys.stdout.flush()
    except ListingError as exc:
        raise SystemExit(f"lsx: {exc}") from exc
    except BrokenPipeError:
        _silence_stdout()
        raise SystemExit(1)


if __name__ == "__main__":
    main()

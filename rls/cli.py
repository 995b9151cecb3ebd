"""Command-line front door for rls.

Parses CLI options over config-file defaults, resolves the target path, and
prints the listing table. Collection failures become one warning line on
stderr and exit status 1.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import NoReturn

from .config import load_listing_defaults
from .errors import ListingError
from .listing import ListingOptions, render_listing
from .ui_theme import available_theme_names

WARNING_MARKER = "⚠"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rls",
        description="List a directory as a table with sizes, relative times, and git status.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument("-a", "--all", action="store_true", help="Include entries whose names start with '.'.")
    parser.add_argument("-t", "--time", action="store_true", help="Sort by modification time, newest first.")
    parser.add_argument("-r", "--reverse", action="store_true", help="Reverse the final order.")
    parser.add_argument("-g", "--git", action="store_true", help="Append git change summaries to entry names.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    return parser


def _fail(message: str) -> NoReturn:
    sys.stderr.write(f"{WARNING_MARKER} {message}\n")
    raise SystemExit(1)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the listing for a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Flags only switch features on; the config file decides
    what is on by default.
    """
    args = _build_parser().parse_args()
    defaults = load_listing_defaults()

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    if not path.exists():
        _fail(f"path not found: {path}")

    options = ListingOptions(
        path=path,
        show_hidden=args.all or defaults.show_hidden,
        sort_by_modified=args.time or defaults.sort_by_modified,
        reverse=args.reverse,
        show_git_status=args.git or defaults.show_git_status,
        no_color=args.no_color or bool(os.environ.get("NO_COLOR")),
        theme=args.theme if args.theme is not None else defaults.theme,
    )
    try:
        output = render_listing(options)
    except ListingError as exc:
        _fail(str(exc))
    sys.stdout.write(output)


if __name__ == "__main__":
    main()

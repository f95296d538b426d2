"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("frontcheck")
    except PackageNotFoundError:
        return "0.0.0"


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("must be zero or greater")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="frontcheck")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    titles_parser = subparsers.add_parser("titles", help="Check the title field of every document")
    titles_parser.add_argument("path", nargs="?", default=None, help="Content directory or file (default: docs_dir)")
    titles_parser.add_argument(
        "--fix",
        action="store_true",
        help='Wrap unquoted titles containing ":" in double quotes, rewriting files in place',
    )
    titles_parser.add_argument("--config", default=None, help="Path to frontcheck.json")
    titles_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    seo_parser = subparsers.add_parser("seo", help="Report title/description/keywords coverage")
    seo_parser.add_argument("path", nargs="?", default=None, help="Content directory or file (default: docs_dir)")
    seo_parser.add_argument(
        "--min-keywords",
        type=_non_negative_int,
        default=None,
        help="Keyword count below which a document needs optimization (default: 3)",
    )
    seo_parser.add_argument("--json", action="store_true", help="Print the summary as JSON")
    seo_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any document needs optimization",
    )
    seo_parser.add_argument("--config", default=None, help="Path to frontcheck.json")
    seo_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]

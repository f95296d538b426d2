"""Shared CLI helpers."""

from __future__ import annotations

import argparse
from pathlib import Path

from frontcheck.config import FrontcheckConfig
from frontcheck.scan.discovery import discover_documents


def display_path(path: Path | None, *, cwd: Path | None = None) -> str:
    if path is None:
        return "<text>"
    base = (cwd or Path.cwd()).resolve()
    try:
        return path.resolve().relative_to(base).as_posix()
    except ValueError:
        return str(path)


def plural(count: int, noun: str, suffix: str = "s") -> str:
    return f"{count} {noun}{suffix if count != 1 else ''}"


def content_root(args: argparse.Namespace, config: FrontcheckConfig) -> Path:
    if args.path:
        return Path(args.path).expanduser()
    return config.docs_dir


def collect_documents(root: Path, config: FrontcheckConfig) -> list[Path]:
    return discover_documents(root, extensions=config.extensions, skip_dirs=config.skip_dirs)

"""Locate the documents to process under a content root."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from frontcheck.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".md",)
DEFAULT_SKIP_DIRS = ("node_modules", ".git", "dist", ".vitepress")


def _log_walk_error(exc: OSError) -> None:
    logger.warning("cannot list directory %s: %s", exc.filename, exc.strerror)


def discover_documents(
    root: Path,
    *,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
) -> list[Path]:
    """Return every matching file under *root*, in a stable walk order.

    A *root* that is itself a file is returned as the only document.

    Raises:
        ConfigError: If *root* does not exist.
    """
    if not root.exists():
        raise ConfigError(f"content path not found: {root}")
    if root.is_file():
        return [root]

    suffixes = tuple(extensions)
    skipped = set(skip_dirs)
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames[:] = sorted(name for name in dirnames if name not in skipped)
        found.extend(Path(dirpath) / name for name in sorted(filenames) if name.endswith(suffixes))
    logger.debug("discovered %d documents under %s", len(found), root)
    return found

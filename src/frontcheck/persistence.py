"""Write fixed documents back to disk."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from frontcheck.exceptions import DocumentWriteError


def _staging_path(path: Path) -> Path:
    return path.with_name(f".{path.name}.frontcheck-tmp")


def write_document(path: Path, text: str) -> None:
    """Replace the contents of *path* with *text*, leaving line endings as given.

    The text is written to a sibling file first and moved over *path*, so a
    failed write leaves the original document untouched.

    Raises:
        DocumentWriteError: If the file cannot be written.
    """
    staging = _staging_path(path)
    try:
        with staging.open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        shutil.copymode(path, staging)
        os.replace(staging, path)
    except OSError as exc:
        staging.unlink(missing_ok=True)
        raise DocumentWriteError(path, str(exc)) from exc

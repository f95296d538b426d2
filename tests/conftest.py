"""Shared test fixtures for frontcheck tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from frontcheck.config import FrontcheckConfig

WriteDoc = Callable[[str, str], Path]


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """An empty content root."""
    root = tmp_path / "docs"
    root.mkdir()
    return root


@pytest.fixture
def write_doc(docs_dir: Path) -> WriteDoc:
    """Write a document under ``docs_dir`` and return its path."""

    def _write(relative: str, text: str) -> Path:
        path = docs_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def sample_config(docs_dir: Path) -> FrontcheckConfig:
    """Default configuration pointed at ``docs_dir``."""
    return FrontcheckConfig(docs_dir=docs_dir)


@pytest.fixture
def blog_tree(write_doc: WriteDoc) -> dict[str, Path]:
    """A small content tree covering every title finding."""
    return {
        "valid": write_doc("golang/valid.md", '---\ntitle: "Valid Title"\n---\n\nBody.\n'),
        "colon": write_doc("golang/colon.md", "---\ntitle: Hello: World\ndate: 2024-01-01\n---\n\nBody: text\n"),
        "missing_title": write_doc("php/no-title.md", "---\ndate: 2024-01-01\n---\nBody\n"),
        "empty_title": write_doc("php/empty.md", '---\ntitle: ""\n---\n'),
        "no_block": write_doc("notes.md", "# Just a heading\n"),
        "home": write_doc("index.md", "---\nlayout: home\nhero:\n  name: Blog\n---\n"),
    }

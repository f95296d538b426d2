"""Configuration for a frontcheck run.

:class:`FrontcheckConfig` is loaded from an optional ``frontcheck.json`` and
carries every setting discovery, the title check, and the SEO report need.
CLI flags override individual values.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from frontcheck.checks.seo import DEFAULT_MIN_KEYWORDS, DEFAULT_SKIP_FILES
from frontcheck.checks.title import DEFAULT_EXEMPT_LAYOUTS
from frontcheck.exceptions import ConfigError
from frontcheck.scan.discovery import DEFAULT_EXTENSIONS, DEFAULT_SKIP_DIRS

DEFAULT_CONFIG_NAME = "frontcheck.json"


class FrontcheckConfig(BaseModel):
    """Top-level configuration.

    Attributes:
        docs_dir: Content root scanned when no path is given on the command line.
        extensions: File suffixes treated as documents.
        skip_dirs: Directory names never descended into.
        exempt_layouts: ``layout`` values for which a missing title is allowed.
        seo_skip_files: File names left out of the SEO report.
        min_keywords: Keyword count below which a document needs optimization.
    """

    docs_dir: Path = Path("docs")
    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    skip_dirs: list[str] = Field(default_factory=lambda: list(DEFAULT_SKIP_DIRS))
    exempt_layouts: list[str] = Field(default_factory=lambda: list(DEFAULT_EXEMPT_LAYOUTS))
    seo_skip_files: list[str] = Field(default_factory=lambda: list(DEFAULT_SKIP_FILES))
    min_keywords: int = Field(default=DEFAULT_MIN_KEYWORDS, ge=0)

    model_config = {"extra": "forbid"}


def load_config(path: str | Path) -> FrontcheckConfig:
    """Load *path*, resolving a relative ``docs_dir`` against its directory.

    Raises:
        ConfigError: If the file is unreadable, not JSON, or fails validation.
    """
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = FrontcheckConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    if parsed.docs_dir.is_absolute():
        return parsed
    return parsed.model_copy(update={"docs_dir": (config_path.parent / parsed.docs_dir).resolve()})


def resolve_config(path: str | Path | None, *, cwd: Path | None = None) -> FrontcheckConfig:
    """Load an explicit config file, else ``./frontcheck.json`` if present, else defaults."""
    if path is not None:
        return load_config(path)
    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
    if candidate.is_file():
        return load_config(candidate)
    return FrontcheckConfig()

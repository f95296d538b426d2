"""Custom exception hierarchy for frontcheck.

All frontcheck exceptions inherit from :class:`FrontcheckError`, making it easy
to catch any library error with a single ``except`` clause while still allowing
callers to handle specific failure modes.

Validation findings are never raised; they are collected as
:class:`~frontcheck.models.Issue` values. Only I/O and configuration problems
use exceptions.
"""

from __future__ import annotations

from pathlib import Path


class FrontcheckError(Exception):
    """Base exception for all frontcheck errors."""


class ConfigError(FrontcheckError):
    """Raised when the configuration file or CLI options are invalid."""


class DocumentIOError(FrontcheckError):
    """Base class for failures reading or writing a single document.

    Attributes:
        path: The document that could not be accessed.
        reason: The underlying OS error message.
    """

    action = "access"

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to {self.action} {path}: {reason}")


class DocumentReadError(DocumentIOError):
    """Raised when a document cannot be read or decoded."""

    action = "read"


class DocumentWriteError(DocumentIOError):
    """Raised when a fixed document cannot be written back."""

    action = "write"

"""Enumerated types used across frontcheck."""

from __future__ import annotations

from enum import StrEnum


class IssueKind(StrEnum):
    """Kinds of findings reported for a document."""

    MISSING_FRONT_MATTER = "MissingFrontMatter"
    MISSING_TITLE = "MissingTitle"
    EMPTY_TITLE = "EmptyTitle"
    UNQUOTED_COLON = "UnquotedColon"
    MISMATCHED_QUOTES = "MismatchedQuotes"
    UNREADABLE_FILE = "UnreadableFile"
    WRITE_FAILURE = "WriteFailure"

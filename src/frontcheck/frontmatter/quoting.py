"""Helpers for the quoting state of frontmatter values."""

from __future__ import annotations

QUOTE_CHARS = ('"', "'")


def is_quoted(value: str) -> bool:
    """Return True when *value* is wrapped in one matching pair of quotes."""
    if len(value) < 2:
        return False
    return value[0] in QUOTE_CHARS and value[-1] == value[0]


def opens_quote(value: str) -> bool:
    return bool(value) and value[0] in QUOTE_CHARS


def unquote(value: str) -> str:
    """Strip one matching pair of surrounding quotes, if present."""
    if is_quoted(value):
        return value[1:-1]
    return value


def double_quote(value: str) -> str:
    """Wrap *value* in double quotes, escaping characters YAML would interpret."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'

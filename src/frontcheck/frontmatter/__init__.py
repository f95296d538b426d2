"""Frontmatter parsing and quoting helpers."""

from frontcheck.frontmatter.parser import (
    BOUNDARY_MARKER,
    find_block_bounds,
    has_frontmatter,
    parse_fields,
    parse_frontmatter,
    split_lines,
)
from frontcheck.frontmatter.quoting import double_quote, is_quoted, opens_quote, unquote

__all__ = [
    "BOUNDARY_MARKER",
    "double_quote",
    "find_block_bounds",
    "has_frontmatter",
    "is_quoted",
    "opens_quote",
    "parse_fields",
    "parse_frontmatter",
    "split_lines",
    "unquote",
]

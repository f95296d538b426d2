"""Line-based reader for the ``---`` delimited metadata block of a document.

Only the subset of YAML that blog frontmatter actually uses is understood::

    ---
    title: "Hello: World"
    description: first line
      continued on a second line
    keywords:
      - python
      - yaml
    ---

Anything else degrades to partial results; the parser never raises on
malformed input.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from frontcheck.models.document import Document, MetadataBlock, MetadataField

logger = logging.getLogger(__name__)

BOUNDARY_MARKER = "---"

_LINE_SPLIT = re.compile(r"\r?\n")
_KEY_LINE = re.compile(r"^([A-Za-z_][\w.-]*)\s*:\s*(.*)$")
_DASH_ITEM = re.compile(r"^-\s*(.+)$")
# Inline values need a space after the dash so that ``offset: -5`` stays a scalar.
_INLINE_DASH_ITEM = re.compile(r"^-(?:\s+(.+))?$")


@dataclass
class _PendingField:
    key: str
    line: int
    end_line: int
    parts: list[str] = field(default_factory=list)
    is_list: bool = False

    def build(self) -> MetadataField:
        value: str | list[str]
        if self.is_list:
            value = list(self.parts)
        else:
            value = "\n".join(self.parts).strip()
        return MetadataField(key=self.key, value=value, line=self.line, end_line=self.end_line)


def split_lines(text: str) -> list[str]:
    return _LINE_SPLIT.split(text)


def find_block_bounds(lines: list[str]) -> tuple[int, int] | None:
    """Return ``(0, closing_index)`` for a well-formed block, else ``None``."""
    if not lines or lines[0].lstrip("\ufeff").strip() != BOUNDARY_MARKER:
        return None
    for index in range(1, len(lines)):
        if lines[index].strip() == BOUNDARY_MARKER:
            return 0, index
    return None


def _dash_item(stripped: str) -> str | None:
    match = _DASH_ITEM.match(stripped)
    return match.group(1).strip() if match else None


def parse_fields(lines: list[str], *, offset: int = 0) -> dict[str, MetadataField]:
    """Parse the lines strictly between the boundary markers.

    *offset* is the absolute index of ``lines[0]`` in the document so the
    recorded field positions can be used to rewrite the original text.
    """
    fields: dict[str, MetadataField] = {}
    current: _PendingField | None = None

    for position, line in enumerate(lines, start=offset):
        stripped = line.strip()
        if not stripped:
            continue

        key_match = _KEY_LINE.match(line.rstrip())
        if key_match:
            if current is not None:
                fields[current.key] = current.build()
            current = _PendingField(key=key_match.group(1), line=position, end_line=position)
            inline = key_match.group(2).strip()
            inline_item = _INLINE_DASH_ITEM.match(inline)
            if inline_item:
                current.is_list = True
                if inline_item.group(1):
                    current.parts.append(inline_item.group(1).strip())
            elif inline:
                current.parts.append(inline)
            continue

        if current is None:
            logger.debug("ignoring line %d outside of any field: %r", position, line)
            continue

        if stripped == "-":
            logger.debug("ignoring empty list item under %r at line %d", current.key, position)
            continue

        item = _dash_item(stripped)
        if item is not None:
            if current.is_list or not current.parts:
                current.is_list = True
                current.parts.append(item)
                current.end_line = position
            else:
                logger.debug("ignoring list item under scalar field %r at line %d", current.key, position)
            continue

        if current.is_list and current.parts:
            current.parts[-1] = f"{current.parts[-1]}\n{stripped}"
        elif current.is_list:
            current.parts.append(stripped)
        else:
            current.parts.append(stripped)
        current.end_line = position

    if current is not None:
        fields[current.key] = current.build()
    return fields


def parse_frontmatter(source: str | Document) -> MetadataBlock | None:
    """Parse the metadata block at the top of *source*.

    Returns:
        The parsed block, or ``None`` when the document does not open with a
        boundary marker or the block is never closed.
    """
    text = source.text if isinstance(source, Document) else source
    lines = split_lines(text)
    bounds = find_block_bounds(lines)
    if bounds is None:
        return None
    start, end = bounds
    return MetadataBlock(
        entries=parse_fields(lines[start + 1 : end], offset=start + 1),
        start_line=start,
        end_line=end,
    )


def has_frontmatter(source: str | Document) -> bool:
    text = source.text if isinstance(source, Document) else source
    return find_block_bounds(split_lines(text)) is not None

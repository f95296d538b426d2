"""Pydantic models for a document and its parsed metadata block.

A :class:`Document` is the raw text of one Markdown file. Parsing it yields an
optional :class:`MetadataBlock` holding the ``key: value`` fields found between
the leading ``---`` markers.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from frontcheck.exceptions import DocumentReadError

FieldValue = str | list[str]


class MetadataField(BaseModel):
    """A single field of a metadata block.

    Attributes:
        key: Field name as written in the block.
        value: Scalar string or list of strings. Quotes are kept as written.
        line: Absolute line index of the ``key:`` declaration.
        end_line: Last absolute line index that contributed to the value.
    """

    key: str
    value: FieldValue
    line: int
    end_line: int

    @property
    def is_list(self) -> bool:
        return isinstance(self.value, list)


class MetadataBlock(BaseModel):
    """The parsed frontmatter of a document."""

    entries: dict[str, MetadataField] = Field(default_factory=dict)
    start_line: int = 0
    end_line: int

    def find(self, key: str, *, ignore_case: bool = False) -> MetadataField | None:
        """Return the field named *key*.

        With *ignore_case*, an exact match is preferred; otherwise the most
        recently declared spelling of the key wins.
        """
        field = self.entries.get(key)
        if field is not None or not ignore_case:
            return field
        folded = key.casefold()
        matches = [entry for name, entry in self.entries.items() if name.casefold() == folded]
        return max(matches, key=lambda entry: entry.line, default=None)

    def get(self, key: str, *, ignore_case: bool = False) -> FieldValue | None:
        field = self.find(key, ignore_case=ignore_case)
        return field.value if field is not None else None

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def keys(self) -> list[str]:
        return list(self.entries)

    def as_dict(self) -> dict[str, FieldValue]:
        return {key: field.value for key, field in self.entries.items()}


class Document(BaseModel):
    """One text document from the content tree."""

    text: str
    path: Path | None = None

    @classmethod
    def from_path(cls, path: Path) -> Document:
        """Read *path* as UTF-8, keeping line endings untouched.

        Raises:
            DocumentReadError: If the file cannot be read or decoded.
        """
        try:
            with path.open("r", encoding="utf-8", newline="") as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentReadError(path, str(exc)) from exc
        return cls(text=text, path=path)

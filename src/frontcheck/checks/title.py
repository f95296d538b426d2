"""Validation and quoting fix-up of the ``title`` field.

Findings are returned as data; nothing here touches the file system.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from frontcheck.frontmatter.parser import parse_frontmatter
from frontcheck.frontmatter.quoting import double_quote, is_quoted, opens_quote, unquote
from frontcheck.models.document import Document, MetadataBlock
from frontcheck.models.enums import IssueKind
from frontcheck.models.report import Issue, TitleCheck

DEFAULT_EXEMPT_LAYOUTS = ("home",)

ISSUE_MESSAGES: dict[IssueKind, str] = {
    IssueKind.MISSING_FRONT_MATTER: "missing front matter block",
    IssueKind.MISSING_TITLE: "missing title field",
    IssueKind.EMPTY_TITLE: "title is empty",
    IssueKind.UNQUOTED_COLON: (
        'title is not quoted and contains ":", which can break YAML parsing '
        "(quote it or use a full-width colon)"
    ),
    IssueKind.MISMATCHED_QUOTES: "title quotes are not balanced",
}

# Splits text into [line, ending, line, ending, ..., line].
_LINES_WITH_ENDINGS = re.compile(r"(\r?\n)")
_TITLE_DECLARATION = re.compile(r"^(title\s*:\s*)(.*?)(\s*)$", re.IGNORECASE)


def title_value(block: MetadataBlock) -> str | None:
    """Return the raw title as written, or ``None`` when the key is absent."""
    value = block.get("title", ignore_case=True)
    if isinstance(value, list):
        return ", ".join(value)
    return value


def is_exempt(block: MetadataBlock, exempt_layouts: Iterable[str] = DEFAULT_EXEMPT_LAYOUTS) -> bool:
    layout = block.get("layout", ignore_case=True)
    if not isinstance(layout, str):
        return False
    return unquote(layout).strip().lower() in {name.lower() for name in exempt_layouts}


def validate_title(
    block: MetadataBlock | None,
    *,
    exempt_layouts: Iterable[str] = DEFAULT_EXEMPT_LAYOUTS,
) -> list[IssueKind]:
    """Return every title finding that applies to *block*.

    ``None`` stands for a document without a metadata block.
    """
    if block is None:
        return [IssueKind.MISSING_FRONT_MATTER]

    raw = title_value(block)
    if raw is None:
        if is_exempt(block, exempt_layouts):
            return []
        return [IssueKind.MISSING_TITLE]

    kinds: list[IssueKind] = []
    quoted = is_quoted(raw)
    value = unquote(raw)
    if not value.strip():
        kinds.append(IssueKind.EMPTY_TITLE)
    if not quoted and ":" in value:
        kinds.append(IssueKind.UNQUOTED_COLON)
    if opens_quote(raw) and not quoted:
        kinds.append(IssueKind.MISMATCHED_QUOTES)
    return kinds


def fix_unquoted_colon(text: str) -> str:
    """Return *text* with an unquoted title containing ``:`` double-quoted.

    Only the title declaration line changes; line endings, the rest of the
    block, and the body are kept byte for byte. Titles spanning several lines
    or with unbalanced quotes are left alone, as is text with nothing to fix.
    Applying the fix twice yields the same text as applying it once.
    """
    block = parse_frontmatter(text)
    if block is None:
        return text
    field = block.find("title", ignore_case=True)
    if field is None or isinstance(field.value, list) or field.end_line != field.line:
        return text

    raw = field.value
    if is_quoted(raw) or opens_quote(raw) or ":" not in raw:
        return text

    pieces = _LINES_WITH_ENDINGS.split(text)
    index = field.line * 2
    match = _TITLE_DECLARATION.match(pieces[index])
    if match is None:
        return text
    prefix, _, trailing = match.groups()
    pieces[index] = f"{prefix}{double_quote(raw)}{trailing}"
    return "".join(pieces)


def check_document(
    document: Document,
    *,
    fix: bool = False,
    exempt_layouts: Iterable[str] = DEFAULT_EXEMPT_LAYOUTS,
) -> TitleCheck:
    """Validate the title of *document* and, in fix mode, build its replacement.

    The caller decides whether to persist :attr:`TitleCheck.replacement`.
    """
    kinds = validate_title(parse_frontmatter(document), exempt_layouts=exempt_layouts)

    replacement: str | None = None
    if fix and IssueKind.UNQUOTED_COLON in kinds:
        fixed_text = fix_unquoted_colon(document.text)
        if fixed_text != document.text:
            replacement = fixed_text

    issues = [
        Issue(
            kind=kind,
            message=ISSUE_MESSAGES[kind],
            path=document.path,
            fixed=kind is IssueKind.UNQUOTED_COLON and replacement is not None,
        )
        for kind in kinds
    ]
    return TitleCheck(issues=issues, replacement=replacement)

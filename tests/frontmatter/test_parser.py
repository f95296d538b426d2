from __future__ import annotations

import pytest

from frontcheck.frontmatter.parser import find_block_bounds, has_frontmatter, parse_fields, parse_frontmatter
from frontcheck.models.document import Document


def test_parse_scalar_fields_in_order() -> None:
    block = parse_frontmatter("---\ntitle: Hello\ndate: 2024-01-01\n---\nbody\n")

    assert block is not None
    assert block.keys() == ["title", "date"]
    assert block.get("title") == "Hello"
    assert block.get("date") == "2024-01-01"
    assert block.start_line == 0
    assert block.end_line == 3


def test_parse_keeps_quotes_as_written() -> None:
    block = parse_frontmatter("---\ntitle: \"Hello: World\"\nauthor: 'me'\n---\n")

    assert block is not None
    assert block.get("title") == '"Hello: World"'
    assert block.get("author") == "'me'"


def test_parse_list_field_from_dash_items() -> None:
    block = parse_frontmatter("---\nkeywords:\n  - go\n  - cli\n- tools\ntitle: T\n---\n")

    assert block is not None
    assert block.get("keywords") == ["go", "cli", "tools"]
    assert block.entries["keywords"].is_list
    assert block.entries["keywords"].line == 1
    assert block.entries["keywords"].end_line == 4
    assert block.get("title") == "T"


def test_parse_inline_dash_starts_list() -> None:
    block = parse_frontmatter("---\ntags: - one\n- two\n---\n")

    assert block is not None
    assert block.get("tags") == ["one", "two"]


def test_parse_multiline_scalar_continuation() -> None:
    block = parse_frontmatter("---\ndescription: first line\n  second line\n\n  third\ntitle: T\n---\n")

    assert block is not None
    assert block.get("description") == "first line\nsecond line\nthird"
    field = block.entries["description"]
    assert (field.line, field.end_line) == (1, 4)


def test_parse_empty_value_is_empty_scalar() -> None:
    block = parse_frontmatter("---\ntitle:\ndate: 2024\n---\n")

    assert block is not None
    assert block.get("title") == ""
    assert not block.entries["title"].is_list


def test_parse_ignores_dash_item_under_scalar() -> None:
    block = parse_frontmatter("---\ntitle: Hello\n- stray\n---\n")

    assert block is not None
    assert block.get("title") == "Hello"


def test_parse_continuation_joins_last_list_item() -> None:
    block = parse_frontmatter("---\nkeywords:\n  - long\n    keyword\n---\n")

    assert block is not None
    assert block.get("keywords") == ["long\nkeyword"]


def test_parse_dash_items_without_space() -> None:
    block = parse_frontmatter("---\nkeywords:\n-go\n-cli\n---\n")

    assert block is not None
    assert block.get("keywords") == ["go", "cli"]


def test_parse_skips_bare_dash_lines() -> None:
    block = parse_frontmatter("---\nkeywords:\n  -\n  - go\n  -\n---\n")

    assert block is not None
    assert block.get("keywords") == ["go"]


def test_parse_only_bare_dashes_is_empty_scalar() -> None:
    block = parse_frontmatter("---\nkeywords:\n-\n-\n---\n")

    assert block is not None
    assert block.get("keywords") == ""


def test_parse_inline_bare_dash_is_empty_list() -> None:
    block = parse_frontmatter("---\ntags: -\n  extra\n---\n")

    assert block is not None
    assert block.get("tags") == ["extra"]


def test_parse_inline_negative_number_is_scalar() -> None:
    block = parse_frontmatter("---\noffset: -5\n---\n")

    assert block is not None
    assert block.get("offset") == "-5"


def test_block_lookup_is_case_sensitive_by_default() -> None:
    block = parse_frontmatter("---\nTitle: Upper\n---\n")

    assert block is not None
    assert block.get("title") is None
    assert block.get("title", ignore_case=True) == "Upper"


def test_block_lookup_ignoring_case_prefers_latest_spelling() -> None:
    block = parse_frontmatter("---\nTITLE: First\nTitle: Second\n---\n")

    assert block is not None
    field = block.find("title", ignore_case=True)
    assert field is not None
    assert (field.key, field.value) == ("Title", "Second")


def test_parse_ignores_lines_before_first_key() -> None:
    block = parse_frontmatter("---\n  orphan text\ntitle: T\n---\n")

    assert block is not None
    assert block.as_dict() == {"title": "T"}


def test_redeclared_key_last_write_wins() -> None:
    block = parse_frontmatter("---\ntitle: First\ndate: 2024\ntitle: Second\n---\n")

    assert block is not None
    assert block.get("title") == "Second"
    assert block.entries["title"].line == 3
    assert block.keys() == ["title", "date"]


@pytest.mark.parametrize(
    "text",
    [
        "# no block\n---\ntitle: x\n---\n",
        "---\ntitle: never closed\n",
        "",
        "\n---\ntitle: x\n---\n",
    ],
)
def test_parse_returns_none_without_valid_block(text: str) -> None:
    assert parse_frontmatter(text) is None
    assert has_frontmatter(text) is False


def test_parse_empty_block() -> None:
    block = parse_frontmatter("---\n---\nbody\n")

    assert block is not None
    assert block.as_dict() == {}


def test_parse_accepts_crlf_and_padded_markers() -> None:
    block = parse_frontmatter("---  \r\ntitle: Hello\r\n --- \r\nbody\r\n")

    assert block is not None
    assert block.get("title") == "Hello"
    assert block.end_line == 2


def test_parse_accepts_byte_order_mark() -> None:
    block = parse_frontmatter("\ufeff---\ntitle: Hello\n---\n")

    assert block is not None
    assert block.get("title") == "Hello"


def test_parse_accepts_document() -> None:
    document = Document(text="---\ntitle: Doc\n---\n")

    block = parse_frontmatter(document)

    assert block is not None
    assert block.get("title") == "Doc"


def test_parse_is_idempotent() -> None:
    text = "---\ntitle: A\nkeywords:\n  - x\n  - y\ndescription: d\n  more\n---\nbody\n"

    assert parse_frontmatter(text) == parse_frontmatter(text)


def test_find_block_bounds() -> None:
    assert find_block_bounds(["---", "a: b", "---", "body"]) == (0, 2)
    assert find_block_bounds(["---", "a: b"]) is None
    assert find_block_bounds([]) is None


def test_parse_fields_uses_offset_for_positions() -> None:
    fields = parse_fields(["title: T", "date: D"], offset=5)

    assert fields["title"].line == 5
    assert fields["date"].line == 6

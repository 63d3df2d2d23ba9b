"""Tests for chatmark.serialization — JSON round-trip."""

import json

import pytest

from chatmark import SerializationError, parse_document
from chatmark.location import SourceLocation
from chatmark.nodes import (
    Blank,
    Bold,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    ListItem,
    Paragraph,
    Plain,
    Table,
)
from chatmark.serialization import from_dict, from_json, to_dict, to_json

_LOC = SourceLocation(lineno=1, col_offset=1)

SAMPLE = "\n".join(
    [
        "# Room for rent",
        "",
        "Close to **campus**, `wifi` included.",
        "  - furnished",
        "2) no pets",
        "| Room | Price |",
        "|------|-------|",
        "| A | 450 |",
        "***",
        "```json",
        '{"ok": true}',
        "```",
    ]
)


class TestToDict:
    def test_discriminator(self) -> None:
        data = to_dict(Paragraph(location=_LOC, text="hi"))
        assert data["_type"] == "Paragraph"
        assert data["text"] == "hi"
        assert data["location"]["_type"] == "SourceLocation"

    def test_table_rows_become_lists(self) -> None:
        data = to_dict(Table(location=_LOC, headers=("a",), rows=(("1",), ("2",))))
        assert data["headers"] == ["a"]
        assert data["rows"] == [["1"], ["2"]]

    def test_span(self) -> None:
        assert to_dict(Bold("x")) == {"_type": "Bold", "text": "x"}


class TestRoundTrip:
    def test_document(self) -> None:
        doc = parse_document(SAMPLE)
        assert from_json(to_json(doc)) == doc

    def test_every_block_kind_survives(self) -> None:
        doc = Document(
            location=_LOC,
            children=(
                Heading(location=_LOC, level=3, text="t"),
                Paragraph(location=_LOC, text="p"),
                ListItem(location=_LOC, text="l", indent_level=4, ordered=False),
                CodeBlock(location=_LOC, language="", text="c"),
                Table(location=_LOC, headers=("h",), rows=()),
                HorizontalRule(location=_LOC),
                Blank(location=_LOC),
            ),
        )
        restored = from_dict(to_dict(doc))
        assert restored == doc
        assert isinstance(restored, Document)
        assert isinstance(restored.children[4], Table)
        assert restored.children[4].rows == ()

    def test_span_round_trip(self) -> None:
        assert from_dict(to_dict(Plain(" a "))) == Plain(" a ")

    def test_unicode_kept_readable(self) -> None:
        out = to_json(parse_document("• café"))
        assert "café" in out


class TestDeterminism:
    def test_sorted_keys(self) -> None:
        first = to_json(parse_document(SAMPLE))
        second = to_json(parse_document(SAMPLE))
        assert first == second
        assert list(json.loads(first)) == sorted(json.loads(first))

    def test_indent(self) -> None:
        assert "\n" in to_json(parse_document("x"), indent=2)


class TestErrors:
    def test_missing_type(self) -> None:
        with pytest.raises(SerializationError, match="Missing '_type'"):
            from_dict({"text": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            from_dict({"_type": "Blockquote"})
        assert exc_info.value.type_name == "Blockquote"

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            from_dict({"_type": "Nope"})

    def test_json_root_must_be_document(self) -> None:
        with pytest.raises(SerializationError, match="Expected Document"):
            from_json(json.dumps(to_dict(Plain("x"))))

"""Tests for the visitor and transform utilities."""

import dataclasses

import pytest

from chatmark import parse_document
from chatmark.location import SourceLocation
from chatmark.nodes import (
    Blank,
    Bold,
    BoldItalic,
    Code,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Italic,
    ListItem,
    Node,
    Paragraph,
    Plain,
    Span,
    Table,
)
from chatmark.visitor import BaseVisitor, transform

LOC = SourceLocation(lineno=1, col_offset=1)


class KindRecorder(BaseVisitor[None]):
    def __init__(self) -> None:
        self.kinds: list[str] = []

    def visit_default(self, node: Node | Span) -> None:
        self.kinds.append(type(node).__name__)


class TextRenderer(BaseVisitor[str]):
    """A tiny render adapter producing HTML-ish strings per node."""

    def visit_default(self, node: Node | Span) -> str:
        return ""

    def visit_heading(self, node: Heading) -> str:
        return f"<h{node.level}>"

    def visit_bold(self, node: Bold) -> str:
        return f"<b>{node.text}</b>"

    def visit_code_block(self, node: CodeBlock) -> str:
        return f"<pre data-lang={node.language!r}>{node.text}</pre>"


class TestDispatch:
    def test_every_variant_reaches_its_method(self) -> None:
        calls: list[str] = []

        class AllMethods(BaseVisitor[None]):
            pass

        for name in (
            "document", "heading", "paragraph", "list_item", "code_block", "table",
            "horizontal_rule", "blank", "plain", "bold", "italic", "bold_italic", "code",
        ):
            setattr(AllMethods, f"visit_{name}", lambda self, node, n=name: calls.append(n))

        visitor = AllMethods()
        nodes = (
            Document(location=LOC),
            Heading(location=LOC, level=1, text=""),
            Paragraph(location=LOC, text=""),
            ListItem(location=LOC, text=""),
            CodeBlock(location=LOC, language="", text=""),
            Table(location=LOC, headers=()),
            HorizontalRule(location=LOC),
            Blank(location=LOC),
            Plain(""),
            Bold(""),
            Italic(""),
            BoldItalic(""),
            Code(""),
        )
        for node in nodes:
            visitor._dispatch(node)
        assert calls == [
            "document", "heading", "paragraph", "list_item", "code_block", "table",
            "horizontal_rule", "blank", "plain", "bold", "italic", "bold_italic", "code",
        ]

    def test_return_value(self) -> None:
        renderer = TextRenderer()
        assert renderer.visit(Bold("x")) == "<b>x</b>"
        assert renderer.visit(Heading(location=LOC, level=2, text="t")) == "<h2>"
        assert renderer.visit(CodeBlock(location=LOC, language="py", text="1")) == (
            "<pre data-lang='py'>1</pre>"
        )


class TestWalking:
    def test_spans_follow_their_block(self) -> None:
        recorder = KindRecorder()
        recorder.visit(parse_document("# **Hi** there\n\n- *a*\n```\n**raw**\n```"))
        assert recorder.kinds == [
            "Document",
            "Heading",
            "Bold",
            "Plain",
            "Blank",
            "ListItem",
            "Italic",
            "CodeBlock",
        ]

    def test_table_cells_not_walked(self) -> None:
        recorder = KindRecorder()
        recorder.visit(parse_document("| **a** |"))
        assert recorder.kinds == ["Document", "Table"]


class TestTransform:
    def test_remove_blanks(self) -> None:
        doc = parse_document("a\n\nb")
        result = transform(doc, lambda n: None if isinstance(n, Blank) else n)
        assert [type(b) for b in result.children] == [Paragraph, Paragraph]
        assert len(doc.children) == 3

    def test_replace_blocks(self) -> None:
        doc = parse_document("# a\n## b")

        def flatten(node: Node) -> Node:
            if isinstance(node, Heading):
                return dataclasses.replace(node, level=1)
            return node

        result = transform(doc, flatten)  # type: ignore[arg-type]
        assert [h.level for h in result.children] == [1, 1]  # type: ignore[union-attr]

    def test_identity_returns_same_document(self) -> None:
        doc = parse_document("x")
        assert transform(doc, lambda n: n) is doc

    def test_rejects_non_document(self) -> None:
        with pytest.raises(TypeError):
            transform(Paragraph(location=LOC, text="x"), lambda n: n)  # type: ignore[arg-type]

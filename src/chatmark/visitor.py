"""Visitor and transformer for chatmark documents.

``BaseVisitor`` is the seam for render adapters: one ``visit_*`` method per
block and span variant, dispatched with ``match``. After a text-bearing
block (heading, paragraph, list item) is visited, its inline spans are
tokenized and visited in order.

Example — collect bold phrases:

    class BoldCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.phrases: list[str] = []

        def visit_bold(self, node: Bold) -> None:
            self.phrases.append(node.text)

    collector = BoldCollector()
    collector.visit(parse_document("**a** and **b**"))

Example — drop blank lines:

    compact = transform(doc, lambda n: None if isinstance(n, Blank) else n)

Thread Safety:
    Visitors may accumulate state; create one per thread. ``transform`` is
    pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from chatmark.inline import tokenize_block
from chatmark.nodes import (
    Blank,
    Block,
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


class BaseVisitor[T]:
    """Base visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for the variants you care
    about. Unhandled variants fall through to ``visit_default``.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node | Span) -> T:
        """Dispatch to the matching ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node | Span) -> T:
        """Called for variants without an overridden ``visit_*`` method."""
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_heading(self, node: Heading) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_list_item(self, node: ListItem) -> T:
        return self.visit_default(node)

    def visit_code_block(self, node: CodeBlock) -> T:
        return self.visit_default(node)

    def visit_table(self, node: Table) -> T:
        return self.visit_default(node)

    def visit_horizontal_rule(self, node: HorizontalRule) -> T:
        return self.visit_default(node)

    def visit_blank(self, node: Blank) -> T:
        return self.visit_default(node)

    # -- Span visitors ---------------------------------------------------------

    def visit_plain(self, node: Plain) -> T:
        return self.visit_default(node)

    def visit_bold(self, node: Bold) -> T:
        return self.visit_default(node)

    def visit_italic(self, node: Italic) -> T:
        return self.visit_default(node)

    def visit_bold_italic(self, node: BoldItalic) -> T:
        return self.visit_default(node)

    def visit_code(self, node: Code) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node | Span) -> T:
        match node:
            case Document():
                return self.visit_document(node)
            case Heading():
                return self.visit_heading(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case ListItem():
                return self.visit_list_item(node)
            case CodeBlock():
                return self.visit_code_block(node)
            case Table():
                return self.visit_table(node)
            case HorizontalRule():
                return self.visit_horizontal_rule(node)
            case Blank():
                return self.visit_blank(node)
            case Plain():
                return self.visit_plain(node)
            case Bold():
                return self.visit_bold(node)
            case Italic():
                return self.visit_italic(node)
            case BoldItalic():
                return self.visit_bold_italic(node)
            case Code():
                return self.visit_code(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node | Span) -> None:
        match node:
            case Document(children=children):
                for child in children:
                    self.visit(child)
            case Heading() | Paragraph() | ListItem():
                for span in tokenize_block(node):
                    self.visit(span)
            case _:
                pass  # Leaf nodes: no children


def transform(doc: Document, fn: Callable[[Block], Block | None]) -> Document:
    """Apply ``fn`` to every block of a document, returning a new Document.

    Return ``None`` from ``fn`` to remove a block. Blocks are frozen, so the
    original document is untouched; use ``dataclasses.replace`` inside
    ``fn`` to derive modified blocks.

    """
    if not isinstance(doc, Document):
        msg = f"transform expects a Document, got {type(doc).__name__}"
        raise TypeError(msg)

    children = tuple(
        result for block in doc.children
        if (result := fn(block)) is not None
    )
    if children == doc.children:
        return doc
    return dataclasses.replace(doc, children=children)

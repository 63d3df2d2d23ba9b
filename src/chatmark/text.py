"""Plain text from chatmark nodes.

Used for message previews, notifications and search indexing, where the
formatting delimiters should disappear but the words should not.

Example:
    >>> from chatmark import parse_document, extract_text
    >>> extract_text(parse_document("# Hello **World**"))
    'Hello World'
"""

from __future__ import annotations

from chatmark.inline import tokenize_block
from chatmark.nodes import (
    Blank,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    ListItem,
    Node,
    Paragraph,
    Span,
    Table,
)
from chatmark.parser import parse_blocks

ELLIPSIS = "…"


def extract_text(node: Node | Span) -> str:
    """Extract plain text from any node or span.

    Inline delimiters are stripped, table cells are joined by spaces, code
    blocks are returned verbatim, and rules and blanks contribute nothing.
    A Document joins its non-empty block texts with newlines.

    """
    match node:
        case Span(text=text):
            return text
        case Heading() | Paragraph() | ListItem():
            return "".join(span.text for span in tokenize_block(node))
        case CodeBlock(text=text):
            return text
        case Table(headers=headers, rows=rows):
            return " ".join(cell for row in (headers, *rows) for cell in row)
        case HorizontalRule() | Blank():
            return ""
        case Document(children=children):
            texts = (extract_text(child) for child in children)
            return "\n".join(t for t in texts if t)
        case _:
            return ""


def extract_excerpt(source: str, max_length: int = 200) -> str:
    """Build a single-line preview of a message.

    Walks text-bearing blocks (headings, paragraphs, list items) in order,
    collapsing whitespace, and stops once ``max_length`` characters are
    reached. Truncation happens on a word boundary when one exists and is
    marked with an ellipsis. Code blocks and tables are skipped.

        >>> extract_excerpt("# Title\\n\\nSome **bold** words here", max_length=16)
        'Title Some bold…'

    """
    parts: list[str] = []
    length = 0
    for block in parse_blocks(source):
        if not isinstance(block, Heading | Paragraph | ListItem):
            continue
        words = " ".join(extract_text(block).split())
        if not words:
            continue
        parts.append(words)
        length += len(words) + 1
        if length > max_length:
            break

    excerpt = " ".join(parts)
    if len(excerpt) <= max_length:
        return excerpt

    cut = excerpt[:max_length]
    space = cut.rfind(" ")
    if space > 0:
        cut = cut[:space]
    return cut.rstrip() + ELLIPSIS

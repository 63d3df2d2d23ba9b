"""Typed document nodes for chatmark.

All nodes are frozen dataclasses with slots:
- Immutability: a parsed message can be cached and shared across threads
- Pattern matching: render adapters branch with ``match`` over the variants
- Memory efficiency: chat histories hold many small documents

Node Hierarchy:
Node (block base, carries a SourceLocation)
├── Document
├── Heading
├── Paragraph
├── ListItem
├── CodeBlock
├── Table
├── HorizontalRule
└── Blank
Span (inline base, carries text only)
├── Plain
├── Bold
├── Italic
├── BoldItalic
└── Code

Blocks form a flat sequence: there are no nested lists, block quotes or
nested emphasis. A span's text is never tokenized again.

"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar, Literal

from chatmark.location import SourceLocation

# =============================================================================
# Inline Spans
# =============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Base class for inline spans.

    ``text`` is the span content with its delimiters stripped.

    """

    text: str

    delimiter: ClassVar[str] = ""


@dataclass(frozen=True, slots=True)
class Plain(Span):
    """Unformatted text, reproduced verbatim."""


@dataclass(frozen=True, slots=True)
class Bold(Span):
    """Markdown: **text**"""

    delimiter: ClassVar[str] = "**"


@dataclass(frozen=True, slots=True)
class Italic(Span):
    """Markdown: *text*"""

    delimiter: ClassVar[str] = "*"


@dataclass(frozen=True, slots=True)
class BoldItalic(Span):
    """Markdown: ***text***"""

    delimiter: ClassVar[str] = "***"


@dataclass(frozen=True, slots=True)
class Code(Span):
    """Markdown: `code`"""

    delimiter: ClassVar[str] = "`"


type Inline = Plain | Bold | Italic | BoldItalic | Code

INLINE_TYPES: tuple[type[Span], ...] = (Plain, Bold, Italic, BoldItalic, Code)


# =============================================================================
# Blocks
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for block nodes.

    Every block tracks the source lines it came from.

    """

    location: SourceLocation

    kind: ClassVar[str] = "node"

    @property
    def key(self) -> str:
        """Stable element key: kind plus the 0-based index of the emitting line.

        Multi-line blocks (code blocks, tables) are emitted on their last
        line, so that line's index is used.
        """
        return f"{self.kind}-{self.location.last_line - 1}"


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """Markdown: ``# Top``, ``## Mid`` or ``### Sub``."""

    level: Literal[1, 2, 3]
    text: str

    kind: ClassVar[str] = "heading"

    @property
    def key(self) -> str:
        return f"h{self.level}-{self.location.last_line - 1}"


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """A single source line of ordinary text, untrimmed."""

    text: str

    kind: ClassVar[str] = "p"


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """Bullet (``- ``, ``* ``, ``• ``) or numbered (``1. ``, ``1) ``) item.

    ``indent_level`` counts the leading whitespace characters of bullet
    items. Numbered items always report 0.

    """

    text: str
    indent_level: int = 0
    ordered: bool = False

    kind: ClassVar[str] = "li"


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block.

    ``text`` holds the raw lines between the fences joined by newlines.
    ``language`` is the trimmed info string after the opening fence and may
    be empty.

    """

    language: str
    text: str

    kind: ClassVar[str] = "code-block"


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Pipe table. The dashed separator row is never part of ``rows``."""

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()

    kind: ClassVar[str] = "table"


@dataclass(frozen=True, slots=True)
class HorizontalRule(Node):
    """Markdown: a line that is exactly ``---`` or ``***`` once trimmed."""

    kind: ClassVar[str] = "hr"


@dataclass(frozen=True, slots=True)
class Blank(Node):
    """An empty source line, kept so renderers can reproduce spacing."""

    kind: ClassVar[str] = "br"


type Block = Heading | Paragraph | ListItem | CodeBlock | Table | HorizontalRule | Blank

BLOCK_TYPES: tuple[type[Node], ...] = (
    Heading,
    Paragraph,
    ListItem,
    CodeBlock,
    Table,
    HorizontalRule,
    Blank,
)


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node wrapping the blocks of one message."""

    children: tuple[Block, ...] = ()

    kind: ClassVar[str] = "document"

    def __iter__(self) -> Iterator[Block]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

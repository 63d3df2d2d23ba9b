"""
chatmark — Markdown-subset parser for chat and forum messages

Turns free-form message text into a flat, typed document model: headings,
paragraphs, list items, fenced code blocks, pipe tables, rules and blank
lines, plus bold/italic/bold-italic/code inline spans. Parsing is total:
malformed markup degrades to plainer nodes and never raises.

Quick Start:
    >>> from chatmark import parse, tokenize
    >>> parse("# Hello\\n- **bold** item")
    (Heading(..., level=1, text='Hello'), ListItem(..., text='**bold** item', ...))
    >>> tokenize("**bold** item")
    (Bold(text='bold'), Plain(text=' item'))

    >>> # Or use the configurable processor
    >>> from chatmark import ChatMarkdown
    >>> md = ChatMarkdown(normalize_underscores=True)
    >>> md.tokenize("__bold__")
    (Bold(text='bold'),)

Rendering is left to the caller; subclass ``BaseVisitor`` to map blocks
and spans onto a UI.
"""

from collections.abc import Iterable

from chatmark.cache import DictParseCache, ParseCache, hash_config, hash_content
from chatmark.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from chatmark.errors import ChatmarkError, SerializationError
from chatmark.inline import normalize_underscores, tokenize, tokenize_block
from chatmark.location import SourceLocation
from chatmark.nodes import (
    BLOCK_TYPES,
    INLINE_TYPES,
    Blank,
    Block,
    Bold,
    BoldItalic,
    Code,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Inline,
    Italic,
    ListItem,
    Node,
    Paragraph,
    Plain,
    Span,
    Table,
)
from chatmark.parser import BlockParser
from chatmark.profiling import ParseAccumulator, get_parse_accumulator, profiled_parse
from chatmark.serialization import from_dict, from_json, to_dict, to_json
from chatmark.text import extract_excerpt, extract_text
from chatmark.visitor import BaseVisitor, transform

__version__ = "0.3.0"


def _parse(source: str) -> tuple[Block, ...]:
    return tuple(BlockParser(source).parse())


def _document(source: str, blocks: tuple[Block, ...]) -> Document:
    loc = SourceLocation(
        lineno=1,
        col_offset=1,
        offset=0,
        end_offset=len(source),
        end_lineno=source.count("\n") + 1 if source else 1,
    )
    return Document(location=loc, children=blocks)


def parse(text: str) -> tuple[Block, ...]:
    """Parse message text into an ordered tuple of blocks.

    Args:
        text: Raw message text, may be empty (yields ``()``)

    Returns:
        Blocks in source line order

    Example:
        >>> [b.kind for b in parse("a\\n\\nb")]
        ['p', 'br', 'p']
    """
    return _parse(text)


def parse_document(source: str, *, cache: ParseCache | None = None) -> Document:
    """Parse message text into a Document root node.

    Args:
        source: Raw message text
        cache: Optional content-addressed parse cache. Keyed on the source
            and the active ParseConfig.

    Returns:
        Document whose children are the parsed blocks
    """
    if cache is None:
        return _document(source, _parse(source))

    content_hash = hash_content(source)
    config_hash = hash_config(get_parse_config())
    cached = cache.get(content_hash, config_hash)
    if cached is not None:
        return cached

    doc = _document(source, _parse(source))
    cache.put(content_hash, config_hash, doc)
    return doc


class ChatMarkdown:
    """Message processor bound to one immutable ParseConfig.

    Usage:
        >>> md = ChatMarkdown(flush_unterminated=True)
        >>> md.parse("```py\\nprint(1)")
        (CodeBlock(..., language='py', text='print(1)'),)

    Thread Safety:
        Each call installs the config in a ContextVar for its own duration,
        so one instance can serve several threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        normalize_underscores: bool = False,
        flush_unterminated: bool = False,
        config: ParseConfig | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            normalize_underscores: Treat ``__x__``/``_x_`` as bold/italic
            flush_unterminated: Emit a code fence or table left open at end of input
            config: Prebuilt config; overrides the keyword flags when given
        """
        self._config = config or ParseConfig(
            normalize_underscores=normalize_underscores,
            flush_unterminated=flush_unterminated,
        )

    @property
    def config(self) -> ParseConfig:
        return self._config

    def parse(self, text: str) -> tuple[Block, ...]:
        """Parse message text into blocks under this processor's config."""
        with parse_config_context(self._config):
            return _parse(text)

    def parse_document(self, source: str, *, cache: ParseCache | None = None) -> Document:
        """Parse message text into a Document under this processor's config."""
        with parse_config_context(self._config):
            return parse_document(source, cache=cache)

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        cache: ParseCache | None = None,
    ) -> list[Document]:
        """Parse a batch of messages (e.g. one page of chat history).

        Sets the config once for the whole batch. With a cache, duplicate
        bodies within the batch are parsed once.
        """
        with parse_config_context(self._config):
            return [parse_document(source, cache=cache) for source in sources]

    def tokenize(self, text: str) -> tuple[Inline, ...]:
        """Tokenize block text into inline spans under this processor's config."""
        with parse_config_context(self._config):
            return tokenize(text)


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "parse_document",
    "tokenize",
    "tokenize_block",
    "normalize_underscores",
    # High-level
    "ChatMarkdown",
    "BlockParser",
    # Block nodes
    "Node",
    "Block",
    "BLOCK_TYPES",
    "Document",
    "Heading",
    "Paragraph",
    "ListItem",
    "CodeBlock",
    "Table",
    "HorizontalRule",
    "Blank",
    # Inline spans
    "Span",
    "Inline",
    "INLINE_TYPES",
    "Plain",
    "Bold",
    "Italic",
    "BoldItalic",
    "Code",
    # Location
    "SourceLocation",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "ChatmarkError",
    "SerializationError",
    # Parse cache
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
    # Profiling
    "ParseAccumulator",
    "get_parse_accumulator",
    "profiled_parse",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Plain text
    "extract_text",
    "extract_excerpt",
    # Visitor + Transform
    "BaseVisitor",
    "transform",
]

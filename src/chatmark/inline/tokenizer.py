"""Inline tokenizer.

One combined pattern is scanned left to right. Alternatives are ordered
bold-italic, bold, italic, code: with ``***x***`` the triple form has to
win before the single-asterisk form can claim ``*``.

Delimiter content excludes the delimiter character itself, so a span never
swallows a neighbouring marker. The price is no nesting:
``**bold *and italic***`` comes out as Plain("*"), Italic("bold "),
Plain("and italic***") rather than a bold run with italic inside.

Thread Safety:
    The compiled pattern is immutable and every call keeps its state in
    locals. Safe to call from any thread.

"""

from __future__ import annotations

import re

from chatmark.config import get_parse_config
from chatmark.inline.normalize import normalize_underscores
from chatmark.nodes import (
    Bold,
    BoldItalic,
    Code,
    Heading,
    Inline,
    Italic,
    ListItem,
    Node,
    Paragraph,
    Plain,
)

INLINE_PATTERN = re.compile(
    r"\*\*\*(?P<bold_italic>[^*]+)\*\*\*"
    r"|\*\*(?P<bold>[^*]+)\*\*"
    r"|\*(?P<italic>[^*]+)\*"
    r"|`(?P<code>[^`]+)`"
)

_SPAN_TYPES: dict[str, type[BoldItalic | Bold | Italic | Code]] = {
    "bold_italic": BoldItalic,
    "bold": Bold,
    "italic": Italic,
    "code": Code,
}


def tokenize(text: str) -> tuple[Inline, ...]:
    """Split block text into inline spans.

    Text between matches becomes Plain spans, verbatim. Input without any
    delimiter pair yields a single Plain span holding the whole input, so
    the result is never empty (``tokenize("")`` is ``(Plain(""),)``).

    Honors ``ParseConfig.normalize_underscores`` from the active context.

        >>> tokenize("a **b** `c`")
        (Plain(text='a '), Bold(text='b'), Plain(text=' '), Code(text='c'))
        >>> tokenize("***x***")
        (BoldItalic(text='x'),)

    """
    if get_parse_config().normalize_underscores:
        text = normalize_underscores(text)

    spans: list[Inline] = []
    last_end = 0
    for match in INLINE_PATTERN.finditer(text):
        start = match.start()
        if start > last_end:
            spans.append(Plain(text[last_end:start]))
        kind = match.lastgroup
        assert kind is not None
        spans.append(_SPAN_TYPES[kind](match.group(kind)))
        last_end = match.end()

    if last_end < len(text) or not spans:
        spans.append(Plain(text[last_end:]))
    return tuple(spans)


def tokenize_block(block: Node) -> tuple[Inline, ...]:
    """Tokenize the text of a text-bearing block.

    Headings, paragraphs and list items carry inline formatting. Code
    blocks are raw, and tables, rules and blanks have no block text, so
    they produce ``()``.
    """
    match block:
        case Heading(text=text) | Paragraph(text=text) | ListItem(text=text):
            return tokenize(text)
        case _:
            return ()

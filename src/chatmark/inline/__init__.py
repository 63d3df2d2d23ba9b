"""Inline span tokenization.

Turns the text of one block into a flat tuple of Plain, Bold, Italic,
BoldItalic and Code spans. Optional underscore normalization lives in
``normalize``.
"""

from chatmark.inline.normalize import normalize_underscores
from chatmark.inline.tokenizer import INLINE_PATTERN, tokenize, tokenize_block

__all__ = [
    "INLINE_PATTERN",
    "normalize_underscores",
    "tokenize",
    "tokenize_block",
]

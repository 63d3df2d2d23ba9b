"""Block parser operating modes."""

from __future__ import annotations

from enum import Flag, auto


class ParserMode(Flag):
    """Block parser operating modes.

    The parser switches between modes based on context:
    - NORMAL: Between blocks, classifying each line on its own
    - IN_CODE_BLOCK: Inside a fenced code block, buffering raw lines
    - IN_TABLE: A run of pipe rows is pending, accumulating headers and rows

    A Flag rather than a plain Enum: a table left pending by a trailing
    separator row stays open across a code block, so both bits can be set.

    """

    NORMAL = 0
    IN_CODE_BLOCK = auto()
    IN_TABLE = auto()

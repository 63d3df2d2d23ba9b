"""Per-line classifiers for the block parser.

The parser tries these in a fixed order (fence, table row, heading, rule,
bullet, numbered item, blank) and falls back to a paragraph, so each
classifier only has to recognise its own kind.
"""

from __future__ import annotations

import re

FENCE = "```"

# Most specific prefix first so "### x" is never read as "## x"
HEADING_PREFIXES: tuple[tuple[str, int], ...] = (
    ("### ", 3),
    ("## ", 2),
    ("# ", 1),
)

HORIZONTAL_RULES = frozenset({"---", "***"})

TABLE_SEPARATOR = "---"

BULLET_MARKERS = "-*•"

_BULLET = re.compile(rf"^(\s*)[{re.escape(BULLET_MARKERS)}]\s")
_NUMBERED = re.compile(r"^\s*[0-9]+[.)]\s")


def fence_language(line: str) -> str | None:
    """Return the info string of a fence line, or None if not a fence.

    The info string is whatever follows the backticks, trimmed, and may be
    empty. On a closing fence it is ignored.

        >>> fence_language("```python")
        'python'
        >>> fence_language("  ``` ")
        ''
        >>> fence_language("code") is None
        True
    """
    stripped = line.strip()
    if not stripped.startswith(FENCE):
        return None
    return stripped[len(FENCE):].strip()


def is_table_row(line: str) -> bool:
    """Check whether a line is a pipe row (trimmed form starts with ``|``)."""
    return "|" in line and line.strip().startswith("|")


def split_table_cells(line: str) -> tuple[str, ...]:
    """Split a pipe row into trimmed cells, dropping cells that trim to empty.

    Leading and trailing pipes therefore produce no phantom cells, but
    neither does an intentionally empty cell in the middle of a row.

        >>> split_table_cells("| A | B |")
        ('A', 'B')
    """
    return tuple(cell.strip() for cell in line.split("|") if cell.strip())


def is_table_separator(line: str) -> bool:
    """Check for the header separator row inside a table run.

    Substring match: ``|---|:---:|`` and ``| --- |`` both qualify.
    """
    return TABLE_SEPARATOR in line


def classify_heading(line: str) -> tuple[int, str] | None:
    """Return ``(level, text)`` for an ATX heading of level 1-3.

    The marker must start the line and be followed by a space; the text is
    the untrimmed remainder.
    """
    for prefix, level in HEADING_PREFIXES:
        if line.startswith(prefix):
            return level, line[len(prefix):]
    return None


def is_horizontal_rule(line: str) -> bool:
    """Check whether the trimmed line is exactly ``---`` or ``***``."""
    return line.strip() in HORIZONTAL_RULES


def match_bullet(line: str) -> tuple[int, str] | None:
    """Return ``(indent, text)`` for a bullet list line.

    ``indent`` counts leading whitespace characters (a tab counts as one).

        >>> match_bullet("  - item")
        (2, 'item')
        >>> match_bullet("• dot")
        (0, 'dot')
    """
    m = _BULLET.match(line)
    if m is None:
        return None
    return len(m.group(1)), line[m.end():]


def match_numbered(line: str) -> str | None:
    """Return the text of a numbered list line (``1.`` or ``1)`` markers).

        >>> match_numbered("1. first")
        'first'
        >>> match_numbered("2) second")
        'second'
    """
    m = _NUMBERED.match(line)
    if m is None:
        return None
    return line[m.end():]


def is_blank(line: str) -> bool:
    """Check whether a line is empty or whitespace only."""
    return not line.strip()

"""Source locations for parsed blocks.

Every block remembers which lines of the message produced it, so render
adapters can derive stable element keys and editors can map a block back
to its source text.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a block in the source text.

    ``lineno`` and ``col_offset`` are 1-indexed. ``offset`` and ``end_offset``
    are absolute character offsets into the source (end exclusive).
    ``end_lineno`` is only set for blocks spanning several lines.

    Examples:
        >>> loc = SourceLocation(lineno=3, col_offset=1)
        >>> str(loc)
        '3:1'
        >>> SourceLocation(1, 1, 0, 20, end_lineno=3).last_line
        3

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None

    def __str__(self) -> str:
        if self.end_lineno is not None and self.end_lineno != self.lineno:
            return f"{self.lineno}-{self.end_lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def last_line(self) -> int:
        """Last source line covered by this location (1-indexed)."""
        return self.end_lineno if self.end_lineno is not None else self.lineno

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a location running from this one to the end of ``end``."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            end_lineno=end.last_line,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder for synthetic nodes that have no source."""
        return cls(lineno=0, col_offset=0)

"""Opt-in parse profiling.

Inside a ``profiled_parse()`` block every BlockParser run reports what it
produced: lines consumed, blocks emitted per kind, and code fences or
tables left open at end of input (dropped, or flushed when
``flush_unterminated`` is set). Outside such a block the parser finds no
accumulator and records nothing.

Example:
    from chatmark import parse_document
    from chatmark.profiling import profiled_parse

    with profiled_parse() as metrics:
        for body in message_bodies:
            parse_document(body)

    metrics.blocks["code-block"]     # fenced snippets across the page
    metrics.dropped["table"]         # tables lost to a trailing separator
    print(metrics.summary())

"""

from collections import Counter
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from chatmark.nodes import Block


@dataclass
class ParseAccumulator:
    """Parser metrics gathered across a batch of messages.

    Attributes:
        start_time: Profiling start timestamp.
        parse_calls: BlockParser runs recorded.
        source_length: Total characters parsed.
        line_count: Total source lines walked.
        blocks: Emitted blocks by kind (``"heading"``, ``"p"``, ``"table"``...).
        dropped: Blocks open at end of input and discarded, by kind.
        flushed: Blocks open at end of input and emitted anyway, by kind.

    """

    start_time: float = field(default_factory=perf_counter)
    parse_calls: int = 0
    source_length: int = 0
    line_count: int = 0
    blocks: Counter[str] = field(default_factory=Counter)
    dropped: Counter[str] = field(default_factory=Counter)
    flushed: Counter[str] = field(default_factory=Counter)

    def record_parse(self, source_length: int, line_count: int, blocks: Iterable["Block"]) -> None:
        """Record one finished BlockParser run."""
        self.parse_calls += 1
        self.source_length += source_length
        self.line_count += line_count
        self.blocks.update(block.kind for block in blocks)

    def record_unterminated(self, kind: str, *, flushed: bool) -> None:
        """Record a code block or table still open at end of input."""
        (self.flushed if flushed else self.dropped)[kind] += 1

    @property
    def block_count(self) -> int:
        return self.blocks.total()

    @property
    def total_duration_ms(self) -> float:
        """Milliseconds since profiling started."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Plain-dict snapshot, suitable for logging or JSON."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "parse_calls": self.parse_calls,
            "source_length": self.source_length,
            "line_count": self.line_count,
            "block_count": self.block_count,
            "blocks": dict(self.blocks),
            "dropped": dict(self.dropped),
            "flushed": dict(self.flushed),
        }


_accumulator: ContextVar[ParseAccumulator | None] = ContextVar(
    "chatmark_parse_accumulator",
    default=None,
)


def get_parse_accumulator() -> ParseAccumulator | None:
    """Current accumulator, or None outside a profiled_parse() block."""
    return _accumulator.get()


@contextmanager
def profiled_parse() -> Iterator[ParseAccumulator]:
    """Collect parser metrics for every parse inside the block."""
    acc = ParseAccumulator()
    token: Token[ParseAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)

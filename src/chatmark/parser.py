"""Line-oriented block parser.

A single forward pass over the source lines, with one line of lookahead to
decide when a table ends. Per-line precedence, first match wins:

    fence toggle → code buffering → table row → heading (### before ## before #)
    → horizontal rule → bullet item → numbered item → blank → paragraph

Parse state (mode flags, code buffer, table accumulator) lives in a
``_ParseState`` owned by one BlockParser instance, never at module level.

Code fences and tables are tracked independently. A table is closed by the
lookahead after a header or body row; a separator row skips the lookahead,
so a run that ends on its separator stays pending. The pending table keeps
accumulating from the next pipe row, even past paragraphs or a code block,
and is emitted when that row's lookahead closes it:

    >>> [b.kind for b in BlockParser("|A|\\n|---|\\ntext\\n|1|").parse()]
    ['p', 'table']

Anything still open at end of input is dropped, or emitted when
``ParseConfig.flush_unterminated`` is set.

Thread Safety:
- BlockParser instances are single-use; create one per parse
- Configuration is read from ContextVar (thread-local)
- The resulting blocks are immutable and safe to share

"""

from __future__ import annotations

from dataclasses import dataclass, field

from chatmark.config import get_parse_config
from chatmark.lexer import (
    ParserMode,
    classify_heading,
    fence_language,
    is_blank,
    is_horizontal_rule,
    is_table_row,
    is_table_separator,
    match_bullet,
    match_numbered,
    split_table_cells,
)
from chatmark.location import SourceLocation
from chatmark.nodes import (
    Blank,
    Block,
    CodeBlock,
    Heading,
    HorizontalRule,
    ListItem,
    Paragraph,
    Table,
)
from chatmark.profiling import get_parse_accumulator
from chatmark.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class _ParseState:
    """Mutable accumulator folded across the line sequence."""

    mode: ParserMode = ParserMode.NORMAL

    # Pending code block
    language: str = ""
    code_lines: list[str] = field(default_factory=list)
    code_start: SourceLocation | None = None

    # Pending table
    headers: tuple[str, ...] = ()
    rows: list[tuple[str, ...]] = field(default_factory=list)
    table_start: SourceLocation | None = None
    table_end: SourceLocation | None = None

    def reset_code(self) -> None:
        self.mode &= ~ParserMode.IN_CODE_BLOCK
        self.language = ""
        self.code_lines = []
        self.code_start = None

    def reset_table(self) -> None:
        self.mode &= ~ParserMode.IN_TABLE
        self.headers = ()
        self.rows = []
        self.table_start = None
        self.table_end = None


class BlockParser:
    """Splits message text into an ordered list of blocks.

    Usage:
        >>> BlockParser("# Hi\\n\\ntext").parse()
        [Heading(..., level=1, text='Hi'), Blank(...), Paragraph(..., text='text')]

    Blocks come out in the order they are finalized, which is the order of
    the line that emits each one. Never raises: anything unrecognised
    becomes a Paragraph or Blank.

    """

    __slots__ = ("_source", "_lines", "_blocks", "_state")

    def __init__(self, source: str) -> None:
        self._source = source
        self._lines: list[str] = source.split("\n") if source else []
        self._blocks: list[Block] = []
        self._state = _ParseState()

    def parse(self) -> list[Block]:
        """Parse the source. Returns blocks in emission order."""
        offset = 0
        for i, line in enumerate(self._lines):
            loc = SourceLocation(
                lineno=i + 1,
                col_offset=1,
                offset=offset,
                end_offset=offset + len(line),
            )
            self._parse_line(i, line, loc)
            offset += len(line) + 1

        self._finish()

        acc = get_parse_accumulator()
        if acc is not None:
            acc.record_parse(len(self._source), len(self._lines), self._blocks)

        return self._blocks

    # -- Per-line dispatch -----------------------------------------------------

    def _parse_line(self, i: int, line: str, loc: SourceLocation) -> None:
        state = self._state

        language = fence_language(line)
        if language is not None:
            if ParserMode.IN_CODE_BLOCK in state.mode:
                self._close_code_block(loc)
            else:
                state.mode |= ParserMode.IN_CODE_BLOCK
                state.language = language
                state.code_start = loc
            return

        if ParserMode.IN_CODE_BLOCK in state.mode:
            state.code_lines.append(line)
            return

        if is_table_row(line):
            self._table_row(i, line, loc)
            return

        self._blocks.append(self._classify(line, loc))

    def _classify(self, line: str, loc: SourceLocation) -> Block:
        """Classify a line outside code blocks and table rows."""
        heading = classify_heading(line)
        if heading is not None:
            level, text = heading
            return Heading(location=loc, level=level, text=text)  # type: ignore[arg-type]

        if is_horizontal_rule(line):
            return HorizontalRule(location=loc)

        bullet = match_bullet(line)
        if bullet is not None:
            indent, text = bullet
            return ListItem(location=loc, text=text, indent_level=indent, ordered=False)

        numbered = match_numbered(line)
        if numbered is not None:
            return ListItem(location=loc, text=numbered, ordered=True)

        if is_blank(line):
            return Blank(location=loc)

        return Paragraph(location=loc, text=line)

    # -- Code blocks -----------------------------------------------------------

    def _close_code_block(self, end: SourceLocation) -> None:
        state = self._state
        assert state.code_start is not None
        self._blocks.append(
            CodeBlock(
                location=state.code_start.span_to(end),
                language=state.language,
                text="\n".join(state.code_lines),
            )
        )
        state.reset_code()

    # -- Tables ----------------------------------------------------------------

    def _table_row(self, i: int, line: str, loc: SourceLocation) -> None:
        state = self._state

        if ParserMode.IN_TABLE not in state.mode:
            state.mode |= ParserMode.IN_TABLE
            state.headers = split_table_cells(line)
            state.table_start = loc
        elif is_table_separator(line):
            # Skipped without lookahead
            state.table_end = loc
            return
        else:
            state.rows.append(split_table_cells(line))
        state.table_end = loc

        next_index = i + 1
        if next_index >= len(self._lines) or not is_table_row(self._lines[next_index]):
            self._close_table(loc)

    def _close_table(self, end: SourceLocation) -> None:
        state = self._state
        assert state.table_start is not None
        self._blocks.append(
            Table(
                location=state.table_start.span_to(end),
                headers=state.headers,
                rows=tuple(state.rows),
            )
        )
        state.reset_table()

    # -- End of input ----------------------------------------------------------

    def _finish(self) -> None:
        state = self._state
        if not state.mode:
            return

        flush = get_parse_config().flush_unterminated
        acc = get_parse_accumulator()

        # A pending table always predates an open fence: pipe rows inside a
        # fence are buffered as code.
        if ParserMode.IN_TABLE in state.mode:
            assert state.table_start is not None and state.table_end is not None
            logger.debug(
                "%s unterminated table opened at line %d (%d rows)",
                "Flushing" if flush else "Discarding",
                state.table_start.lineno,
                len(state.rows),
            )
            if acc is not None:
                acc.record_unterminated(Table.kind, flushed=flush)
            if flush:
                self._close_table(state.table_end)
            else:
                state.reset_table()

        if ParserMode.IN_CODE_BLOCK in state.mode:
            assert state.code_start is not None
            logger.debug(
                "%s unterminated code fence opened at line %d (%d buffered lines)",
                "Flushing" if flush else "Discarding",
                state.code_start.lineno,
                len(state.code_lines),
            )
            if acc is not None:
                acc.record_unterminated(CodeBlock.kind, flushed=flush)
            if flush:
                end_offset = len(self._source)
                self._close_code_block(
                    SourceLocation(
                        lineno=len(self._lines),
                        col_offset=1,
                        offset=end_offset,
                        end_offset=end_offset,
                    )
                )
            else:
                state.reset_code()


def parse_blocks(source: str) -> list[Block]:
    """Parse source text into blocks using the active ParseConfig."""
    return BlockParser(source).parse()

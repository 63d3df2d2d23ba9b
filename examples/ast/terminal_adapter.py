"""Minimal render adapter: show a message in a terminal with ANSI styles."""

from chatmark import parse_document
from chatmark.nodes import (
    Blank,
    Bold,
    BoldItalic,
    Code,
    CodeBlock,
    Heading,
    HorizontalRule,
    Italic,
    ListItem,
    Paragraph,
    Plain,
    Table,
)
from chatmark.visitor import BaseVisitor

BOLD, ITALIC, DIM, RESET = "\033[1m", "\033[3m", "\033[2m", "\033[0m"


class TerminalAdapter(BaseVisitor[None]):
    """Write styled output line by line; spans are appended to the current line."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def _start(self, prefix: str = "") -> None:
        self.lines.append(prefix)

    def _emit(self, text: str) -> None:
        self.lines[-1] += text

    def visit_heading(self, node: Heading) -> None:
        self._start(BOLD + "#" * node.level + " ")

    def visit_paragraph(self, node: Paragraph) -> None:
        self._start()

    def visit_list_item(self, node: ListItem) -> None:
        marker = "1." if node.ordered else "•"
        self._start(" " * node.indent_level + marker + " ")

    def visit_code_block(self, node: CodeBlock) -> None:
        if node.language:
            self.lines.append(DIM + node.language + RESET)
        self.lines.extend("    " + line for line in node.text.split("\n"))

    def visit_table(self, node: Table) -> None:
        self.lines.append(BOLD + " | ".join(node.headers) + RESET)
        self.lines.extend(" | ".join(row) for row in node.rows)

    def visit_horizontal_rule(self, node: HorizontalRule) -> None:
        self.lines.append("─" * 40)

    def visit_blank(self, node: Blank) -> None:
        self.lines.append("")

    def visit_plain(self, node: Plain) -> None:
        self._emit(node.text)

    def visit_bold(self, node: Bold) -> None:
        self._emit(BOLD + node.text + RESET)

    def visit_italic(self, node: Italic) -> None:
        self._emit(ITALIC + node.text + RESET)

    def visit_bold_italic(self, node: BoldItalic) -> None:
        self._emit(BOLD + ITALIC + node.text + RESET)

    def visit_code(self, node: Code) -> None:
        self._emit(DIM + node.text + RESET)


source = """# Flat share

Rent is **450** a month, *bills included*.

| Room | Size |
|------|------|
| A    | 12m² |

```sh
curl https://example.org/listing/42
```
---
"""

adapter = TerminalAdapter()
adapter.visit(parse_document(source))
print("\n".join(line + RESET for line in adapter.lines))

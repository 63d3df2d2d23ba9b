"""Tests for the per-line classifiers."""

import pytest

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


class TestFenceLanguage:
    @pytest.mark.parametrize(
        "line,expected",
        [
            ("```", ""),
            ("```python", "python"),
            ("```  ts  ", "ts"),
            ("   ```bash", "bash"),
            ("````", "`"),
        ],
    )
    def test_fences(self, line: str, expected: str) -> None:
        assert fence_language(line) == expected

    @pytest.mark.parametrize("line", ["``", "code ```", "~~~", ""])
    def test_not_fences(self, line: str) -> None:
        assert fence_language(line) is None


class TestTableClassifiers:
    @pytest.mark.parametrize("line", ["|a|", "  | a | b", "|"])
    def test_rows(self, line: str) -> None:
        assert is_table_row(line)

    @pytest.mark.parametrize("line", ["a | b", "", "-|-"])
    def test_not_rows(self, line: str) -> None:
        assert not is_table_row(line)

    def test_split_drops_outer_and_empty_cells(self) -> None:
        assert split_table_cells("| a |  | b |") == ("a", "b")
        assert split_table_cells("|") == ()

    @pytest.mark.parametrize("line", ["|---|", "| :---: |", "|a|b---|"])
    def test_separator_substring(self, line: str) -> None:
        assert is_table_separator(line)

    def test_two_dashes_not_a_separator(self) -> None:
        assert not is_table_separator("|--|--|")


class TestHeadingClassifier:
    def test_specificity(self) -> None:
        assert classify_heading("### a") == (3, "a")
        assert classify_heading("## a") == (2, "a")
        assert classify_heading("# a") == (1, "a")

    @pytest.mark.parametrize("line", ["#a", "####", " # a", ""])
    def test_not_headings(self, line: str) -> None:
        assert classify_heading(line) is None


class TestSimpleClassifiers:
    def test_rules(self) -> None:
        assert is_horizontal_rule(" --- ")
        assert is_horizontal_rule("***")
        assert not is_horizontal_rule("-- -")

    def test_bullet(self) -> None:
        assert match_bullet("    * deep") == (4, "deep")
        assert match_bullet("-") is None

    def test_numbered(self) -> None:
        assert match_numbered("  10. ten") == "ten"
        assert match_numbered("a. no") is None

    def test_blank(self) -> None:
        assert is_blank("")
        assert is_blank(" \t ")
        assert not is_blank(" x ")


class TestParserMode:
    def test_modes(self) -> None:
        assert {m.name for m in ParserMode} == {"IN_CODE_BLOCK", "IN_TABLE"}
        assert not ParserMode.NORMAL

    def test_code_and_table_combine(self) -> None:
        mode = ParserMode.NORMAL | ParserMode.IN_TABLE | ParserMode.IN_CODE_BLOCK
        assert ParserMode.IN_TABLE in mode
        mode &= ~ParserMode.IN_CODE_BLOCK
        assert mode is ParserMode.IN_TABLE

"""Tests for opt-in underscore emphasis normalization."""

import pytest

from chatmark import (
    Bold,
    ChatMarkdown,
    Code,
    Italic,
    ParseConfig,
    Plain,
    normalize_underscores,
    parse_config_context,
    tokenize,
)


class TestNormalizeUnderscores:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("__bold__", "**bold**"),
            ("_it_", "*it*"),
            ("__a__ and _b_", "**a** and *b*"),
            ("no underscores", "no underscores"),
            ("lonely_", "lonely_"),
        ],
    )
    def test_rewrites(self, text: str, expected: str) -> None:
        assert normalize_underscores(text) == expected

    def test_code_spans_untouched(self) -> None:
        assert normalize_underscores("`__init__` is _special_") == "`__init__` is *special*"

    def test_words_with_underscores_are_rewritten(self) -> None:
        assert normalize_underscores("snake_case_name") == "snake*case*name"


class TestTokenizerIntegration:
    def test_off_by_default(self) -> None:
        assert tokenize("__x__") == (Plain("__x__"),)

    def test_config_context(self) -> None:
        with parse_config_context(ParseConfig(normalize_underscores=True)):
            assert tokenize("__x__ and _y_") == (Bold("x"), Plain(" and "), Italic("y"))

    def test_processor(self) -> None:
        md = ChatMarkdown(normalize_underscores=True)
        assert md.tokenize("see `a_b_c` _now_") == (
            Plain("see "),
            Code("a_b_c"),
            Plain(" "),
            Italic("now"),
        )

    def test_processor_does_not_leak_config(self) -> None:
        ChatMarkdown(normalize_underscores=True).tokenize("_x_")
        assert tokenize("_x_") == (Plain("_x_"),)

"""Tests for the content-addressed parse cache."""

from chatmark import (
    ChatMarkdown,
    DictParseCache,
    Document,
    ParseConfig,
    hash_config,
    hash_content,
    parse_document,
)
from chatmark.location import SourceLocation
from chatmark.nodes import CodeBlock, Heading


class TestDictParseCache:
    def test_get_returns_none_when_empty(self) -> None:
        cache = DictParseCache()
        assert cache.get("abc123", "config1") is None

    def test_put_then_get_returns_doc(self) -> None:
        cache = DictParseCache()
        doc = Document(location=SourceLocation(1, 1, 0, 5))
        cache.put("abc123", "config1", doc)
        assert cache.get("abc123", "config1") is doc
        assert cache.get("xyz789", "config1") is None
        assert cache.get("abc123", "config2") is None
        assert len(cache) == 1

    def test_clear(self) -> None:
        cache = DictParseCache()
        cache.put("a", "b", Document(location=SourceLocation(1, 1)))
        cache.clear()
        assert len(cache) == 0


class TestHashHelpers:
    def test_hash_content_deterministic(self) -> None:
        assert hash_content("# Hello") == hash_content("# Hello")
        assert hash_content("# Hello") != hash_content("# Hello!")
        assert len(hash_content("")) == 64

    def test_hash_config_tracks_fields(self) -> None:
        assert hash_config(ParseConfig()) == hash_config(ParseConfig())
        assert hash_config(ParseConfig()) != hash_config(ParseConfig(flush_unterminated=True))
        assert hash_config(ParseConfig()) != hash_config(
            ParseConfig(normalize_underscores=True)
        )


class TestParseWithCache:
    def test_hit_returns_same_instance(self) -> None:
        cache = DictParseCache()
        first = parse_document("# Hello", cache=cache)
        second = parse_document("# Hello", cache=cache)
        assert first is second
        assert isinstance(first.children[0], Heading)

    def test_config_is_part_of_key(self) -> None:
        cache = DictParseCache()
        source = "```\nopen"
        plain = parse_document(source, cache=cache)
        flushed = ChatMarkdown(flush_unterminated=True).parse_document(source, cache=cache)
        assert plain.children == ()
        assert isinstance(flushed.children[0], CodeBlock)
        assert len(cache) == 2

    def test_parse_many_dedupes(self) -> None:
        cache = DictParseCache()
        docs = ChatMarkdown().parse_many(["hi", "yo", "hi"], cache=cache)
        assert docs[0] is docs[2]
        assert len(cache) == 2

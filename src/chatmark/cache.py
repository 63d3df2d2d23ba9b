"""Content-addressed parse cache for chatmark.

Chat screens re-render the same message bodies over and over (scrolling,
theme changes, new messages arriving). A (content_hash, config_hash) ->
Document cache avoids re-parsing unchanged text.

Thread Safety:
    DictParseCache is not thread-safe. For parallel parsing, use a cache
    implementation with internal locking (e.g. threading.Lock around get/put).

Example:
    >>> from chatmark import parse_document, DictParseCache
    >>> cache = DictParseCache()
    >>> doc1 = parse_document("# Hello", cache=cache)
    >>> doc2 = parse_document("# Hello", cache=cache)  # Cache hit, no re-parse
    >>> doc1 is doc2
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from chatmark.utils.hashing import hash_str

if TYPE_CHECKING:
    from chatmark.config import ParseConfig
    from chatmark.nodes import Document


class ParseCache(Protocol):
    """Protocol for content-addressed parse caches.

    Cached Documents are immutable, so handing out the same instance to
    several callers is safe.
    """

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        """Return cached Document if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        """Store Document in cache."""
        ...


class DictParseCache:
    """In-memory parse cache using a dict.

    Unbounded; callers that keep long histories should clear() it or
    provide their own bounded implementation.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[tuple[str, str], Document] = {}

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        return self._data.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        self._data[(content_hash, config_hash)] = doc

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


def hash_content(source: str) -> str:
    """SHA-256 hex digest of the source text."""
    return hash_str(source)


def hash_config(config: ParseConfig) -> str:
    """Hash every ParseConfig field that changes parse output."""
    parts = (
        f"normalize_underscores={config.normalize_underscores}",
        f"flush_unterminated={config.flush_unterminated}",
    )
    return hash_str("|".join(parts))


__all__ = [
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
]

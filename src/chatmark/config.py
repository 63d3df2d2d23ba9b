"""ContextVar-based parse configuration for chatmark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per ChatMarkdown instance and read by the block parser
and the inline tokenizer for the duration of a call.

Thread Safety:
    ContextVars are thread-local by design. Each thread (and each asyncio
    task) sees its own value, so no locks are needed.

Usage:
    # Through the high-level processor
    md = ChatMarkdown(normalize_underscores=True)
    blocks = md.parse("__hello__")

    # Or with the context manager
    with parse_config_context(ParseConfig(flush_unterminated=True)):
        blocks = parse("```\\nno closing fence")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        normalize_underscores: Rewrite ``__x__`` to ``**x**`` and ``_x_`` to
            ``*x*`` before inline tokenization. Off by default, so
            underscore-delimited text stays plain.
        flush_unterminated: At end of input, emit a code fence that was
            never closed, and a table whose run ended on its separator row
            with no later pipe row. Off by default: both are dropped.

    """

    normalize_underscores: bool = False
    flush_unterminated: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from a dictionary, ignoring unknown keys.

        Example:
            >>> ParseConfig.from_dict({"flush_unterminated": True, "theme": "dark"})
            ParseConfig(normalize_underscores=False, flush_unterminated=True)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "chatmark_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get the parse configuration active in this context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for the current context.

    Only affects the current thread's context. Pair with
    reset_parse_config() or prefer parse_config_context().

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(normalize_underscores=True)):
        ...     spans = tokenize("_hi_")
        >>> spans
        (Italic(text='hi'),)

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]

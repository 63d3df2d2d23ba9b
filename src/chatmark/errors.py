"""Exception classes for chatmark.

Parsing and tokenizing are total and never raise; these exceptions cover
the surrounding API (serialization of parsed documents).
"""

from __future__ import annotations


class ChatmarkError(Exception):
    """Base exception for all chatmark errors."""

    pass


class SerializationError(ChatmarkError, ValueError):
    """Serialized data cannot be turned back into nodes.

    Subclasses ValueError so callers validating untrusted payloads can
    catch either.
    """

    def __init__(self, message: str, type_name: str | None = None) -> None:
        """Initialize with an optional offending ``_type`` value.

        Args:
            message: Error description
            type_name: The ``_type`` discriminator that failed, if any
        """
        self.type_name = type_name
        super().__init__(message)

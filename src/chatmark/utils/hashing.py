"""Hashing helpers for cache keys.

Example:
    >>> from chatmark.utils.hashing import hash_str
    >>> hash_str("hello", truncate=16)
    '2cf24dba5fb0a30e'
"""

import hashlib


def hash_str(
    content: str,
    truncate: int | None = None,
    algorithm: str = "sha256",
) -> str:
    """Hash string content using the given algorithm.

    Args:
        content: String content to hash (encoded as UTF-8)
        truncate: Keep only the first N hex characters (None = full digest)
        algorithm: Any name accepted by ``hashlib.new``

    Returns:
        Hex digest, optionally truncated
    """
    hasher = hashlib.new(algorithm)
    hasher.update(content.encode("utf-8"))
    digest = hasher.hexdigest()
    return digest[:truncate] if truncate is not None else digest

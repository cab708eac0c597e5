"""
Hashing Utilities
SHA-256 primitives shared by transaction hashing and Merkle verification.

This module provides:
- SHA-256 hashing for raw bytes and text
- Hex-digest helpers matching the ledger service wire format
- A well-formedness predicate for digests

Wire Format Notes:
- Digests travel as lowercase hex strings without a 0x prefix
- Text is always encoded as UTF-8 before hashing
- Pair hashing operates on the hex *strings*, not on decoded bytes
"""
from __future__ import annotations

import hashlib
import re


# Length of a SHA-256 digest rendered as hex
DIGEST_HEX_LENGTH: int = 64

_DIGEST_PATTERN = re.compile(r"^[0-9a-f]{64}$")


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def sha256_hex(data: bytes | str) -> str:
    """
    Compute the lowercase hex SHA-256 digest of bytes or UTF-8 text.

    Args:
        data: Raw bytes, or a string that will be UTF-8 encoded

    Returns:
        64-character lowercase hex digest
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def hash_concat_hex(left: str, right: str) -> str:
    """
    Hash the concatenation of two hex digests.

    The digests are joined as text and the UTF-8 bytes of the result
    are hashed: sha256((left + right).encode("utf-8")).

    Args:
        left: First digest (placed first)
        right: Second digest (placed second)

    Returns:
        64-character lowercase hex digest
    """
    return sha256_hex(left + right)


def is_digest(value: object) -> bool:
    """
    Check whether a value is a well-formed digest.

    A well-formed digest is a 64-character lowercase hex string.
    Verification never depends on this check; it is informational.
    """
    return isinstance(value, str) and _DIGEST_PATTERN.match(value) is not None


__all__ = [
    "DIGEST_HEX_LENGTH",
    "sha256",
    "sha256_hex",
    "hash_concat_hex",
    "is_digest",
]

"""
Core cryptographic utilities.

SHA-256 hashing over bytes and hex strings, and transaction leaf hashing.
"""
from .hashing import (
    DIGEST_HEX_LENGTH,
    sha256,
    sha256_hex,
    hash_concat_hex,
    is_digest,
)
from .transactions import (
    TransactionHasher,
    canonicalize_transaction,
    hash_transaction,
    transaction_digests,
)

__all__ = [
    "DIGEST_HEX_LENGTH",
    "sha256",
    "sha256_hex",
    "hash_concat_hex",
    "is_digest",
    "TransactionHasher",
    "canonicalize_transaction",
    "hash_transaction",
    "transaction_digests",
]

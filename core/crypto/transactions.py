"""
Transaction Hashing
Canonicalize a transaction and hash it into a Merkle leaf digest.

This module provides:
- canonicalize_transaction: field serialization under a chosen scheme
- hash_transaction: leaf digest of a transaction
- TransactionHasher: scheme-bound convenience wrapper
- transaction_digests: leaf digests of every transaction in a block

Canonicalization Rules (Hard Contracts):
1. CONCAT (ledger service default):
   sender + recipient + str(amount), no separators
   e.g. ("Alice", "Bob", 10) -> "AliceBob10"
2. LENGTH_PREFIXED: each field as "<utf-8 byte length>:<field>"
   e.g. ("Alice", "Bob", 10) -> "5:Alice3:Bob2:10"
3. The canonical text is UTF-8 encoded and hashed with SHA-256

CONCAT must match the party that built the Merkle tree bit for bit.
It is ambiguous at field boundaries: ("Al", "iceBob", 10) hashes the
same as ("Alice", "Bob", 10). LENGTH_PREFIXED is not.
"""
from __future__ import annotations

from core.crypto.hashing import sha256_hex
from core.schemas.ledger import Block, Canonicalization, Digest, Transaction


def _length_prefixed(field: str) -> str:
    return f"{len(field.encode('utf-8'))}:{field}"


def canonicalize_transaction(
    tx: Transaction,
    scheme: Canonicalization = Canonicalization.CONCAT,
) -> str:
    """
    Serialize a transaction's fields into canonical text.

    Args:
        tx: Transaction to serialize
        scheme: Canonicalization scheme

    Returns:
        Canonical text that will be hashed
    """
    fields = (tx.sender, tx.recipient, str(tx.amount))
    if scheme == Canonicalization.LENGTH_PREFIXED:
        return "".join(_length_prefixed(field) for field in fields)
    return "".join(fields)


def hash_transaction(
    tx: Transaction,
    scheme: Canonicalization = Canonicalization.CONCAT,
) -> Digest:
    """
    Compute the Merkle leaf digest of a transaction.

    Pure and total: equal transactions always yield equal digests.

    Args:
        tx: Transaction to hash
        scheme: Canonicalization scheme

    Returns:
        64-character lowercase hex digest

    Example:
        >>> hash_transaction(Transaction(sender="Alice", recipient="Bob", amount=10))
        '9331e000777877ac9b82fb7b8cef3de72fe58570e59244ca6eed0128d8fa9cfa'
    """
    return sha256_hex(canonicalize_transaction(tx, scheme))


class TransactionHasher:
    """
    Transaction hasher bound to one canonicalization scheme.

    Example:
        >>> hasher = TransactionHasher()
        >>> hasher.hash(Transaction(sender="Alice", recipient="Bob", amount=10))[:8]
        '9331e000'
    """

    def __init__(self, scheme: Canonicalization = Canonicalization.CONCAT) -> None:
        self.scheme = Canonicalization(scheme)

    def canonicalize(self, tx: Transaction) -> str:
        """Return the canonical text for a transaction."""
        return canonicalize_transaction(tx, self.scheme)

    def hash(self, tx: Transaction) -> Digest:
        """Return the leaf digest for a transaction."""
        return hash_transaction(tx, self.scheme)

    def __repr__(self) -> str:
        return f"TransactionHasher(scheme={self.scheme.value!r})"


def transaction_digests(
    block: Block,
    scheme: Canonicalization = Canonicalization.CONCAT,
) -> list[Digest]:
    """
    Leaf digests of a block's transactions, in block order.

    These are the values a user looks up proofs for.
    """
    return [hash_transaction(tx, scheme) for tx in block.transactions]


__all__ = [
    "canonicalize_transaction",
    "hash_transaction",
    "TransactionHasher",
    "transaction_digests",
]

"""
Merkle Path Replay
Recompute a Merkle root from a leaf digest and a proof path.

This module provides:
- Sorted pair hashing (the ledger service's pairing rule)
- Position-tagged pair hashing
- Root recomputation and proof verification for both pairing modes

Canonical Commitment Rules (Hard Contracts):
1. Digests are lowercase hex strings; pair hashing works on the strings:
   parent = sha256((first + second).encode("utf-8")).hexdigest()
2. Sorted mode: of (current, sibling), the lexicographically smaller
   string is placed first
3. Positional mode: a LEFT sibling is placed first, a RIGHT sibling second
4. Empty proof: the leaf is claimed to be the root itself

Totality Notes:
- Verification never raises for string inputs; malformed digests are
  ordinary strings that simply fail to match
- No I/O, no logging, no shared state: safe to call concurrently
- Cost is linear in proof length
"""
from __future__ import annotations

from typing import Sequence

from core.crypto.hashing import hash_concat_hex
from core.schemas.ledger import Digest, NodePosition, ProofStep


def merkle_parent(a: Digest, b: Digest) -> Digest:
    """
    Compute the parent of two nodes under the sorted pairing rule.

    The smaller string is hashed first, so argument order is irrelevant:
    merkle_parent(a, b) == merkle_parent(b, a).

    Args:
        a: One child digest
        b: The other child digest

    Returns:
        Parent digest (64 hex chars)
    """
    if a < b:
        return hash_concat_hex(a, b)
    return hash_concat_hex(b, a)


def positional_parent(current: Digest, sibling: Digest, position: NodePosition) -> Digest:
    """
    Compute the parent of two nodes with an explicit sibling position.

    Args:
        current: Running digest
        sibling: Sibling digest
        position: Side on which the sibling sits

    Returns:
        Parent digest (64 hex chars)
    """
    if position == NodePosition.LEFT:
        return hash_concat_hex(sibling, current)
    return hash_concat_hex(current, sibling)


def compute_root(leaf: Digest, proof: Sequence[Digest]) -> Digest:
    """
    Replay a sorted-pairing proof path from a leaf.

    Algorithm:
    1. current = leaf
    2. For each sibling, in order: current = merkle_parent(current, sibling)
    3. Return current

    Args:
        leaf: Leaf digest
        proof: Root-ward sibling digests

    Returns:
        The recomputed root digest (the leaf itself for an empty proof)
    """
    current = leaf
    for sibling in proof:
        current = merkle_parent(current, sibling)
    return current


def compute_tagged_root(leaf: Digest, proof: Sequence[ProofStep]) -> Digest:
    """
    Replay a position-tagged proof path from a leaf.

    Args:
        leaf: Leaf digest
        proof: Root-ward proof steps

    Returns:
        The recomputed root digest (the leaf itself for an empty proof)
    """
    current = leaf
    for step in proof:
        current = positional_parent(current, step.digest, step.position)
    return current


def verify_merkle_proof(leaf: Digest, proof: Sequence[Digest], expected_root: Digest) -> bool:
    """
    Verify that a leaf is included under a claimed root.

    Any mismatch (wrong proof length, tampered sibling, tampered leaf,
    wrong root, reordered path) yields False. An empty proof verifies
    iff leaf == expected_root.

    Args:
        leaf: Leaf digest
        proof: Root-ward sibling digests
        expected_root: Claimed Merkle root

    Returns:
        True if the recomputed root equals expected_root
    """
    return compute_root(leaf, proof) == expected_root


def verify_tagged_merkle_proof(
    leaf: Digest,
    proof: Sequence[ProofStep],
    expected_root: Digest,
) -> bool:
    """
    Verify a position-tagged proof against a claimed root.

    Args:
        leaf: Leaf digest
        proof: Root-ward proof steps
        expected_root: Claimed Merkle root

    Returns:
        True if the recomputed root equals expected_root
    """
    return compute_tagged_root(leaf, proof) == expected_root


__all__ = [
    "merkle_parent",
    "positional_parent",
    "compute_root",
    "compute_tagged_root",
    "verify_merkle_proof",
    "verify_tagged_merkle_proof",
]

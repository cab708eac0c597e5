"""
Merkle Inclusion Verification
Replay a proof path from a leaf digest and compare with a claimed root.

This package provides:
- merkle_parent / positional_parent: one hashing step
- compute_root / compute_tagged_root: full path replay
- verify_merkle_proof / verify_tagged_merkle_proof: boolean verdicts
- MerkleVerifier: class-based wrapper working on ledger proof results

Pairing Rules:
1. Sorted (default): the smaller of (current, sibling) as strings goes first
2. Positional: the sibling's tagged side decides the order
3. Parent: sha256((first + second).encode("utf-8")).hexdigest()
4. Empty proof: verifies iff leaf == root

Usage:
    from core.merkle import verify_merkle_proof
    from core.crypto import hash_transaction

    leaf = hash_transaction(tx)
    ok = verify_merkle_proof(leaf, result.proof_path, result.merkle_root)
"""
from .merkle_path import (
    merkle_parent,
    positional_parent,
    compute_root,
    compute_tagged_root,
    verify_merkle_proof,
    verify_tagged_merkle_proof,
)

from .merkle_proofs import (
    MerkleVerifier,
)


__all__ = [
    # Core functions
    "merkle_parent",
    "positional_parent",
    "compute_root",
    "compute_tagged_root",
    "verify_merkle_proof",
    "verify_tagged_merkle_proof",
    # Convenience classes
    "MerkleVerifier",
]

"""
Merkle Verifier
Class-based wrapper around the path replay functions in merkle_path.py.

This module provides:
- MerkleVerifier: verify raw proof paths, proof results received from
  the ledger service, and transactions against those results
"""
from __future__ import annotations

from typing import Sequence

from core.crypto.hashing import is_digest
from core.crypto.transactions import TransactionHasher
from core.merkle.merkle_path import verify_merkle_proof, verify_tagged_merkle_proof
from core.schemas.ledger import Digest, MerkleProofResult, ProofStep, Transaction
from core.schemas.verification import CheckResult


class MerkleVerifier:
    """
    Verifies Merkle inclusion proofs.

    All methods are pure: they never raise for string inputs and never
    mutate their arguments.

    Example:
        >>> verifier = MerkleVerifier()
        >>> verifier.verify(leaf, [], leaf)
        True
    """

    def __init__(self, hasher: TransactionHasher | None = None) -> None:
        self.hasher = hasher or TransactionHasher()

    @staticmethod
    def verify(leaf: Digest, proof: Sequence[Digest], expected_root: Digest) -> bool:
        """
        Verify a sorted-pairing proof path.

        Args:
            leaf: Leaf digest
            proof: Root-ward sibling digests
            expected_root: Claimed Merkle root

        Returns:
            True if the proof reproduces expected_root
        """
        return verify_merkle_proof(leaf, proof, expected_root)

    @staticmethod
    def verify_tagged(
        leaf: Digest,
        proof: Sequence[ProofStep],
        expected_root: Digest,
    ) -> bool:
        """Verify a position-tagged proof path."""
        return verify_tagged_merkle_proof(leaf, proof, expected_root)

    @staticmethod
    def verify_result(result: MerkleProofResult) -> bool:
        """
        Verify a proof result exactly as received from the ledger service.

        This only shows that result.tx_hash is under result.merkle_root.
        Use verify_transaction to also bind the proof to a transaction.
        """
        return verify_merkle_proof(result.tx_hash, result.proof_path, result.merkle_root)

    def verify_transaction(self, tx: Transaction, result: MerkleProofResult) -> bool:
        """
        Verify that a transaction is the leaf a proof result was issued for,
        and that the proof reproduces the result's root.
        """
        if self.hasher.hash(tx) != result.tx_hash:
            return False
        return self.verify_result(result)

    def check(
        self,
        result: MerkleProofResult,
        tx: Transaction | None = None,
    ) -> list[CheckResult]:
        """
        Run verification as a list of named checks, for presentation.

        Checks:
        - digest_format: warns on ill-formed digests (never fails)
        - leaf_hash: transaction digest equals result.tx_hash (if tx given)
        - merkle_root: proof reproduces result.merkle_root
        """
        checks: list[CheckResult] = []

        malformed = [
            value
            for value in (result.tx_hash, result.merkle_root, *result.proof_path)
            if not is_digest(value)
        ]
        if malformed:
            checks.append(CheckResult.warning(
                "digest_format",
                f"{len(malformed)} value(s) are not 64-char lowercase hex digests",
                details={"values": malformed[:5]},
            ))
        else:
            checks.append(CheckResult.passed("digest_format", "All digests well-formed"))

        if tx is not None:
            leaf = self.hasher.hash(tx)
            if leaf == result.tx_hash:
                checks.append(CheckResult.passed("leaf_hash", "Transaction digest matches proof leaf"))
            else:
                checks.append(CheckResult.failed(
                    "leaf_hash",
                    "Transaction digest does not match proof leaf",
                    details={"computed": leaf, "claimed": result.tx_hash},
                ))

        if self.verify_result(result):
            checks.append(CheckResult.passed(
                "merkle_root",
                f"Proof of depth {result.depth} reproduces the block root",
            ))
        else:
            checks.append(CheckResult.failed(
                "merkle_root",
                "Proof does not reproduce the block root",
                details={"merkle_root": result.merkle_root, "depth": result.depth},
            ))

        return checks

    def __repr__(self) -> str:
        return f"MerkleVerifier(hasher={self.hasher!r})"


__all__ = [
    "MerkleVerifier",
]

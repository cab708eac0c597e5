"""
Light Client

Checks transaction inclusion without trusting the ledger service:
the service only supplies a proof path and a root; the leaf digest is
computed (or supplied) locally and the path is replayed locally.

Flow:
    tx or digest -> TransactionHasher -> ProofSource.fetch_proof
                 -> MerkleVerifier -> InclusionReport -> on_event callback

Notifications are a callback boundary: the presentation layer decides how
to show a report and for how long. Transport errors from the source
propagate to the caller.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from core.config.runtime import RuntimeConfig
from core.crypto.transactions import TransactionHasher
from core.ledger.proof_source import ProofSource
from core.merkle.merkle_proofs import MerkleVerifier
from core.schemas.ledger import Digest, Transaction
from core.schemas.verification import CheckResult, InclusionReport


logger = logging.getLogger(__name__)

InclusionCallback = Callable[[InclusionReport], None]

MSG_VERIFIED = "Merkle proof verified: the transaction is included in the block."
MSG_FAILED = "Merkle proof verification FAILED: the transaction is not in the block or the proof is invalid."
MSG_NOT_FOUND = "Transaction or Merkle proof not found in any block. Has it been mined yet?"


class LightClient:
    """
    Inclusion checks against a proof source.

    Usage:
        client = LightClient(HttpProofSource("http://127.0.0.1:8000"))
        report = client.check_inclusion(Transaction(sender="Alice", recipient="Bob", amount=10))
        if report.ok:
            print(f"included in block {report.result.block_index}")
    """

    def __init__(
        self,
        source: ProofSource,
        *,
        verifier: Optional[MerkleVerifier] = None,
        on_event: Optional[InclusionCallback] = None,
    ) -> None:
        self.source = source
        self.verifier = verifier or MerkleVerifier()
        self.on_event = on_event

    @classmethod
    def from_config(
        cls,
        source: ProofSource,
        config: RuntimeConfig,
        on_event: Optional[InclusionCallback] = None,
    ) -> "LightClient":
        """Build a client whose hasher follows the configured canonicalization."""
        verifier = MerkleVerifier(TransactionHasher(config.verifier.scheme))
        return cls(source, verifier=verifier, on_event=on_event)

    @property
    def hasher(self) -> TransactionHasher:
        return self.verifier.hasher

    def leaf_for(self, target: Union[Transaction, Digest]) -> Digest:
        """Return the leaf digest for a transaction, or the digest itself."""
        if isinstance(target, Transaction):
            return self.hasher.hash(target)
        return target

    def check_inclusion(self, target: Union[Transaction, Digest]) -> InclusionReport:
        """
        Check that a transaction (or leaf digest) is included in some block.

        The proof is replayed from the locally known leaf, never from the
        tx_hash echoed back by the service.

        Args:
            target: Transaction to hash, or a leaf digest

        Returns:
            InclusionReport with status verified / not_found / failed

        Raises:
            ProofSourceException: If the source cannot be queried
        """
        leaf = self.leaf_for(target)
        tx = target if isinstance(target, Transaction) else None

        result = self.source.fetch_proof(leaf)
        if result is None:
            report = InclusionReport(status="not_found", tx_hash=leaf, message=MSG_NOT_FOUND)
            return self._emit(report)

        checks = self.verifier.check(result, tx)
        if tx is None:
            if result.tx_hash == leaf:
                checks.insert(0, CheckResult.passed("requested_leaf", "Proof was issued for the requested leaf"))
            else:
                checks.insert(0, CheckResult.failed(
                    "requested_leaf",
                    "Proof was issued for a different leaf",
                    details={"requested": leaf, "returned": result.tx_hash},
                ))

        verified = self.verifier.verify(leaf, result.proof_path, result.merkle_root)
        report = InclusionReport(
            status="verified" if verified else "failed",
            tx_hash=leaf,
            result=result,
            message=MSG_VERIFIED if verified else MSG_FAILED,
            checks=checks,
        )
        return self._emit(report)

    def _emit(self, report: InclusionReport) -> InclusionReport:
        if report.ok:
            logger.info(f"{report.tx_hash[:16]}...: verified in block {report.result.block_index}")
        else:
            logger.warning(f"{report.tx_hash[:16]}...: {report.status}")
        if self.on_event is not None:
            self.on_event(report)
        return report

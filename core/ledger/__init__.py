"""
Ledger Service Collaborators

Proof lookup and ledger service access. Nothing here is needed to verify
a proof; these only obtain one.
"""

from .proof_source import HttpProofSource, InMemoryProofSource, ProofSource
from .service import LedgerServiceClient

__all__ = [
    "ProofSource",
    "InMemoryProofSource",
    "HttpProofSource",
    "LedgerServiceClient",
]

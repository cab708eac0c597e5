"""
Proof Sources

The light client depends on one external capability: given a leaf digest,
return a MerkleProofResult or an explicit "not found" (None).

Implementations:
- InMemoryProofSource: fixed table of proofs (offline use, tests)
- HttpProofSource: the ledger service's GET /get_merkle_proof/{tx_hash}

The verification core performs no caching or retries; any retry policy
belongs to the source (HttpProofSource delegates it to HttpClient).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional
from urllib.parse import quote

from pydantic import ValidationError

from core.http.client import HttpClient, HttpError
from core.schemas.errors import ProofSourceException, SchemaValidationException
from core.schemas.ledger import Digest, MerkleProofResult


logger = logging.getLogger(__name__)


class ProofSource(ABC):
    """Lookup of inclusion proofs by leaf digest."""

    @abstractmethod
    def fetch_proof(self, tx_hash: Digest) -> Optional[MerkleProofResult]:
        """
        Look up the inclusion proof for a transaction digest.

        Args:
            tx_hash: Leaf digest of the transaction

        Returns:
            The proof, or None if the transaction is not in any block

        Raises:
            ProofSourceException: If the source cannot answer right now
        """


class InMemoryProofSource(ProofSource):
    """
    Proof source backed by a dict keyed on tx_hash.

    Example:
        >>> source = InMemoryProofSource([result])
        >>> source.fetch_proof(result.tx_hash) is result
        True
    """

    def __init__(self, results: Iterable[MerkleProofResult] = ()) -> None:
        self._results: dict[Digest, MerkleProofResult] = {}
        for result in results:
            self.add(result)

    def add(self, result: MerkleProofResult) -> None:
        """Register a proof (replaces any previous proof for the same leaf)."""
        self._results[result.tx_hash] = result

    def fetch_proof(self, tx_hash: Digest) -> Optional[MerkleProofResult]:
        return self._results.get(tx_hash)

    def __len__(self) -> int:
        return len(self._results)


class HttpProofSource(ProofSource):
    """
    Proof source that queries the ledger service over HTTP.

    Response handling:
    - 200: body parsed as MerkleProofResult (snake_case or camelCase)
    - 404: transaction not found in any block -> None
    - anything else, or a transport error -> ProofSourceException
    """

    PROOF_ENDPOINT = "/get_merkle_proof/{tx_hash}"

    def __init__(
        self,
        base_url: str,
        *,
        http: Optional[HttpClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.http = http or HttpClient()

    def url_for(self, path: str) -> str:
        """Join an endpoint path onto the service base URL."""
        return f"{self.base_url}{path}"

    def fetch_proof(self, tx_hash: Digest) -> Optional[MerkleProofResult]:
        url = self.url_for(self.PROOF_ENDPOINT.format(tx_hash=quote(tx_hash, safe="")))
        logger.info(f"Fetching Merkle proof for {tx_hash[:16]}...")

        try:
            response = self.http.get(url)
        except HttpError as e:
            raise ProofSourceException(
                f"Ledger service unreachable: {e}",
                tx_hash=tx_hash,
            ) from e

        if response.status_code == 404:
            logger.info(f"No proof for {tx_hash[:16]}... (not in any block)")
            return None

        if not response.ok:
            raise ProofSourceException(
                f"Ledger service returned HTTP {response.status_code}",
                tx_hash=tx_hash,
                status_code=response.status_code,
            )

        try:
            result = MerkleProofResult.model_validate(response.json())
        except ValueError as e:
            # Covers both JSON decoding errors and pydantic ValidationError
            field_path = None
            if isinstance(e, ValidationError) and e.errors():
                field_path = ".".join(str(p) for p in e.errors()[0]["loc"])
            raise SchemaValidationException(
                f"Malformed proof payload: {e}",
                field_path=field_path,
                details={"tx_hash": tx_hash},
            ) from e

        logger.debug(
            f"Proof for {tx_hash[:16]}...: block {result.block_index}, depth {result.depth}"
        )
        return result

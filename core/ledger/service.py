"""
Ledger Service Client

Read/submit access to the external ledger service, on top of the
proof lookup provided by HttpProofSource.

Endpoints used:
    GET  /node_id            -> JSON string
    GET  /chain              -> list of blocks
    POST /transactions/new   -> JSON string message (HTTP 201)
    GET  /get_merkle_proof/{tx_hash}

Block production (/mine) is deliberately not exposed.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError

from core.config.runtime import RuntimeConfig
from core.http.client import HttpClient, HttpError, HttpResponse
from core.ledger.proof_source import HttpProofSource
from core.schemas.errors import LedgerServiceException, SchemaValidationException
from core.schemas.ledger import Block, Transaction


logger = logging.getLogger(__name__)


class LedgerServiceClient(HttpProofSource):
    """
    Client for the ledger service.

    Usage:
        with LedgerServiceClient("http://127.0.0.1:8000") as service:
            for block in service.get_chain():
                print(block.index, block.merkle_root)
    """

    @classmethod
    def from_config(cls, config: RuntimeConfig) -> "LedgerServiceClient":
        """Build a client from runtime configuration."""
        http = HttpClient(
            timeout=config.http.timeout,
            max_retries=config.http.max_retries,
            retry_delay=config.http.retry_delay,
            default_headers={"User-Agent": config.http.user_agent},
            proxy=config.proxy,
        )
        return cls(config.ledger.base_url, http=http)

    def _call(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Any] = None,
    ) -> HttpResponse:
        url = self.url_for(path)
        try:
            response = self.http.request(method, url, json=json)
        except HttpError as e:
            raise LedgerServiceException(
                f"Ledger service unreachable: {e}",
                endpoint=path,
            ) from e
        if not response.ok:
            raise LedgerServiceException(
                f"{method} {path} returned HTTP {response.status_code}",
                endpoint=path,
                status_code=response.status_code,
            )
        return response

    def _call_json(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Any] = None,
    ) -> Any:
        response = self._call(method, path, json=json)
        try:
            return response.json()
        except ValueError as e:
            raise SchemaValidationException(
                f"{method} {path} returned a non-JSON body: {e}",
                details={"endpoint": path},
            ) from e

    def get_node_id(self) -> str:
        """Return the service's node identifier."""
        return str(self._call_json("GET", "/node_id"))

    def get_chain(self) -> list[Block]:
        """Return every block in the service's chain, genesis first."""
        payload = self._call_json("GET", "/chain")
        if not isinstance(payload, list):
            raise SchemaValidationException(
                "Expected a list of blocks from /chain",
                details={"type": type(payload).__name__},
            )
        try:
            blocks = [Block.model_validate(item) for item in payload]
        except ValidationError as e:
            raise SchemaValidationException(f"Malformed block in chain: {e}") from e
        logger.info(f"Loaded chain with {len(blocks)} blocks")
        return blocks

    def submit_transaction(self, tx: Transaction) -> str:
        """
        Queue a transaction with the ledger service.

        The transaction only becomes provable once the service has
        included it in a block.

        Returns:
            The service's confirmation message
        """
        message = self._call_json("POST", "/transactions/new", json=tx.model_dump(mode="json"))
        logger.info(f"Submitted transaction {tx.sender} -> {tx.recipient}: {message}")
        return str(message)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http.close()

    def __enter__(self) -> "LedgerServiceClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

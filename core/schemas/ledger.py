"""
Schemas
File: ledger.py

Purpose: Data contracts shared with the external ledger service.

The ledger service emits snake_case field names (tx_hash, merkle_root,
block_index, merkle_proof). The light client's public shape uses
txHash, merkleRoot, blockIndex, proofPath. Both are accepted on input;
camelCase is emitted on output.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Any, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


# A lowercase hex SHA-256 string. Kept as plain str: ill-formed values
# must flow through verification and simply fail to match.
Digest = str

# Root-ward ordered sibling digests (index 0 = sibling of the leaf)
ProofPath = Sequence[Digest]

_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


class NodePosition(str, Enum):
    """Side on which a sibling digest sits relative to the running hash."""

    LEFT = "left"
    RIGHT = "right"


class PairingMode(str, Enum):
    """How a verifier orders each (current, sibling) pair before hashing."""

    SORTED = "sorted"
    POSITIONAL = "positional"


class Canonicalization(str, Enum):
    """How transaction fields are serialized before hashing."""

    CONCAT = "concat"
    LENGTH_PREFIXED = "length_prefixed"


class Transaction(BaseModel):
    """
    A value transfer recorded on the ledger.

    Equal transactions (field for field) always hash to the same leaf.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    sender: str = Field(..., description="Sending account identifier")
    recipient: str = Field(..., description="Receiving account identifier")
    amount: int = Field(
        ...,
        ge=0,
        strict=True,
        description="Transferred amount, rendered as a plain decimal string when hashed",
    )


class ProofStep(BaseModel):
    """
    One entry of a position-tagged proof path.

    `position` is the side of the *sibling*: LEFT means the sibling
    is hashed first, RIGHT means it is hashed second.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    digest: Digest = Field(..., description="Sibling digest")
    position: NodePosition = Field(..., description="Sibling side")

    @classmethod
    def parse(cls, token: str) -> "ProofStep":
        """
        Parse a `left:<digest>` / `right:<digest>` token.

        Raises:
            ValueError: If the token has no recognised position prefix
        """
        side, sep, digest = token.partition(":")
        if not sep:
            raise ValueError(f"Expected '<left|right>:<digest>', got: {token!r}")
        return cls(digest=digest, position=NodePosition(side.strip().lower()))


class MerkleProofResult(BaseModel):
    """
    Inclusion proof for one transaction, as returned by the ledger service.

    Immutable: the light client never mutates a received proof.
    `block_index` is informational only.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    tx_hash: Digest = Field(
        ...,
        validation_alias=AliasChoices("txHash", "tx_hash"),
        serialization_alias="txHash",
        description="Leaf digest the proof was issued for",
    )
    merkle_root: Digest = Field(
        ...,
        validation_alias=AliasChoices("merkleRoot", "merkle_root"),
        serialization_alias="merkleRoot",
        description="Merkle root of the block containing the transaction",
    )
    block_index: int = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("blockIndex", "block_index"),
        serialization_alias="blockIndex",
        description="Index of the block containing the transaction",
    )
    proof_path: tuple[Digest, ...] = Field(
        default=(),
        validation_alias=AliasChoices("proofPath", "proof_path", "merkle_proof"),
        serialization_alias="proofPath",
        description="Root-ward sibling digests",
    )

    @property
    def depth(self) -> int:
        """Number of hashing steps between leaf and root."""
        return len(self.proof_path)

    def to_wire(self) -> dict[str, Any]:
        """Serialize using the public camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)


class Block(BaseModel):
    """
    A mined block as served by the ledger service's chain endpoint.

    Read-only view; the light client never produces blocks.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    index: int = Field(..., ge=0, description="Position of the block in the chain")
    timestamp: datetime = Field(..., description="When the block was produced")
    transactions: list[Transaction] = Field(default_factory=list)
    proof: int = Field(..., description="Proof-of-work nonce")
    previous_hash: str = Field(..., description="Hash of the preceding block")
    merkle_root: str = Field(
        default="",
        description="Merkle root over the block's transaction digests (empty for no transactions)",
    )

    @field_validator("timestamp", mode="before")
    @classmethod
    def _truncate_subsecond_digits(cls, value: Any) -> Any:
        # The service emits nanosecond precision; datetime holds microseconds
        if isinstance(value, str):
            return _EXCESS_FRACTION.sub(r"\1", value)
        return value

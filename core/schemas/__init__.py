"""
Schemas
File: __init__.py

Purpose: Export the public API for the schemas package.
This is the main entry point for other modules to import schema definitions.
"""

# Error models and exceptions
from .errors import (
    ConfigurationException,
    ErrorCodes,
    LedgerProofError,
    LedgerProofException,
    LedgerServiceException,
    ProofSourceException,
    SchemaValidationException,
)

# Ledger data contracts
from .ledger import (
    Block,
    Canonicalization,
    Digest,
    MerkleProofResult,
    NodePosition,
    PairingMode,
    ProofPath,
    ProofStep,
    Transaction,
)

# Verification results
from .verification import (
    CheckResult,
    CheckSeverity,
    InclusionReport,
    InclusionStatus,
)


__all__ = [
    # Errors
    "ConfigurationException",
    "ErrorCodes",
    "LedgerProofError",
    "LedgerProofException",
    "LedgerServiceException",
    "ProofSourceException",
    "SchemaValidationException",
    # Ledger
    "Block",
    "Canonicalization",
    "Digest",
    "MerkleProofResult",
    "NodePosition",
    "PairingMode",
    "ProofPath",
    "ProofStep",
    "Transaction",
    # Verification
    "CheckResult",
    "CheckSeverity",
    "InclusionReport",
    "InclusionStatus",
]

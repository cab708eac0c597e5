"""
Schemas
File: errors.py

Purpose: Standard error taxonomy for the light client.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.

Verification itself never raises; these errors cover the edges of the
system (payloads received from the ledger service, transport failures).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Schema & Validation Errors
    SCHEMA_VALIDATION_ERROR = "SCHEMA_VALIDATION_ERROR"

    # Ledger Service Errors
    PROOF_SOURCE_UNAVAILABLE = "PROOF_SOURCE_UNAVAILABLE"
    LEDGER_SERVICE_ERROR = "LEDGER_SERVICE_ERROR"

    # Configuration Errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class LedgerProofError(BaseModel):
    """
    Base error model for structured error communication.

    Used for passing errors between layers without exceptions,
    e.g. in JSON output of the CLI.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.SCHEMA_VALIDATION_ERROR],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "LedgerProofException":
        """Convert this error model to a raised exception."""
        return LedgerProofException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class LedgerProofException(Exception):
    """
    Base exception for all light-client errors.

    Carries structured error information and can be converted
    to a LedgerProofError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "LEDGERPROOF_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> LedgerProofError:
        """Convert this exception to a LedgerProofError model."""
        return LedgerProofError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class SchemaValidationException(LedgerProofException):
    """Exception raised when a payload does not match the expected schema."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.SCHEMA_VALIDATION_ERROR,
            details=full_details,
            retryable=False,
        )


class ProofSourceException(LedgerProofException):
    """Exception raised when the proof source cannot answer a lookup."""

    def __init__(
        self,
        message: str,
        tx_hash: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if tx_hash:
            full_details["tx_hash"] = tx_hash
        if status_code is not None:
            full_details["status_code"] = status_code
        super().__init__(
            message=message,
            code=ErrorCodes.PROOF_SOURCE_UNAVAILABLE,
            details=full_details,
            retryable=True,
        )


class LedgerServiceException(LedgerProofException):
    """Exception raised when a non-proof ledger service call fails."""

    def __init__(
        self,
        message: str,
        endpoint: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if endpoint:
            full_details["endpoint"] = endpoint
        if status_code is not None:
            full_details["status_code"] = status_code
        super().__init__(
            message=message,
            code=ErrorCodes.LEDGER_SERVICE_ERROR,
            details=full_details,
            retryable=status_code is None or status_code >= 500,
        )


class ConfigurationException(LedgerProofException):
    """Exception raised for invalid configuration values."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if key:
            full_details["key"] = key
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIGURATION_ERROR,
            details=full_details,
            retryable=False,
        )

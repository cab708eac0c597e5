"""
Schemas
File: verification.py

Purpose: Result formats for inclusion checks.

The Merkle verifier itself only answers True/False. These models let a
caller combine that verdict with the presence or absence of a proof
result into something presentable.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .ledger import MerkleProofResult


# Severity levels for checks
CheckSeverity = Literal["info", "warn", "error"]

# Outcome of an inclusion check
InclusionStatus = Literal["verified", "not_found", "failed"]


class CheckResult(BaseModel):
    """
    Result of a single verification check.

    Checks are atomic verification steps that can pass or fail.
    """

    model_config = ConfigDict(extra="forbid")

    check_id: str = Field(
        ...,
        description="Unique identifier for this check",
        min_length=1,
    )
    ok: bool = Field(
        ...,
        description="Whether the check passed",
    )
    severity: CheckSeverity = Field(
        ...,
        description="Severity level of this check",
    )
    message: str = Field(
        ...,
        description="Human-readable message describing the result",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional details about the check",
    )

    @property
    def is_error(self) -> bool:
        """Check if this is an error-level failure."""
        return not self.ok and self.severity == "error"

    @classmethod
    def passed(
        cls,
        check_id: str,
        message: str = "Check passed",
        details: dict[str, Any] | None = None,
    ) -> "CheckResult":
        """Create a passed check result."""
        return cls(
            check_id=check_id,
            ok=True,
            severity="info",
            message=message,
            details=details or {},
        )

    @classmethod
    def warning(
        cls,
        check_id: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> "CheckResult":
        """Create a warning check result."""
        return cls(
            check_id=check_id,
            ok=True,  # Warnings don't fail the check
            severity="warn",
            message=message,
            details=details or {},
        )

    @classmethod
    def failed(
        cls,
        check_id: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> "CheckResult":
        """Create a failed check result."""
        return cls(
            check_id=check_id,
            ok=False,
            severity="error",
            message=message,
            details=details or {},
        )


class InclusionReport(BaseModel):
    """
    Outcome of checking one transaction against the ledger service.

    - verified: a proof was found and it reproduces the claimed root
    - not_found: the service has no proof (e.g. transaction not yet mined)
    - failed: a proof was found but it does not verify
    """

    model_config = ConfigDict(extra="forbid")

    status: InclusionStatus = Field(..., description="Overall outcome")
    tx_hash: str = Field(..., description="Leaf digest that was looked up")
    result: MerkleProofResult | None = Field(
        default=None,
        description="Proof returned by the ledger service, if any",
    )
    message: str = Field(default="", description="Human-readable summary")
    checks: list[CheckResult] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True only when inclusion was verified."""
        return self.status == "verified"

    @property
    def is_error(self) -> bool:
        """True for outcomes a UI would show as an error."""
        return self.status != "verified"

    def get_failed_checks(self) -> list[CheckResult]:
        """Get all failed checks."""
        return [check for check in self.checks if not check.ok]

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output, using wire names for the proof."""
        data: dict[str, Any] = {
            "status": self.status,
            "ok": self.ok,
            "txHash": self.tx_hash,
            "message": self.message,
        }
        if self.result is not None:
            data["proof"] = self.result.to_wire()
        if self.checks:
            data["checks"] = [check.model_dump(mode="json") for check in self.checks]
        return data

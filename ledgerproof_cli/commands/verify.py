"""
CLI Verify Command

Verify a Merkle proof offline from a leaf digest, a claimed root and the
sibling digests, without contacting the ledger service.

Usage:
    ledgerproof verify <leaf> <root> [sibling ...] [--mode sorted|positional] [--json]

In positional mode each sibling is written as left:<digest> or right:<digest>.
"""

from __future__ import annotations

import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass, field
from typing import Any

from pydantic import ValidationError

from core.crypto.hashing import is_digest
from core.merkle.merkle_path import compute_root, compute_tagged_root
from core.schemas.ledger import PairingMode, ProofStep
from ledgerproof_cli.commands.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    get_config,
    print_json,
)


logger = logging.getLogger(__name__)


@dataclass
class VerifySummary:
    """Summary of an offline verification for CLI output."""
    leaf: str = ""
    root: str = ""
    mode: str = PairingMode.SORTED.value
    depth: int = 0
    ok: bool = False
    computed_root: str | None = None
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        if d["computed_root"] is None:
            del d["computed_root"]
        if not d["warnings"]:
            del d["warnings"]
        return d


def digest_warnings(leaf: str, root: str, siblings: list[str]) -> list[str]:
    """Describe ill-formed inputs; these never change the verdict."""
    warnings = []
    if not is_digest(leaf):
        warnings.append("leaf is not a 64-char lowercase hex digest")
    if not is_digest(root):
        warnings.append("root is not a 64-char lowercase hex digest")
    for i, sibling in enumerate(siblings):
        if not is_digest(sibling):
            warnings.append(f"sibling {i} is not a 64-char lowercase hex digest")
    return warnings


def print_summary_human(summary: VerifySummary) -> None:
    """Print summary in human-readable format."""
    print(f"leaf: {summary.leaf}")
    print(f"root: {summary.root}")
    print(f"mode: {summary.mode}")
    print(f"depth: {summary.depth}")
    print(f"ok: {str(summary.ok).lower()}")
    if summary.computed_root is not None:
        print(f"computed_root: {summary.computed_root}")
    for warning in summary.warnings:
        print(f"  ! {warning}")


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 verified, 2 not verified, 1 bad input)
    """
    mode = PairingMode(args.mode) if args.mode else get_config(args).verifier.pairing
    siblings: list[str] = list(args.siblings or [])

    if mode == PairingMode.POSITIONAL:
        try:
            steps = [ProofStep.parse(token) for token in siblings]
        except (ValueError, ValidationError) as e:
            print(f"Error: invalid proof step: {e}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR
        computed = compute_tagged_root(args.leaf, steps)
        sibling_digests = [step.digest for step in steps]
    else:
        computed = compute_root(args.leaf, siblings)
        sibling_digests = siblings

    summary = VerifySummary(
        leaf=args.leaf,
        root=args.root,
        mode=mode.value,
        depth=len(sibling_digests),
        ok=computed == args.root,
        warnings=digest_warnings(args.leaf, args.root, sibling_digests),
    )
    if args.debug:
        summary.computed_root = computed

    if args.json:
        print_json(summary.to_dict())
    else:
        print_summary_human(summary)

    if summary.ok:
        logger.info("Verification passed")
        return EXIT_SUCCESS
    logger.warning("Verification failed")
    return EXIT_VERIFICATION_FAILED

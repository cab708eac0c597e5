"""
CLI Prove Command

Fetch a Merkle proof from the ledger service and verify it locally.

Usage:
    ledgerproof prove <tx_hash> [--json] [--debug]
    ledgerproof prove --sender Alice --recipient Bob --amount 10 [--json]
"""

from __future__ import annotations

import sys
from argparse import Namespace

from pydantic import ValidationError

from core.ledger.service import LedgerServiceClient
from core.light_client.client import LightClient
from core.schemas.errors import LedgerProofException
from core.schemas.verification import InclusionReport
from ledgerproof_cli.commands.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    get_config,
    print_json,
    transaction_from_args,
)


def print_report_human(report: InclusionReport, debug: bool = False) -> None:
    """Print an inclusion report in human-readable format."""
    print(f"tx_hash: {report.tx_hash}")
    print(f"status: {report.status}")
    if report.result is not None:
        print(f"block_index: {report.result.block_index}")
        print(f"merkle_root: {report.result.merkle_root}")
        print(f"proof_path ({report.result.depth}):")
        for sibling in report.result.proof_path:
            print(f"  - {sibling}")
    print(report.message)

    failed = report.get_failed_checks()
    shown = report.checks if debug else failed
    for check in shown:
        status = "✓" if check.ok else "✗"
        print(f"  {status} [{check.check_id}] {check.message}")


def prove_cmd(args: Namespace) -> int:
    """
    Execute the prove command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 verified, 2 not found or failed, 1 runtime error)
    """
    try:
        tx = transaction_from_args(args)
    except (ValueError, ValidationError) as e:
        print(f"Error: invalid transaction: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if tx is not None and args.tx_hash:
        print("Error: give either a tx hash or transaction fields, not both", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    target = tx if tx is not None else args.tx_hash
    if not target:
        print("Error: a tx hash or --sender/--recipient/--amount is required", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    config = get_config(args)
    if args.service_url:
        config.ledger.base_url = args.service_url

    try:
        with LedgerServiceClient.from_config(config) as service:
            client = LightClient.from_config(service, config)
            report = client.check_inclusion(target)
    except LedgerProofException as e:
        if args.debug:
            raise
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print_json(report.to_dict())
    else:
        print_report_human(report, debug=args.debug)

    return EXIT_SUCCESS if report.ok else EXIT_VERIFICATION_FAILED

"""
CLI Hash Command

Compute the Merkle leaf digest of a transaction.

Usage:
    ledgerproof hash --sender Alice --recipient Bob --amount 10 [--scheme concat] [--json]
"""

from __future__ import annotations

import sys
from argparse import Namespace

from pydantic import ValidationError

from core.crypto.transactions import TransactionHasher
from core.schemas.ledger import Canonicalization
from ledgerproof_cli.commands.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    get_config,
    print_json,
    transaction_from_args,
)


def hash_cmd(args: Namespace) -> int:
    """
    Execute the hash command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    try:
        tx = transaction_from_args(args)
    except (ValueError, ValidationError) as e:
        print(f"Error: invalid transaction: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    if tx is None:
        print("Error: --sender, --recipient and --amount are required", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    scheme = Canonicalization(args.scheme) if args.scheme else get_config(args).verifier.scheme
    hasher = TransactionHasher(scheme)
    digest = hasher.hash(tx)

    if args.json:
        print_json({
            "txHash": digest,
            "scheme": scheme.value,
            "canonical": hasher.canonicalize(tx),
            "transaction": tx.model_dump(mode="json"),
        })
    else:
        print(digest)
    return EXIT_SUCCESS

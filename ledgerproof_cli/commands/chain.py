"""
CLI Chain Commands

Read the ledger service's chain and queue transactions.

Usage:
    ledgerproof chain [--json]
    ledgerproof submit --sender Alice --recipient Bob --amount 10
"""

from __future__ import annotations

import sys
from argparse import Namespace
from typing import Any

from pydantic import ValidationError

from core.crypto.transactions import TransactionHasher
from core.ledger.service import LedgerServiceClient
from core.schemas.errors import LedgerProofException
from core.schemas.ledger import Block
from ledgerproof_cli.commands.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    get_config,
    print_json,
    transaction_from_args,
)


def block_to_dict(block: Block, hasher: TransactionHasher) -> dict[str, Any]:
    """Block as JSON, with each transaction's leaf digest alongside it."""
    data = block.model_dump(mode="json")
    for tx_data, tx in zip(data["transactions"], block.transactions):
        tx_data["tx_hash"] = hasher.hash(tx)
    return data


def print_chain_human(node_id: str, blocks: list[Block], hasher: TransactionHasher) -> None:
    """Print the chain in human-readable format."""
    print(f"node_id: {node_id}")
    print(f"blocks: {len(blocks)}")
    for block in blocks:
        print(f"\nBlock #{block.index}")
        print(f"  timestamp: {block.timestamp.isoformat()}")
        print(f"  previous_hash: {block.previous_hash}")
        print(f"  merkle_root: {block.merkle_root or '(none)'}")
        if not block.transactions:
            print("  (no transactions)")
        for tx in block.transactions:
            print(f"  - {tx.sender} -> {tx.recipient}: {tx.amount}")
            print(f"    tx_hash: {hasher.hash(tx)}")


def _client(args: Namespace) -> LedgerServiceClient:
    config = get_config(args)
    if getattr(args, "service_url", None):
        config.ledger.base_url = args.service_url
    return LedgerServiceClient.from_config(config)


def chain_cmd(args: Namespace) -> int:
    """
    Execute the chain command.

    Returns:
        Exit code
    """
    hasher = TransactionHasher(get_config(args).verifier.scheme)
    try:
        with _client(args) as service:
            node_id = service.get_node_id()
            blocks = service.get_chain()
    except LedgerProofException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print_json({
            "node_id": node_id,
            "blocks": [block_to_dict(block, hasher) for block in blocks],
        })
    else:
        print_chain_human(node_id, blocks, hasher)
    return EXIT_SUCCESS


def submit_cmd(args: Namespace) -> int:
    """
    Execute the submit command.

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

    try:
        with _client(args) as service:
            message = service.submit_transaction(tx)
    except LedgerProofException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    hasher = TransactionHasher(get_config(args).verifier.scheme)
    print(message)
    print(f"tx_hash: {hasher.hash(tx)}")
    return EXIT_SUCCESS

"""
Shared helpers for CLI commands.
"""

from __future__ import annotations

import json
from argparse import Namespace
from typing import Any

from core.config.runtime import RuntimeConfig
from core.schemas.ledger import Transaction


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def get_config(args: Namespace) -> RuntimeConfig:
    """Config attached by main(), or defaults when a command is called directly."""
    config = getattr(args, "cli_config", None)
    return config if config is not None else RuntimeConfig()


def transaction_from_args(args: Namespace) -> Transaction | None:
    """
    Build a Transaction from --sender/--recipient/--amount.

    Returns None if none of the three were given.

    Raises:
        ValueError: If only some of the fields were given
    """
    values = (args.sender, args.recipient, args.amount)
    if all(v is None for v in values):
        return None
    if any(v is None for v in values):
        raise ValueError("--sender, --recipient and --amount must be given together")
    return Transaction(sender=args.sender, recipient=args.recipient, amount=args.amount)


def print_json(data: Any) -> None:
    """Print data as indented JSON."""
    print(json.dumps(data, indent=2))

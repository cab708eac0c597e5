"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m ledgerproof_cli hash --sender S --recipient R --amount N [--scheme concat|length_prefixed] [--json]
    python -m ledgerproof_cli verify <leaf> <root> [sibling ...] [--mode sorted|positional] [--json] [--debug]
    python -m ledgerproof_cli prove <tx_hash> [--service-url URL] [--json] [--debug]
    python -m ledgerproof_cli prove --sender S --recipient R --amount N
    python -m ledgerproof_cli chain [--service-url URL] [--json]
    python -m ledgerproof_cli submit --sender S --recipient R --amount N
    python -m ledgerproof_cli config --init|--show

Environment Variables:
    LEDGERPROOF_SERVICE_URL         Ledger service base URL (default: http://127.0.0.1:8000)
    LEDGERPROOF_PAIRING_MODE        sorted | positional (default: sorted)
    LEDGERPROOF_CANONICALIZATION    concat | length_prefixed (default: concat)
    LEDGERPROOF_LOG_LEVEL           Log level (default: INFO)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from core.config.runtime import get_default_config_template
from core.schemas.ledger import Canonicalization, PairingMode
from ledgerproof_cli import __version__
from ledgerproof_cli.commands import chain, digest, prove, verify
from ledgerproof_cli.commands.common import EXIT_RUNTIME_ERROR, EXIT_SUCCESS
from ledgerproof_cli.config import load_config


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def _add_transaction_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--sender", type=str, default=None, help="Transaction sender")
    parser.add_argument("--recipient", type=str, default=None, help="Transaction recipient")
    parser.add_argument("--amount", type=int, default=None, help="Transaction amount (non-negative integer)")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="ledgerproof",
        description="Light client for verifying transaction inclusion with Merkle proofs.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./ledgerproof.json or ~/.config/ledgerproof/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- hash command ---
    hash_parser = subparsers.add_parser(
        "hash",
        help="Compute a transaction's leaf digest",
        description="Canonicalize and hash a transaction into its Merkle leaf digest.",
    )
    _add_transaction_args(hash_parser)
    hash_parser.add_argument(
        "--scheme",
        type=str,
        choices=[c.value for c in Canonicalization],
        default=None,
        help="Canonicalization scheme (default: from config, concat)",
    )
    hash_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    hash_parser.set_defaults(func=digest.hash_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a Merkle proof offline",
        description="Replay a proof path from a leaf digest and compare with a claimed root.",
    )
    verify_parser.add_argument("leaf", type=str, help="Leaf digest")
    verify_parser.add_argument("root", type=str, help="Claimed Merkle root")
    verify_parser.add_argument(
        "siblings",
        nargs="*",
        help="Sibling digests, leaf-side first (positional mode: left:<digest> / right:<digest>)",
    )
    verify_parser.add_argument(
        "--mode",
        type=str,
        choices=[m.value for m in PairingMode],
        default=None,
        help="Pairing mode (default: from config, sorted)",
    )
    verify_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    verify_parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Include the recomputed root in output",
    )
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- prove command ---
    prove_parser = subparsers.add_parser(
        "prove",
        help="Fetch a proof from the ledger service and verify it",
        description="Look up a transaction's Merkle proof and verify it locally.",
    )
    prove_parser.add_argument("tx_hash", nargs="?", default=None, help="Transaction leaf digest")
    _add_transaction_args(prove_parser)
    prove_parser.add_argument("--service-url", type=str, default=None, help="Ledger service base URL")
    prove_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    prove_parser.add_argument("--debug", action="store_true", default=False, help="Show every check")
    prove_parser.set_defaults(func=prove.prove_cmd)

    # --- chain command ---
    chain_parser = subparsers.add_parser(
        "chain",
        help="List blocks and transaction digests",
        description="Show the ledger service's chain with each transaction's leaf digest.",
    )
    chain_parser.add_argument("--service-url", type=str, default=None, help="Ledger service base URL")
    chain_parser.add_argument("--json", action="store_true", default=False, help="JSON output")
    chain_parser.set_defaults(func=chain.chain_cmd)

    # --- submit command ---
    submit_parser = subparsers.add_parser(
        "submit",
        help="Queue a transaction with the ledger service",
        description="Submit a transaction; it becomes provable once included in a block.",
    )
    _add_transaction_args(submit_parser)
    submit_parser.add_argument("--service-url", type=str, default=None, help="Ledger service base URL")
    submit_parser.set_defaults(func=chain.submit_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="ledgerproof.json",
        help="Path for config file (default: ledgerproof.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (LEDGERPROOF_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    # Default: show help
    print("Usage: ledgerproof config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed or not found)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.logging.level
    setup_logging(level=log_level, log_file=config.logging.file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if hasattr(args, "debug") and args.debug:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())

"""
CLI command modules.
"""

from ledgerproof_cli.commands import chain, digest, prove, verify

__all__ = ["chain", "digest", "prove", "verify"]

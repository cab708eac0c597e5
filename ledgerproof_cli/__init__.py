"""
ledgerproof CLI

Command-line interface for light-client Merkle inclusion checks.

Usage:
    python -m ledgerproof_cli hash --sender Alice --recipient Bob --amount 10
    python -m ledgerproof_cli verify <leaf> <root> [sibling ...]
    python -m ledgerproof_cli prove <tx_hash>
    python -m ledgerproof_cli chain
    python -m ledgerproof_cli config --init
"""

__version__ = "0.1.0"

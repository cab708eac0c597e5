"""
Test fixtures package for ledgerproof tests.

This package provides factory functions for creating test objects:
- ledger_fixtures.py: transactions, blocks, reference trees, proof results
  and HTTP response stubs

Usage:
    from fixtures import build_sorted_tree, make_proof_result

    def test_something():
        root, proofs = build_sorted_tree(make_leaves(5))
        result = make_proof_result(index=3)
"""

from .ledger_fixtures import (
    make_transaction,
    make_transactions,
    make_leaves,
    make_block,
    build_sorted_tree,
    build_positional_tree,
    make_proof_result,
    flip_char,
    make_http_response,
    service_proof_payload,
)

__all__ = [
    # Ledger objects
    "make_transaction",
    "make_transactions",
    "make_leaves",
    "make_block",
    # Trees
    "build_sorted_tree",
    "build_positional_tree",
    "make_proof_result",
    "flip_char",
    # HTTP
    "make_http_response",
    "service_proof_payload",
]

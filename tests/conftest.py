"""
Pytest configuration and shared fixtures for ledgerproof tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Isolates tests from LEDGERPROOF_* variables in the environment
4. Configures pytest markers and settings
"""

import os
import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_ledger = importlib.import_module("fixtures.ledger_fixtures")

make_transaction = _ledger.make_transaction
make_transactions = _ledger.make_transactions
make_block = _ledger.make_block
make_proof_result = _ledger.make_proof_result


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def _clean_ledgerproof_env(monkeypatch):
    """Drop LEDGERPROOF_* variables so host settings never leak into tests."""
    for key in list(os.environ):
        if key.startswith("LEDGERPROOF_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def transaction():
    """Provide the reference Alice -> Bob: 10 transaction."""
    return make_transaction()


@pytest.fixture
def transactions():
    """Provide five distinct transactions."""
    return make_transactions(5)


@pytest.fixture
def proof_result(transactions):
    """Provide a valid proof result for transactions[2]."""
    return make_proof_result(transactions, index=2)


@pytest.fixture
def block():
    """Provide a Block with three transactions and a matching root."""
    return make_block()


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "cli: marks tests that drive the command-line entry point"
    )


# =============================================================================
# Test Helpers (available to all tests via fixtures)
# =============================================================================

@pytest.fixture
def assert_check_passed():
    """Helper to assert a specific check passed in an InclusionReport or check list."""
    def _assert(result, check_id: str):
        checks = [c for c in getattr(result, "checks", result) if c.check_id == check_id]
        assert len(checks) == 1, f"Expected check '{check_id}' not found"
        assert checks[0].ok, f"Check '{check_id}' failed: {checks[0].message}"
    return _assert


@pytest.fixture
def assert_check_failed():
    """Helper to assert a specific check failed in an InclusionReport or check list."""
    def _assert(result, check_id: str):
        checks = [c for c in getattr(result, "checks", result) if c.check_id == check_id]
        assert len(checks) == 1, f"Expected check '{check_id}' not found"
        assert not checks[0].ok, f"Check '{check_id}' unexpectedly passed"
    return _assert

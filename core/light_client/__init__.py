"""
Light Client

Hash, fetch and verify: inclusion checks that do not trust the ledger service.
"""

from .client import InclusionCallback, LightClient

__all__ = [
    "InclusionCallback",
    "LightClient",
]

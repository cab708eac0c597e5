"""
HTTP Client Module

requests-based HTTP client used to reach the ledger service.
"""

from .client import HttpClient, HttpError, HttpResponse

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpResponse",
]

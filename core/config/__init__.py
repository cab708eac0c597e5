"""
Runtime Configuration Module

Provides configuration loading and management for the light client.
"""

from .runtime import (
    HttpConfig,
    LedgerServiceConfig,
    LoggingConfig,
    RuntimeConfig,
    VerifierConfig,
    get_default_config_template,
)

__all__ = [
    "HttpConfig",
    "LedgerServiceConfig",
    "LoggingConfig",
    "RuntimeConfig",
    "VerifierConfig",
    "get_default_config_template",
]

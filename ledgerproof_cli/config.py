"""
CLI Configuration

Locates a configuration file and overlays environment variables.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.config.runtime import RuntimeConfig


logger = logging.getLogger(__name__)


def default_config_paths() -> list[Path]:
    """Config file locations searched when no explicit path is given."""
    return [
        Path.cwd() / "ledgerproof.json",
        Path.cwd() / ".ledgerproof.json",
        Path.cwd() / "ledgerproof.yaml",
        Path.home() / ".config" / "ledgerproof" / "config.json",
    ]


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file (JSON, or YAML by extension)

    Returns:
        Merged configuration

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
    """
    config = RuntimeConfig()

    if config_path is not None:
        config = RuntimeConfig.from_file(config_path)
    else:
        for default_path in default_config_paths():
            if default_path.exists():
                config = RuntimeConfig.from_file(default_path)
                logger.debug(f"Loaded config from {default_path}")
                break

    return config.with_env_overrides()

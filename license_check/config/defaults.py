"""Default configuration values for license-check."""

from __future__ import annotations

from license_check.models.config import CheckConfig

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".license-check.yaml", ".license-check.yml"]


def get_default_config() -> CheckConfig:
    """Get the default configuration.

    Returns:
        CheckConfig with all defaults (empty lists, depth limit 12).
    """
    return CheckConfig()

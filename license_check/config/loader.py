"""Configuration file discovery and loading for license-check."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from license_check.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_check.exceptions import ConfigurationError
from license_check.models.config import CheckConfig


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in the specified directory.

    Searches for `.license-check.yaml` first, then `.license-check.yml`.

    Args:
        start_dir: Directory to search. Defaults to current working directory.

    Returns:
        Path to the configuration file if found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()
    for name in DEFAULT_CONFIG_NAMES:
        config_path = search_dir / name
        if config_path.exists():
            return config_path
    return None


def load_config_file(path: Path) -> CheckConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated CheckConfig instance.

    Raises:
        ConfigurationError: If file cannot be read, has invalid YAML,
            or fails Pydantic validation.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e

    if not content.strip():
        return get_default_config()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML syntax in '{path}': {e}"
        ) from e

    # Only comments
    if data is None:
        return get_default_config()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    try:
        return CheckConfig.model_validate(data)
    except ValidationError as e:
        error_messages = _format_validation_errors(e)
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {error_messages}"
        ) from e


def _format_validation_errors(error: ValidationError) -> str:
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        messages.append(f"{loc}: {err['msg']}")
    return "; ".join(messages)


def load_config(config_path: str | None = None) -> CheckConfig:
    """Load configuration from file or use defaults.

    If a config_path is provided, loads from that file.
    Otherwise, searches for a configuration file in the current directory.
    If no file is found, returns default configuration.

    Args:
        config_path: Optional path to configuration file.

    Returns:
        CheckConfig with loaded or default values.

    Raises:
        ConfigurationError: If the selected configuration file is invalid.
    """
    if config_path is not None:
        return load_config_file(Path(config_path))

    discovered = find_config_file()
    if discovered is not None:
        return load_config_file(discovered)

    return get_default_config()


def apply_overrides(config: CheckConfig, **overrides: Any) -> CheckConfig:
    """Merge command line values over a loaded configuration.

    ``None`` values and empty sequences mean "not given on the command
    line" and keep the file value. Anything else replaces it.

    Args:
        config: Configuration loaded from file or defaults.
        **overrides: CheckConfig field names mapped to CLI values.

    Returns:
        A new, validated CheckConfig.

    Raises:
        ConfigurationError: If an override names an unknown field or fails
            validation.
    """
    data = config.model_dump()
    for key, value in overrides.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            value = list(value)
        data[key] = value

    try:
        return CheckConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid command line options: {_format_validation_errors(e)}"
        ) from e

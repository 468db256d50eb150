"""Configuration Pydantic models for license-check."""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from license_check.constants import DEFAULT_MAX_CHAIN_DEPTH

logger = logging.getLogger(__name__)


class CheckConfig(BaseModel):
    """Configuration for license-check as written in the YAML file.

    Every field has a default so partial configuration files are valid.
    Command line options are merged over these values by the CLI.
    """

    model_config = {"extra": "forbid"}

    max_chain_depth: int = Field(
        default=DEFAULT_MAX_CHAIN_DEPTH,
        ge=0,
        description="Maximum number of parent POMs to search for a license.",
    )
    excludes: List[str] = Field(
        default_factory=list,
        description="Exact group:artifact:version coordinates to skip.",
    )
    excludes_regex: List[str] = Field(
        default_factory=list,
        description="Regular expressions matched against the full coordinates.",
    )
    excluded_scopes: List[str] = Field(
        default_factory=list,
        description="Dependency scopes to skip (e.g. test, provided).",
    )
    blacklist: List[str] = Field(
        default_factory=list,
        description="License codes that fail the build.",
    )
    whitelist: List[str] = Field(
        default_factory=list,
        description="License codes allowed; anything else fails the build.",
    )
    allow_unknown_license: bool = Field(
        default=False,
        description="Do not fail the build for artifacts without a known license.",
    )
    repository: Optional[Path] = Field(
        default=None,
        description="Local Maven repository (defaults to ~/.m2/repository).",
    )
    descriptor_table: Optional[Path] = Field(
        default=None,
        description="Alternate tab-delimited license descriptor table.",
    )


def _lower_set(values: Iterable[str]) -> frozenset[str]:
    return frozenset(value.lower() for value in values)


def compile_exclude_patterns(patterns: Iterable[str]) -> tuple[re.Pattern[str], ...]:
    """Compile exclude regular expressions, skipping invalid ones.

    Args:
        patterns: Raw regular expressions from the configuration.

    Returns:
        Tuple of compiled patterns in configuration order. Patterns that
        fail to compile are logged as warnings and left out.
    """
    compiled: list[re.Pattern[str]] = []
    for raw in patterns:
        try:
            compiled.append(re.compile(raw))
        except re.error as e:
            logger.warning("The regex %s is invalid: %s", raw, e)
    return tuple(compiled)


class PolicyConfig(BaseModel):
    """Normalized, read-only policy built once at the start of a run.

    Coordinate, scope and license code sets are lower-cased so that all
    membership checks are case-insensitive.
    """

    model_config = {"extra": "forbid", "frozen": True}

    exclude_coordinates: frozenset[str] = Field(default_factory=frozenset)
    exclude_regex: tuple[re.Pattern[str], ...] = Field(default_factory=tuple)
    exclude_scopes: frozenset[str] = Field(default_factory=frozenset)
    blacklist: frozenset[str] = Field(default_factory=frozenset)
    whitelist: frozenset[str] = Field(default_factory=frozenset)
    allow_unknown_license: bool = False
    max_chain_depth: int = Field(default=DEFAULT_MAX_CHAIN_DEPTH, ge=0)

    @classmethod
    def from_check_config(cls, config: CheckConfig) -> PolicyConfig:
        """Build the policy from a loaded configuration.

        Args:
            config: Raw configuration (file values merged with CLI options).

        Returns:
            PolicyConfig with lower-cased sets and compiled exclude patterns.
        """
        return cls(
            exclude_coordinates=_lower_set(config.excludes),
            exclude_regex=compile_exclude_patterns(config.excludes_regex),
            exclude_scopes=_lower_set(config.excluded_scopes),
            blacklist=_lower_set(config.blacklist),
            whitelist=_lower_set(config.whitelist),
            allow_unknown_license=config.allow_unknown_license,
            max_chain_depth=config.max_chain_depth,
        )

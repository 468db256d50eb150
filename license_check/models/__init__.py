"""Pydantic data models for license-check."""

from license_check.models.config import CheckConfig, PolicyConfig
from license_check.models.coordinate import ArtifactCoordinate, ArtifactRef
from license_check.models.descriptor import LicenseDescriptor
from license_check.models.report import (
    CheckOptions,
    CheckReport,
    Decision,
    LicenseLookup,
    LookupStatus,
    ResolutionOutcome,
    Verbosity,
)

__all__ = [
    "ArtifactCoordinate",
    "ArtifactRef",
    "CheckConfig",
    "CheckOptions",
    "CheckReport",
    "Decision",
    "LicenseDescriptor",
    "LicenseLookup",
    "LookupStatus",
    "PolicyConfig",
    "ResolutionOutcome",
    "Verbosity",
]

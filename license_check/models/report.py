"""Check result Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field

from license_check.models.coordinate import ArtifactCoordinate


class Verbosity(Enum):
    """Output verbosity levels."""

    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"


class CheckOptions(BaseModel):
    """Options for rendering a license check."""

    model_config = {"extra": "forbid"}

    format: Literal["terminal", "markdown", "json"] = Field(
        default="terminal",
        description="Output format for check results",
    )
    verbosity: Verbosity = Field(
        default=Verbosity.NORMAL,
        description="Output verbosity level (quiet, normal, verbose)",
    )


class Decision(Enum):
    """Outcome of the policy for a single artifact."""

    PASS = "pass"
    FAIL = "fail"
    EXCLUDED = "excluded"


class LookupStatus(Enum):
    """Terminal state of a parent chain walk."""

    FOUND = "found"
    ABSENT = "absent"
    FAILED = "failed"


class LicenseLookup(BaseModel):
    """Result of looking up the declared license of an artifact.

    ABSENT means nothing was declared anywhere in the chain; FAILED means a
    POM could not be located or read, with ``reason`` explaining why.
    """

    model_config = {"extra": "forbid", "frozen": True}

    status: LookupStatus
    license_name: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def found(cls, license_name: str) -> LicenseLookup:
        return cls(status=LookupStatus.FOUND, license_name=license_name)

    @classmethod
    def absent(cls, reason: Optional[str] = None) -> LicenseLookup:
        return cls(status=LookupStatus.ABSENT, reason=reason)

    @classmethod
    def failed(cls, reason: str) -> LicenseLookup:
        return cls(status=LookupStatus.FAILED, reason=reason)


class ResolutionOutcome(BaseModel):
    """Policy outcome for one artifact in a run."""

    model_config = {"extra": "forbid", "frozen": True}

    coordinate: ArtifactCoordinate = Field(description="Artifact checked")
    scope: Optional[str] = Field(default=None, description="Dependency scope")
    raw_license_name: Optional[str] = Field(
        default=None, description="License name as declared in the POM chain"
    )
    code: Optional[str] = Field(
        default=None, description="Normalized license code, None if unclassified"
    )
    decision: Decision = Field(description="Pass, fail or excluded")
    reason: str = Field(description="Report string: the code or why it failed")
    detail: Optional[str] = Field(
        default=None, description="Why no license could be discovered, if known"
    )

    @property
    def identifier(self) -> str:
        """Report key for this artifact."""
        return self.coordinate.compact()

    @property
    def failed(self) -> bool:
        return self.decision == Decision.FAIL


class CheckReport(BaseModel):
    """Ordered collection of outcomes for one run."""

    model_config = {"extra": "forbid"}

    outcomes: list[ResolutionOutcome] = Field(
        default_factory=list,
        description="Per-artifact outcomes in input order",
    )

    @property
    def total_artifacts(self) -> int:
        return len(self.outcomes)

    @property
    def failures(self) -> list[ResolutionOutcome]:
        return [o for o in self.outcomes if o.decision == Decision.FAIL]

    @property
    def excluded(self) -> list[ResolutionOutcome]:
        return [o for o in self.outcomes if o.decision == Decision.EXCLUDED]

    @property
    def passed(self) -> list[ResolutionOutcome]:
        return [o for o in self.outcomes if o.decision == Decision.PASS]

    @property
    def build_fails(self) -> bool:
        """True if any non-excluded artifact failed the policy."""
        return self.verdict == Decision.FAIL

    @property
    def verdict(self) -> Decision:
        from license_check.analysis.policy import PolicyEngine

        return PolicyEngine.verdict(self.outcomes)

    def as_mapping(self) -> dict[str, str]:
        """Return ``{coordinates: code-or-reason}`` in input order."""
        return {o.identifier: o.reason for o in self.outcomes}

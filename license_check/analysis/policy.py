"""License policy evaluation: exclusions, blacklist and whitelist."""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from license_check.constants import (
    BLACKLISTED_REASON,
    EXCLUDED_REASON,
    NOT_WHITELISTED_REASON,
    UNKNOWN_ALLOWED_REASON,
    UNKNOWN_REASON,
)
from license_check.models.config import PolicyConfig
from license_check.models.coordinate import ArtifactCoordinate
from license_check.models.report import Decision, ResolutionOutcome

logger = logging.getLogger(__name__)


class PolicyEngine:
    """Apply a PolicyConfig to artifacts and their license codes."""

    def __init__(self, policy: PolicyConfig) -> None:
        self._policy = policy

    @property
    def policy(self) -> PolicyConfig:
        return self._policy

    def is_excluded(
        self, coordinate: ArtifactCoordinate, scope: Optional[str] = None
    ) -> bool:
        """Check whether an artifact is on the exclude list.

        An artifact is excluded if its coordinates equal an excluded entry
        (case-insensitive), fully match an exclude pattern, or its scope is
        an excluded scope.
        """
        template = coordinate.compact()
        if template.lower() in self._policy.exclude_coordinates:
            return True
        if any(pattern.fullmatch(template) for pattern in self._policy.exclude_regex):
            return True
        return scope is not None and scope.lower() in self._policy.exclude_scopes

    def excluded(
        self, coordinate: ArtifactCoordinate, scope: Optional[str] = None
    ) -> ResolutionOutcome:
        """Build the outcome recorded for an excluded artifact."""
        return ResolutionOutcome(
            coordinate=coordinate,
            scope=scope,
            decision=Decision.EXCLUDED,
            reason=EXCLUDED_REASON,
        )

    def decide(
        self,
        coordinate: ArtifactCoordinate,
        scope: Optional[str],
        license_name: Optional[str],
        code: Optional[str],
        detail: Optional[str] = None,
    ) -> ResolutionOutcome:
        """Decide pass or fail for a non-excluded artifact.

        Precedence: unknown license, then blacklist, then whitelist. Only
        the first rule that applies is reported.

        Args:
            coordinate: Artifact being decided.
            scope: Dependency scope, recorded on the outcome.
            license_name: Declared license name, None if none was found.
            code: Classified license code, None if unclassified.
            detail: Optional explanation of why no license was found.

        Returns:
            The frozen ResolutionOutcome for this artifact.
        """
        name_display = license_name or ""
        if code is None:
            if self._policy.allow_unknown_license:
                decision = Decision.EXCLUDED
                reason = UNKNOWN_ALLOWED_REASON.format(name=name_display)
            else:
                decision = Decision.FAIL
                reason = UNKNOWN_REASON.format(name=name_display)
                logger.warning(
                    "Build will fail because of artifact '%s' and license '%s'.",
                    coordinate,
                    name_display,
                )
        elif self._policy.blacklist and code.lower() in self._policy.blacklist:
            decision = Decision.FAIL
            reason = BLACKLISTED_REASON.format(code=code)
        elif self._policy.whitelist and code.lower() not in self._policy.whitelist:
            decision = Decision.FAIL
            reason = NOT_WHITELISTED_REASON.format(code=code)
        else:
            decision = Decision.PASS
            reason = code

        return ResolutionOutcome(
            coordinate=coordinate,
            scope=scope,
            raw_license_name=license_name,
            code=code,
            decision=decision,
            reason=reason,
            detail=detail,
        )

    @staticmethod
    def verdict(outcomes: Iterable[ResolutionOutcome]) -> Decision:
        """Aggregate outcomes into the build verdict.

        Every outcome is examined; the build fails if any artifact failed.
        """
        failed = [outcome for outcome in outcomes if outcome.failed]
        return Decision.FAIL if failed else Decision.PASS

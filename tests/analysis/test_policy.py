"""Tests for license policy evaluation."""

import re

from license_check.analysis.policy import PolicyEngine
from license_check.models.config import CheckConfig, PolicyConfig
from license_check.models.coordinate import ArtifactCoordinate
from license_check.models.report import Decision

LIB = ArtifactCoordinate.parse("org.example:lib:1.0")


def _engine(**kwargs: object) -> PolicyEngine:
    return PolicyEngine(PolicyConfig.from_check_config(CheckConfig(**kwargs)))


class TestIsExcluded:
    """Tests for PolicyEngine.is_excluded."""

    def test_nothing_excluded_by_default(self) -> None:
        """Test that an empty policy excludes nothing."""
        assert _engine().is_excluded(LIB, "compile") is False

    def test_exact_coordinates_case_insensitive(self) -> None:
        """Test that coordinates are compared in lower case."""
        engine = _engine(excludes=["ORG.EXAMPLE:LIB:1.0"])

        assert engine.is_excluded(LIB) is True
        assert engine.is_excluded(ArtifactCoordinate.parse("org.example:lib:2.0")) is False

    def test_regex_must_match_whole_coordinates(self) -> None:
        """Test that exclude patterns are anchored at both ends."""
        engine = _engine(excludes_regex=["org\\.example:.*"])

        assert engine.is_excluded(LIB) is True
        assert engine.is_excluded(ArtifactCoordinate.parse("com.org.example:x:1")) is False

    def test_partial_regex_does_not_exclude(self) -> None:
        """Test that a pattern matching only part of the string is ignored."""
        engine = _engine(excludes_regex=["example"])

        assert engine.is_excluded(LIB) is False

    def test_scope_case_insensitive(self) -> None:
        """Test that excluded scopes are compared in lower case."""
        engine = _engine(excluded_scopes=["test"])

        assert engine.is_excluded(LIB, "TEST") is True
        assert engine.is_excluded(LIB, "compile") is False
        assert engine.is_excluded(LIB, None) is False

    def test_invalid_regex_is_skipped(self) -> None:
        """Test that a bad pattern does not prevent other exclusions."""
        engine = _engine(excludes_regex=["([bad", "org\\.example:lib:.*"])

        assert engine.is_excluded(LIB) is True

    def test_excluded_outcome(self) -> None:
        """Test the outcome recorded for excluded artifacts."""
        outcome = _engine().excluded(LIB, "test")

        assert outcome.decision == Decision.EXCLUDED
        assert outcome.reason == "SKIPPED because artifact is on your exclude list"
        assert outcome.scope == "test"
        assert outcome.code is None


class TestDecide:
    """Tests for PolicyEngine.decide."""

    def test_known_code_passes_with_empty_lists(self) -> None:
        """Test that any classified license passes without lists."""
        outcome = _engine().decide(
            LIB, "compile", "Apache License, Version 2.0", "apache-2.0"
        )

        assert outcome.decision == Decision.PASS
        assert outcome.reason == "apache-2.0"
        assert outcome.raw_license_name == "Apache License, Version 2.0"

    def test_unknown_license_fails(self) -> None:
        """Test that an unclassified license fails by default."""
        outcome = _engine().decide(LIB, None, "Proprietary", None)

        assert outcome.decision == Decision.FAIL
        assert outcome.reason == "[NULL] LICENSE 'Proprietary' IS UNKNOWN"

    def test_missing_license_fails(self) -> None:
        """Test that no declared license at all fails."""
        outcome = _engine().decide(LIB, None, None, None, detail="nothing declared")

        assert outcome.decision == Decision.FAIL
        assert outcome.reason == "[NULL] LICENSE '' IS UNKNOWN"
        assert outcome.detail == "nothing declared"

    def test_unknown_license_allowed(self) -> None:
        """Test that allow_unknown_license keeps the build green."""
        outcome = _engine(allow_unknown_license=True).decide(LIB, None, None, None)

        assert outcome.decision == Decision.EXCLUDED
        assert outcome.reason.startswith("SKIPPED")
        assert outcome.failed is False

    def test_blacklist_before_whitelist(self) -> None:
        """Test that a blacklisted code is reported only as blacklisted."""
        engine = _engine(blacklist=["gpl-3.0"], whitelist=["apache-2.0"])

        outcome = engine.decide(LIB, None, "GPLv3", "gpl-3.0")

        assert outcome.decision == Decision.FAIL
        assert outcome.reason == "gpl-3.0 IS ON YOUR BLACKLIST"

    def test_not_whitelisted_fails(self) -> None:
        """Test that a code missing from a non-empty whitelist fails."""
        engine = _engine(blacklist=["gpl-3.0"], whitelist=["apache-2.0"])

        outcome = engine.decide(LIB, None, "MIT License", "mit")

        assert outcome.decision == Decision.FAIL
        assert outcome.reason == "mit IS NOT ON YOUR WHITELIST"

    def test_whitelisted_passes(self) -> None:
        """Test that a whitelisted code passes."""
        engine = _engine(whitelist=["Apache-2.0"])

        outcome = engine.decide(LIB, None, "ASL 2.0", "apache-2.0")

        assert outcome.decision == Decision.PASS

    def test_blacklist_is_case_insensitive(self) -> None:
        """Test that codes are compared in lower case."""
        engine = _engine(blacklist=["gpl-3.0"])

        outcome = engine.decide(LIB, None, "GPL", "GPL-3.0")

        assert outcome.decision == Decision.FAIL


class TestVerdict:
    """Tests for PolicyEngine.verdict."""

    def test_any_failure_fails(self) -> None:
        """Test that one failure fails the build."""
        engine = _engine(blacklist=["gpl-3.0"])
        outcomes = [
            engine.decide(LIB, None, "MIT", "mit"),
            engine.decide(LIB, None, "GPL", "gpl-3.0"),
            engine.excluded(LIB),
        ]

        assert PolicyEngine.verdict(outcomes) == Decision.FAIL

    def test_all_pass_or_excluded(self) -> None:
        """Test that passes and exclusions give a passing build."""
        engine = _engine()
        outcomes = [engine.decide(LIB, None, "MIT", "mit"), engine.excluded(LIB)]

        assert PolicyEngine.verdict(outcomes) == Decision.PASS

    def test_exclude_patterns_are_compiled(self) -> None:
        """Test that the policy holds compiled patterns."""
        engine = _engine(excludes_regex=["org\\..*"])

        assert all(isinstance(p, re.Pattern) for p in engine.policy.exclude_regex)

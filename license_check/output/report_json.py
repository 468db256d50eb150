"""JSON output formatter for license check reports."""
import json
from datetime import datetime, timezone
from typing import Any

from license_check import __version__
from license_check.models.report import CheckReport, ResolutionOutcome
from license_check.output.terminal import result_message


class ReportJsonFormatter:
    """Format check reports as JSON output.

    The ``report`` object maps each artifact's coordinates to its license
    code or failure reason, in the order the artifacts were checked.
    """

    def format_report(self, report: CheckReport) -> str:
        """Format a report as a JSON string.

        Args:
            report: The check report to format.

        Returns:
            JSON string representation of the report.
        """
        output = self._build_output(report)
        return json.dumps(output, indent=2)

    def _build_output(self, report: CheckReport) -> dict[str, Any]:
        return {
            "metadata": self._build_metadata(),
            "summary": self._build_summary(report),
            "report": report.as_mapping(),
            "artifacts": [self._build_artifact(o) for o in report.outcomes],
            "result": result_message(report),
        }

    def _build_metadata(self) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {
            "generated_at": timestamp,
            "tool_version": __version__,
        }

    def _build_summary(self, report: CheckReport) -> dict[str, Any]:
        return {
            "total_artifacts": report.total_artifacts,
            "passed": len(report.passed),
            "excluded": len(report.excluded),
            "failed": len(report.failures),
            "verdict": report.verdict.value.upper(),
        }

    def _build_artifact(self, outcome: ResolutionOutcome) -> dict[str, Any]:
        return {
            "coordinate": outcome.identifier,
            "scope": outcome.scope,
            "license_name": outcome.raw_license_name,
            "code": outcome.code,
            "decision": outcome.decision.value,
            "reason": outcome.reason,
            "detail": outcome.detail,
        }

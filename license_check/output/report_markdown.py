"""Markdown output formatter for license check reports."""

from datetime import datetime, timezone

from license_check.constants import EXPLANATION
from license_check.models.report import CheckReport, Decision
from license_check.output.terminal import result_message

_DECISION_LABELS = {
    Decision.PASS: "✅ PASS",
    Decision.FAIL: "❌ FAIL",
    Decision.EXCLUDED: "➖ EXCLUDED",
}


def _cell(value: str) -> str:
    """Escape a value for use inside a Markdown table cell."""
    return value.replace("|", "\\|")


class ReportMarkdownFormatter:
    """Format check reports as Markdown, e.g. for CI job summaries."""

    def format_report(self, report: CheckReport) -> str:
        """Format a report as a Markdown string.

        Args:
            report: The check report to format.

        Returns:
            Markdown string representation of the report.
        """
        lines: list[str] = []

        lines.append("# License Check Report")
        lines.append("")

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        lines.append(f"*Generated: {timestamp}*")
        lines.append("")
        lines.append(f"> {EXPLANATION}")
        lines.append("")

        lines.extend(self._format_summary(report))
        lines.append("")

        if report.total_artifacts == 0:
            lines.append("*No artifacts found.*")
        else:
            lines.extend(self._format_artifacts(report))
        lines.append("")

        lines.append(f"**{result_message(report)}**")
        lines.append("")
        return "\n".join(lines)

    def _format_summary(self, report: CheckReport) -> list[str]:
        return [
            "## Summary",
            "",
            "| Metric | Count |",
            "|--------|-------|",
            f"| Total artifacts | {report.total_artifacts} |",
            f"| Passed | {len(report.passed)} |",
            f"| Excluded | {len(report.excluded)} |",
            f"| Failed | {len(report.failures)} |",
        ]

    def _format_artifacts(self, report: CheckReport) -> list[str]:
        lines = [
            "## Artifacts",
            "",
            "| Artifact | Scope | Declared License | Result | Status |",
            "|----------|-------|------------------|--------|--------|",
        ]
        for outcome in report.outcomes:
            lines.append(
                f"| {_cell(outcome.identifier)} "
                f"| {_cell(outcome.scope or '-')} "
                f"| {_cell(outcome.raw_license_name or '-')} "
                f"| {_cell(outcome.reason)} "
                f"| {_DECISION_LABELS[outcome.decision]} |"
            )
        return lines

"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from license_check.constants import (
    EXPLANATION,
    RESULT_FAIL_MESSAGE,
    RESULT_PASS_MESSAGE,
)
from license_check.models.report import (
    CheckReport,
    Decision,
    ResolutionOutcome,
    Verbosity,
)

_DECISION_STYLES = {
    Decision.PASS: "green",
    Decision.FAIL: "red",
    Decision.EXCLUDED: "dim",
}


def result_message(report: CheckReport) -> str:
    """Return the final RESULT line for a report."""
    return RESULT_FAIL_MESSAGE if report.build_fails else RESULT_PASS_MESSAGE


class TerminalFormatter:
    """Format license check reports for terminal display using Rich.

    Artifacts are listed in the order they were checked. Failures are
    shown in red, excluded artifacts dimmed.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            verbosity: Output verbosity level.
        """
        self._console = console if console is not None else Console()
        self._verbosity = verbosity

    def format_report(self, report: CheckReport) -> None:
        """Display the report followed by the RESULT line.

        Args:
            report: The check report to display.
        """
        if self._verbosity == Verbosity.QUIET:
            self._print_quiet_output(report)
            return

        self._print_explanation()

        if report.total_artifacts == 0:
            self._console.print("[yellow]No artifacts found[/yellow]")
            self._print_result(report)
            return

        self._console.print(self._build_table(report))
        self._print_summary(report)
        self._print_result(report)

    def _build_table(self, report: CheckReport) -> Table:
        verbose = self._verbosity == Verbosity.VERBOSE
        table = Table(title="License Check Results")
        table.add_column("Artifact", style="cyan", no_wrap=True)
        table.add_column("Scope", style="magenta")
        if verbose:
            table.add_column("Declared License")
        table.add_column("Result")
        if verbose:
            table.add_column("Detail", style="dim")

        for outcome in report.outcomes:
            row = [Text(outcome.identifier), Text(outcome.scope or "-")]
            if verbose:
                row.append(Text(outcome.raw_license_name or "-"))
            row.append(Text(outcome.reason, style=_DECISION_STYLES[outcome.decision]))
            if verbose:
                row.append(Text(outcome.detail or ""))
            table.add_row(*row)
        return table

    def _print_explanation(self) -> None:
        panel = Panel(
            EXPLANATION,
            title="[bold]License Check[/bold]",
            border_style="blue",
        )
        self._console.print(panel)
        self._console.print("")

    def _print_summary(self, report: CheckReport) -> None:
        self._console.print(f"\n[bold]Total artifacts:[/bold] {report.total_artifacts}")
        self._console.print(f"[bold]Passed:[/bold] {len(report.passed)}")
        self._console.print(f"[bold]Excluded:[/bold] {len(report.excluded)}")
        self._console.print(f"[bold]Failed:[/bold] {len(report.failures)}")

    def _print_quiet_output(self, report: CheckReport) -> None:
        for outcome in report.failures:
            self._print_failure(outcome)
        self._print_result(report)

    def _print_failure(self, outcome: ResolutionOutcome) -> None:
        self._console.print(
            Text.assemble(
                f"  - {outcome.identifier}: ", (outcome.reason, "red")
            )
        )

    def _print_result(self, report: CheckReport) -> None:
        style = "bold red" if report.build_fails else "bold green"
        self._console.print(Text(result_message(report), style=style))

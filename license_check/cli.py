"""CLI entry point for license-check."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Literal, Optional, cast

import click
from rich.console import Console
from rich.markup import escape

from license_check import __version__
from license_check.analysis.classifier import LicenseClassifier
from license_check.analysis.descriptors import DescriptorTable
from license_check.analysis.policy import PolicyEngine
from license_check.checker import check_artifacts, discover_artifacts, read_artifacts
from license_check.config import CheckConfig, apply_overrides, load_config
from license_check.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from license_check.exceptions import ConfigurationError, LicenseCheckError
from license_check.logging_config import configure_logging
from license_check.models.config import PolicyConfig
from license_check.models.coordinate import ArtifactRef
from license_check.models.report import CheckOptions, CheckReport, Verbosity
from license_check.output.report_json import ReportJsonFormatter
from license_check.output.report_markdown import ReportMarkdownFormatter
from license_check.output.terminal import TerminalFormatter
from license_check.resolvers.local import LocalRepositoryResolver

# Module-level console for consistent output
_console = Console()
# Separate console for errors and progress (writes to stderr)
_error_console = Console(stderr=True)

UNKNOWN_CODE = "unknown"


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """Maven License Check - Verify the licenses of Maven dependencies.

    Looks up the license declared in each dependency's POM (or the nearest
    parent POM declaring one), classifies it and applies your blacklist,
    whitelist and exclude rules.

    \b
    Examples:
        mvn dependency:list | license-check check
        license-check check deps.txt --format json
        license-check check deps.txt --blacklist gpl-3.0
        license-check classify "Apache License, Version 2.0"
    """
    pass


@main.command()
@click.argument(
    "dependency_list",
    type=click.Path(dir_okay=False, allow_dash=True),
    default="-",
    required=False,
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "markdown", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for check results (default: terminal).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write report to file instead of stdout.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Show declared license names and lookup details.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Show only failures and the result line.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum number of parent POMs to search (default: 12).",
)
@click.option(
    "--exclude",
    "excludes",
    multiple=True,
    help="Skip an artifact by group:artifact:version. Repeatable.",
)
@click.option(
    "--exclude-regex",
    "excludes_regex",
    multiple=True,
    help="Skip artifacts whose coordinates match a regex. Repeatable.",
)
@click.option(
    "--exclude-scope",
    "excluded_scopes",
    multiple=True,
    help="Skip artifacts in a dependency scope (e.g. test). Repeatable.",
)
@click.option(
    "--blacklist",
    multiple=True,
    help="License code that fails the build. Repeatable.",
)
@click.option(
    "--whitelist",
    multiple=True,
    help="License code that is allowed; all others fail. Repeatable.",
)
@click.option(
    "--allow-unknown/--no-allow-unknown",
    default=None,
    help="Do not fail the build for unknown licenses (overrides the config file).",
)
@click.option(
    "--repository",
    type=click.Path(file_okay=False),
    default=None,
    help="Local Maven repository (default: ~/.m2/repository).",
)
@click.option(
    "--licenses",
    "licenses_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Alternate tab-delimited license table.",
)
def check(
    dependency_list: str,
    output_format: str,
    output_path: str | None,
    verbose_flag: bool,
    quiet_flag: bool,
    config_path: str | None,
    max_depth: Optional[int],
    excludes: tuple[str, ...],
    excludes_regex: tuple[str, ...],
    excluded_scopes: tuple[str, ...],
    blacklist: tuple[str, ...],
    whitelist: tuple[str, ...],
    allow_unknown: Optional[bool],
    repository: str | None,
    licenses_path: str | None,
) -> None:
    """Check the licenses of the artifacts in DEPENDENCY_LIST.

    DEPENDENCY_LIST is the output of `mvn dependency:list` or one
    group:artifact:version per line. Use `-` (the default) for stdin.

    \b
    Examples:
        mvn dependency:list | license-check check
        license-check check deps.txt --exclude-scope test
        license-check check deps.txt --whitelist apache-2.0 --whitelist mit
        license-check check deps.txt --format markdown -o report.md
        license-check check deps.txt --config custom-config.yaml
    """
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")

    if quiet_flag:
        verbosity = Verbosity.QUIET
    elif verbose_flag:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    format_value = cast(Literal["terminal", "markdown", "json"], output_format.lower())
    options = CheckOptions(format=format_value, verbosity=verbosity)
    configure_logging(verbosity)

    try:
        config = apply_overrides(
            load_config(config_path),
            max_chain_depth=max_depth,
            excludes=excludes,
            excludes_regex=excludes_regex,
            excluded_scopes=excluded_scopes,
            blacklist=blacklist,
            whitelist=whitelist,
            allow_unknown_license=allow_unknown,
            repository=Path(repository) if repository else None,
            descriptor_table=Path(licenses_path) if licenses_path else None,
        )

        artifacts = _read_dependency_list(dependency_list)
        report = _run_check(artifacts, config, options)
        _display_report(report, options, output_path)

        if report.build_fails:
            sys.exit(EXIT_ISSUES)
        sys.exit(EXIT_SUCCESS)

    except LicenseCheckError as e:
        _display_error(e, options.format)
        sys.exit(EXIT_ERROR)


@main.command()
@click.option(
    "--licenses",
    "licenses_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Alternate tab-delimited license table.",
)
@click.argument("names", nargs=-1, required=True)
def classify(licenses_path: str | None, names: tuple[str, ...]) -> None:
    """Print the license code for each license NAME.

    Names that match no table entry print as `unknown`.

    \b
    Examples:
        license-check classify "The MIT License"
        license-check classify "GNU Lesser General Public License v2.1" "EPL 2.0"
    """
    try:
        classifier = LicenseClassifier(_load_table(licenses_path))
    except LicenseCheckError as e:
        _display_error(e, "terminal")
        sys.exit(EXIT_ERROR)

    for name in names:
        code = classifier.classify(name)
        click.echo(f"{name}\t{code or UNKNOWN_CODE}")


def _load_table(path: str | Path | None) -> DescriptorTable:
    if path is not None:
        return DescriptorTable.from_path(Path(path))
    return DescriptorTable.load_default()


def _read_dependency_list(source: str) -> list[ArtifactRef]:
    """Read artifacts from a file, or from stdin when source is ``-``."""
    if source == "-":
        stream = click.get_text_stream("stdin")
        return discover_artifacts(stream.read().splitlines())
    return read_artifacts(Path(source))


def _run_check(
    artifacts: list[ArtifactRef], config: CheckConfig, options: CheckOptions
) -> CheckReport:
    """Build the policy, table and resolver, then check every artifact.

    Args:
        artifacts: Artifacts to check.
        config: Configuration with command line overrides applied.
        options: Check options including verbosity.

    Returns:
        CheckReport with one outcome per artifact.
    """
    engine = PolicyEngine(PolicyConfig.from_check_config(config))
    classifier = LicenseClassifier(_load_table(config.descriptor_table))
    resolver = LocalRepositoryResolver(config.repository)

    return check_artifacts(
        artifacts,
        resolver,
        classifier,
        engine,
        console=_error_console,
        show_progress=options.verbosity != Verbosity.QUIET,
    )


def _write_output_to_file(content: str, path: str) -> None:
    """Write report content to file.

    Raises:
        ConfigurationError: If file cannot be written.
    """
    file_path = Path(path)

    try:
        if file_path.exists():
            _console.print(
                f"[yellow]Warning: Overwriting existing file: {escape(path)}[/yellow]"
            )
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot write to file '{path}': {e}") from e

    _console.print(f"[green]Report written to {escape(path)}[/green]")


def _display_report(
    report: CheckReport, options: CheckOptions, output_path: str | None = None
) -> None:
    """Display the check report in the specified format.

    Args:
        report: The check report to display.
        options: Check options including format.
        output_path: Optional file path to write output to.
    """
    if options.format == "json":
        content = ReportJsonFormatter().format_report(report)
    elif options.format == "markdown":
        content = ReportMarkdownFormatter().format_report(report)
    else:  # terminal
        if output_path:
            # Terminal format to file uses markdown instead
            content = ReportMarkdownFormatter().format_report(report)
        else:
            TerminalFormatter(
                console=_console, verbosity=options.verbosity
            ).format_report(report)
            return

    if output_path:
        _write_output_to_file(content, output_path)
    else:
        click.echo(content)


def _display_error(error: LicenseCheckError, format_type: str) -> None:
    """Display error message on stderr."""
    message = f"Error: {type(error).__name__}: {error}"

    if format_type == "terminal":
        _error_console.print(f"[red bold]{escape(message)}[/red bold]")
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()

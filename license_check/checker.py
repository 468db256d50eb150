"""Checker module for artifact discovery and license policy evaluation."""
import logging
import re
from pathlib import Path
from typing import Iterable, Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from license_check.analysis.classifier import LicenseClassifier
from license_check.analysis.policy import PolicyEngine
from license_check.exceptions import ScanError
from license_check.models.coordinate import ArtifactCoordinate, ArtifactRef
from license_check.models.report import (
    CheckReport,
    LicenseLookup,
    LookupStatus,
    ResolutionOutcome,
)
from license_check.resolvers.base import ArtifactResolver
from license_check.resolvers.chain import ChainResolver

logger = logging.getLogger(__name__)

# Single coordinate token: letters, digits, '.', '_', '-', '$', '+'
_TOKEN = re.compile(r"^[\w.\-$+]+$")
_LOG_PREFIX = re.compile(r"^\[[A-Z]+\]\s*")

NO_LICENSE_DETAIL = "No license declared in the pom or its parents"


def parse_dependency_line(line: str) -> Optional[ArtifactRef]:
    """Parse one line of ``mvn dependency:list`` output.

    Accepted forms (after stripping a ``[INFO]`` prefix and trailing
    ``-- module`` / ``(optional)`` annotations)::

        group:artifact:version
        group:artifact:type:version
        group:artifact:type:version:scope
        group:artifact:type:classifier:version:scope

    Args:
        line: A single line of text.

    Returns:
        ArtifactRef with coordinate and scope, or None if the line is not
        a dependency coordinate.
    """
    text = _LOG_PREFIX.sub("", line.strip())
    text = text.split(" -- ", 1)[0]
    text = text.replace("(optional)", "").strip()
    if not text or " " in text:
        return None

    parts = text.split(":")
    if not all(_TOKEN.match(part) for part in parts):
        return None

    scope: Optional[str] = None
    extension = "jar"
    if len(parts) == 3:
        group_id, artifact_id, version = parts
    elif len(parts) == 4:
        group_id, artifact_id, extension, version = parts
    elif len(parts) == 5:
        group_id, artifact_id, extension, version, scope = parts
    elif len(parts) == 6:
        group_id, artifact_id, extension, _classifier, version, scope = parts
    else:
        return None

    coordinate = ArtifactCoordinate(
        group_id=group_id, artifact_id=artifact_id, version=version
    )
    return ArtifactRef(coordinate=coordinate, scope=scope, extension=extension)


def discover_artifacts(lines: Iterable[str]) -> list[ArtifactRef]:
    """Collect the artifacts listed in dependency list output.

    Args:
        lines: Lines of ``mvn dependency:list`` output or plain coordinates.

    Returns:
        Artifacts in input order. Repeated coordinates keep their first
        occurrence.
    """
    artifacts: list[ArtifactRef] = []
    seen: set[str] = set()
    for line in lines:
        artifact = parse_dependency_line(line)
        if artifact is None:
            continue
        key = artifact.coordinate.compact()
        if key in seen:
            continue
        seen.add(key)
        artifacts.append(artifact)
    return artifacts


def read_artifacts(path: Path) -> list[ArtifactRef]:
    """Read artifacts from a dependency list file.

    Raises:
        ScanError: If the file cannot be read.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ScanError(f"Cannot read dependency list '{path}': {e}") from e
    return discover_artifacts(content.splitlines())


def lookup_license(
    artifact: ArtifactRef,
    resolver: ArtifactResolver,
    chain: ChainResolver,
) -> LicenseLookup:
    """Resolve an artifact if needed and walk its parent chain."""
    if not artifact.is_resolved:
        resolved = resolver.resolve_coordinate(artifact.coordinate)
        if resolved is None:
            return LicenseLookup.failed(
                f"Could not resolve artifact {artifact.coordinate}"
            )
        artifact = artifact.with_path(resolved.path, resolved.extension)
    return chain.lookup(artifact)


def evaluate_artifact(
    artifact: ArtifactRef,
    resolver: ArtifactResolver,
    chain: ChainResolver,
    classifier: LicenseClassifier,
    engine: PolicyEngine,
) -> ResolutionOutcome:
    """Produce the policy outcome for a single artifact.

    Excluded artifacts are decided before any resolution or POM reading.
    """
    if engine.is_excluded(artifact.coordinate, artifact.scope):
        logger.info("Skipping %s: artifact is on the exclude list", artifact.coordinate)
        return engine.excluded(artifact.coordinate, artifact.scope)

    lookup = lookup_license(artifact, resolver, chain)
    code = classifier.classify(lookup.license_name)

    detail = lookup.reason
    if lookup.status == LookupStatus.ABSENT:
        detail = NO_LICENSE_DETAIL

    return engine.decide(
        artifact.coordinate,
        artifact.scope,
        lookup.license_name,
        code,
        detail=detail,
    )


def check_artifacts(
    artifacts: list[ArtifactRef],
    resolver: ArtifactResolver,
    classifier: LicenseClassifier,
    engine: PolicyEngine,
    console: Optional[Console] = None,
    show_progress: bool = True,
) -> CheckReport:
    """Check the licenses of all artifacts against the policy.

    Artifacts are processed one at a time in input order and every
    artifact is evaluated, even after a failure, so the report is always
    complete.

    Args:
        artifacts: Artifacts to check.
        resolver: Resolves coordinates to files.
        classifier: Converts license names to codes.
        engine: Policy to apply.
        console: Optional Rich Console for progress display.
        show_progress: Whether to show progress indicator (default: True).

    Returns:
        CheckReport with one outcome per artifact, in input order.
    """
    chain = ChainResolver(resolver, max_chain_depth=engine.policy.max_chain_depth)
    logger.info("Validating licenses for %d artifact(s)", len(artifacts))

    outcomes: list[ResolutionOutcome] = []

    if console is not None and show_progress and len(artifacts) > 0:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            task_id = progress.add_task(
                f"Validating licenses for {len(artifacts)} artifacts...",
                total=len(artifacts),
            )
            for artifact in artifacts:
                outcomes.append(
                    evaluate_artifact(artifact, resolver, chain, classifier, engine)
                )
                progress.advance(task_id)
    else:
        for artifact in artifacts:
            outcomes.append(
                evaluate_artifact(artifact, resolver, chain, classifier, engine)
            )

    return CheckReport(outcomes=outcomes)

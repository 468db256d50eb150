"""Resolver for artifacts stored in a local Maven repository."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from license_check.exceptions import ArtifactResolutionError
from license_check.models.coordinate import ArtifactCoordinate, ArtifactRef
from license_check.resolvers.base import PACKAGED_EXTENSION, ArtifactResolver


def default_repository() -> Path:
    """Return the default local repository (``~/.m2/repository``)."""
    return Path.home() / ".m2" / "repository"


class LocalRepositoryResolver(ArtifactResolver):
    """Resolve artifacts using the Maven repository directory layout.

    ``org.example:lib:1.0`` with extension ``jar`` maps to
    ``<root>/org/example/lib/1.0/lib-1.0.jar``. Nothing is downloaded; an
    artifact missing from disk is a resolution failure.
    """

    def __init__(self, root: Optional[Path] = None) -> None:
        self._root = root if root is not None else default_repository()

    @property
    def root(self) -> Path:
        return self._root

    def artifact_path(self, coordinate: ArtifactCoordinate, extension: str) -> Path:
        """Compute where an artifact lives inside the repository."""
        directory = self._root.joinpath(
            *coordinate.group_id.split("."),
            coordinate.artifact_id,
            coordinate.version,
        )
        return directory / f"{coordinate.artifact_id}-{coordinate.version}.{extension}"

    def resolve_artifact(
        self, coordinate: ArtifactCoordinate, extension: str = PACKAGED_EXTENSION
    ) -> ArtifactRef:
        path = self.artifact_path(coordinate, extension)
        if not path.is_file():
            raise ArtifactResolutionError(
                f"Artifact {coordinate}:{extension} not found at {path}"
            )
        return ArtifactRef(coordinate=coordinate, path=path, extension=extension)

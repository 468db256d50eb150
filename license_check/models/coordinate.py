"""Artifact coordinate models for license-check."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class ArtifactCoordinate(BaseModel):
    """Maven coordinates (groupId, artifactId, version).

    Immutable identity key for an artifact. The compact string form
    ``group:artifact:version`` is used for set membership, report keys
    and logging.
    """

    model_config = {"extra": "forbid", "frozen": True}

    group_id: str = Field(min_length=1, description="Maven groupId")
    artifact_id: str = Field(min_length=1, description="Maven artifactId")
    version: str = Field(min_length=1, description="Artifact version")

    @classmethod
    def parse(cls, coordinates: str) -> ArtifactCoordinate:
        """Parse a ``group:artifact:version`` string.

        Args:
            coordinates: Coordinate string with exactly three parts.

        Returns:
            The parsed ArtifactCoordinate.

        Raises:
            ValueError: If the string does not have three non-empty parts.
        """
        parts = [part.strip() for part in coordinates.split(":")]
        if len(parts) != 3 or not all(parts):
            raise ValueError(
                f"Invalid coordinates '{coordinates}': expected group:artifact:version"
            )
        return cls(group_id=parts[0], artifact_id=parts[1], version=parts[2])

    def compact(self) -> str:
        """Return the ``group:artifact:version`` form."""
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    def __str__(self) -> str:
        return self.compact()


class ArtifactRef(BaseModel):
    """An artifact coordinate plus the file it was resolved to.

    A ``path`` of None means the artifact has not been resolved yet.
    """

    model_config = {"extra": "forbid", "frozen": True}

    coordinate: ArtifactCoordinate = Field(description="Artifact identity")
    path: Optional[Path] = Field(
        default=None,
        description="Resolved artifact file (jar, pom, ...), None if unresolved",
    )
    scope: Optional[str] = Field(
        default=None,
        description="Dependency scope (compile, runtime, test, provided, ...)",
    )
    extension: str = Field(default="jar", description="Packaging of the artifact")

    @property
    def is_resolved(self) -> bool:
        """True if the artifact points at a file."""
        return self.path is not None

    def with_path(self, path: Path, extension: Optional[str] = None) -> ArtifactRef:
        """Return a copy of this reference pointing at ``path``."""
        return self.model_copy(
            update={"path": path, "extension": extension or self.extension}
        )

"""Base artifact resolver interface."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from license_check.exceptions import ArtifactResolutionError
from license_check.models.coordinate import ArtifactCoordinate, ArtifactRef

logger = logging.getLogger(__name__)

PACKAGED_EXTENSION = "jar"
METADATA_EXTENSION = "pom"


class ArtifactResolver(ABC):
    """Abstract base class for artifact resolvers.

    Resolvers turn coordinates into files. Subclasses implement
    resolve_artifact() for a single packaging; resolve_coordinate() adds
    the fallback from the packaged artifact to its POM.
    """

    @abstractmethod
    def resolve_artifact(
        self, coordinate: ArtifactCoordinate, extension: str = PACKAGED_EXTENSION
    ) -> ArtifactRef:
        """Resolve a coordinate with a given packaging to a file.

        Args:
            coordinate: The artifact to resolve.
            extension: Packaging to look for ("jar", "pom", ...).

        Returns:
            An ArtifactRef whose path points at the resolved file.

        Raises:
            ArtifactResolutionError: If the artifact cannot be resolved.
        """

    def resolve_coordinate(
        self, coordinate: ArtifactCoordinate
    ) -> Optional[ArtifactRef]:
        """Resolve a coordinate, retrying with the POM if the jar is missing.

        Args:
            coordinate: The artifact to resolve.

        Returns:
            The resolved ArtifactRef, or None if neither the packaged
            artifact nor its POM could be resolved.
        """
        try:
            return self.resolve_artifact(coordinate, PACKAGED_EXTENSION)
        except ArtifactResolutionError:
            pass

        try:
            return self.resolve_artifact(coordinate, METADATA_EXTENSION)
        except ArtifactResolutionError as e:
            logger.error("Could not resolve artifact (%s): %s", coordinate, e)
            return None

"""Parent chain walk for license discovery."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from license_check.analysis.extractor import (
    extract_license_name,
    extract_parent_coordinate,
)
from license_check.constants import DEFAULT_MAX_CHAIN_DEPTH
from license_check.exceptions import DocumentNotFoundError, MalformedDocumentError
from license_check.models.coordinate import ArtifactRef
from license_check.models.report import LicenseLookup
from license_check.resolvers.base import ArtifactResolver
from license_check.resolvers.documents import read_metadata_document

logger = logging.getLogger(__name__)

DocumentReader = Callable[[ArtifactRef], str]


class ChainResolver:
    """Find the license declared by an artifact or its nearest ancestor.

    The walk follows ``<parent>`` references one POM at a time. The
    artifact itself is depth 0 and no POM deeper than ``max_chain_depth``
    is read, which also bounds cyclic parent chains.
    """

    def __init__(
        self,
        resolver: ArtifactResolver,
        max_chain_depth: int = DEFAULT_MAX_CHAIN_DEPTH,
        document_reader: DocumentReader = read_metadata_document,
    ) -> None:
        """Initialize the chain resolver.

        Args:
            resolver: Resolves parent coordinates to artifact files.
            max_chain_depth: Maximum depth of the walk.
            document_reader: Reads the POM of a resolved artifact.
        """
        self._resolver = resolver
        self._max_chain_depth = max_chain_depth
        self._read_document = document_reader

    @property
    def max_chain_depth(self) -> int:
        return self._max_chain_depth

    def resolve_license(self, artifact: ArtifactRef, depth: int = 0) -> Optional[str]:
        """Return the first license name declared along the parent chain.

        Args:
            artifact: Resolved artifact to start from.
            depth: Depth of ``artifact`` in the chain.

        Returns:
            The declared license name, or None if no license is declared,
            the depth limit is reached, or a parent cannot be resolved.

        Raises:
            DocumentNotFoundError: If a POM in the chain cannot be located.
            MalformedDocumentError: If a POM in the chain is malformed.
        """
        current: Optional[ArtifactRef] = artifact
        while current is not None:
            pom = self._read_document(current)

            license_name = extract_license_name(pom)
            if license_name is not None:
                return license_name

            parent_coordinate = extract_parent_coordinate(pom)
            if parent_coordinate is None:
                return None

            if depth >= self._max_chain_depth:
                logger.info(
                    "Stopped searching parents of %s at depth %d (limit %d)",
                    current.coordinate,
                    depth,
                    self._max_chain_depth,
                )
                return None

            current = self._resolver.resolve_coordinate(parent_coordinate)
            depth += 1
        return None

    def lookup(self, artifact: ArtifactRef) -> LicenseLookup:
        """Walk the chain and report the result without raising.

        Args:
            artifact: Resolved artifact to start from.

        Returns:
            LicenseLookup that is FOUND with the license name, ABSENT if
            nothing was declared, or FAILED with the reason a POM could
            not be read.
        """
        try:
            license_name = self.resolve_license(artifact)
        except (DocumentNotFoundError, MalformedDocumentError) as e:
            logger.warning(
                "Error reading license information for %s: %s", artifact.coordinate, e
            )
            return LicenseLookup.failed(str(e))

        if license_name is None:
            return LicenseLookup.absent()
        return LicenseLookup.found(license_name)

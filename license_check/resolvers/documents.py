"""Locating and reading the POM of a resolved artifact."""
from __future__ import annotations

import logging
import re
import zipfile
from pathlib import Path
from typing import Optional

from license_check.constants import ARCHIVE_SUFFIXES, EMBEDDED_POM_TEMPLATE
from license_check.exceptions import DocumentNotFoundError
from license_check.models.coordinate import ArtifactRef

logger = logging.getLogger(__name__)


_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _join_lines(content: str) -> str:
    # Only CR, LF and CRLF are dropped, so a name wrapped over several
    # lines is returned as a single run of text.
    return _LINE_BREAK.sub("", content)


def _is_pom(path: Path) -> bool:
    name = path.name.lower()
    return name.endswith("pom.xml") or name.endswith(".pom")


def _is_archive(path: Path) -> bool:
    return path.name.lower().endswith(ARCHIVE_SUFFIXES)


def sibling_pom_path(artifact: ArtifactRef) -> Optional[Path]:
    """Return ``<artifactId>-<version>.pom`` next to the artifact file."""
    if artifact.path is None:
        return None
    coordinate = artifact.coordinate
    return artifact.path.parent / f"{coordinate.artifact_id}-{coordinate.version}.pom"


def embedded_pom_member(artifact: ArtifactRef) -> str:
    """Return the archive member path of an embedded POM."""
    return EMBEDDED_POM_TEMPLATE.format(
        group_id=artifact.coordinate.group_id,
        artifact_id=artifact.coordinate.artifact_id,
    )


def _read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise DocumentNotFoundError(f"Cannot read pom file {path}: {e}") from e


def _read_embedded(archive: Path, member: str) -> Optional[str]:
    try:
        with zipfile.ZipFile(archive) as zf:
            try:
                data = zf.read(member)
            except KeyError:
                logger.debug("File %s not found inside %s", member, archive)
                return None
    except (OSError, zipfile.BadZipFile) as e:
        logger.debug("Cannot open archive %s: %s", archive, e)
        return None
    logger.debug("File %s from inside %s will be used", member, archive)
    return data.decode("utf-8", errors="replace")


def read_metadata_document(artifact: ArtifactRef) -> str:
    """Read the POM for a resolved artifact.

    Location strategies, in order:

    1. ``<artifactId>-<version>.pom`` in the artifact's directory.
    2. The artifact file itself, when it is a POM.
    3. ``META-INF/maven/<group>/<artifact>/pom.xml`` inside the artifact,
       when it is an archive.

    Args:
        artifact: Artifact reference with a resolved path.

    Returns:
        The POM text with line breaks removed.

    Raises:
        DocumentNotFoundError: If no strategy yields a document.
    """
    path = artifact.path
    if path is None:
        raise DocumentNotFoundError(f"Artifact {artifact.coordinate} is not resolved")

    sibling = sibling_pom_path(artifact)
    if sibling is not None and sibling.is_file():
        logger.debug("File %s will be used as pom", sibling)
        return _join_lines(_read_file(sibling))
    logger.debug("File %s not found, trying %s instead", sibling, path)

    if path.is_file():
        if _is_pom(path):
            logger.debug("File %s is a pom, using that", path)
            return _join_lines(_read_file(path))
        if _is_archive(path):
            content = _read_embedded(path, embedded_pom_member(artifact))
            if content is not None:
                return _join_lines(content)

    raise DocumentNotFoundError(f"No pom file for artifact {path} found")

"""License and parent extraction from raw POM text.

POMs are not parsed as XML. Only the first ``<license>`` and the first
``<parent>`` section are looked at, and inner text is returned verbatim,
because the descriptor table patterns are written against that raw text.
"""
from __future__ import annotations

from typing import Optional

from license_check.exceptions import MalformedDocumentError
from license_check.models.coordinate import ArtifactCoordinate

LICENSE_TAG = "license"
NAME_TAG = "name"
PARENT_TAG = "parent"
GROUP_TAG = "groupId"
ARTIFACT_TAG = "artifactId"
VERSION_TAG = "version"


def _find_section(raw: str, tag: str) -> Optional[str]:
    """Return the inner text of the first ``<tag>...</tag>`` pair.

    Args:
        raw: Text to search.
        tag: Element name without angle brackets.

    Returns:
        The inner text, or None if the opening delimiter never occurs.

    Raises:
        MalformedDocumentError: If the opening delimiter is not followed
            by a closing one.
    """
    start_tag, stop_tag = f"<{tag}>", f"</{tag}>"
    start = raw.find(start_tag)
    if start == -1:
        return None
    content_start = start + len(start_tag)
    stop = raw.find(stop_tag, content_start)
    if stop == -1:
        raise MalformedDocumentError(f"Found {start_tag} without a matching {stop_tag}")
    return raw[content_start:stop]


def extract_license_name(raw: str) -> Optional[str]:
    """Extract the name of the first declared license.

    Args:
        raw: POM text.

    Returns:
        Inner text of the first ``<name>`` inside the first ``<license>``
        section, or None if there is no license section or it has no name.

    Raises:
        MalformedDocumentError: If a license or name element is not closed.
    """
    section = _find_section(raw, LICENSE_TAG)
    if section is None:
        return None
    return _find_section(section, NAME_TAG)


def extract_parent_coordinate(raw: str) -> Optional[ArtifactCoordinate]:
    """Extract the coordinates of the parent POM.

    Args:
        raw: POM text.

    Returns:
        Coordinates from the first ``<parent>`` section, or None if the
        document declares no parent.

    Raises:
        MalformedDocumentError: If the parent section is not closed or is
            missing its groupId, artifactId or version.
    """
    section = _find_section(raw, PARENT_TAG)
    if section is None:
        return None

    values: list[str] = []
    for tag in (GROUP_TAG, ARTIFACT_TAG, VERSION_TAG):
        value = _find_section(section, tag)
        if value is None:
            raise MalformedDocumentError(f"<{PARENT_TAG}> section has no <{tag}>")
        values.append(value)

    try:
        return ArtifactCoordinate.parse(":".join(values))
    except ValueError as e:
        raise MalformedDocumentError(f"Invalid parent coordinates: {e}") from e

"""Classification of free-text license names into license codes."""
from __future__ import annotations

from typing import Optional

from license_check.analysis.descriptors import DescriptorTable
from license_check.models.descriptor import LicenseDescriptor


class LicenseClassifier:
    """Match license names against an ordered descriptor table.

    The first descriptor whose pattern occurs anywhere in the name wins,
    so table order decides between overlapping patterns (for example LGPL
    rows must come before GPL rows).
    """

    def __init__(self, table: DescriptorTable) -> None:
        self._table = table

    @property
    def table(self) -> DescriptorTable:
        return self._table

    def match(self, license_name: Optional[str]) -> Optional[LicenseDescriptor]:
        """Return the first descriptor matching ``license_name``, if any."""
        if license_name is None:
            return None
        for descriptor in self._table:
            if descriptor.matches(license_name):
                return descriptor
        return None

    def classify(self, license_name: Optional[str]) -> Optional[str]:
        """Convert a license name to its code.

        Args:
            license_name: Declared license name, or None if none was found.

        Returns:
            The code of the first matching descriptor, or None when the
            name is None or nothing matches.
        """
        descriptor = self.match(license_name)
        return descriptor.code if descriptor is not None else None

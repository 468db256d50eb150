"""Loading of the ordered license descriptor table.

The table is a tab-delimited text resource with one descriptor per line:

    code <TAB> reference <TAB> display name <TAB> pattern

The second column (an SPDX identifier in the bundled table) is part of the
format but is not used for classification. Row order is match precedence.
"""
from __future__ import annotations

import re
from importlib.resources import files
from pathlib import Path
from typing import Iterable, Iterator

from license_check.exceptions import DescriptorTableError
from license_check.models.descriptor import LicenseDescriptor

DEFAULT_TABLE_RESOURCE = "data/licenses.txt"
MIN_COLUMNS = 4


def parse_descriptor_line(line: str, line_number: int = 0) -> LicenseDescriptor:
    """Parse one row of the table.

    Args:
        line: Raw line without its trailing newline.
        line_number: 1-based position, used in error messages.

    Returns:
        The parsed descriptor.

    Raises:
        DescriptorTableError: If the line has fewer than four columns or
            the pattern does not compile.
    """
    columns = line.split("\t")
    if len(columns) < MIN_COLUMNS:
        raise DescriptorTableError(
            f"Line {line_number}: expected {MIN_COLUMNS} tab-separated columns, "
            f"got {len(columns)}: {line!r}"
        )
    code, _reference, display_name, raw_pattern = columns[:MIN_COLUMNS]
    try:
        pattern = re.compile(raw_pattern, re.IGNORECASE)
    except re.error as e:
        raise DescriptorTableError(
            f"Line {line_number}: invalid pattern {raw_pattern!r} for '{code}': {e}"
        ) from e
    return LicenseDescriptor(code=code, display_name=display_name, pattern=pattern)


class DescriptorTable:
    """Immutable, ordered sequence of license descriptors.

    Built once per run and shared read-only by every classification call.
    """

    def __init__(self, descriptors: Iterable[LicenseDescriptor]) -> None:
        self._descriptors: tuple[LicenseDescriptor, ...] = tuple(descriptors)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> DescriptorTable:
        """Build a table from raw lines, skipping blank ones."""
        descriptors = [
            parse_descriptor_line(line.rstrip("\r\n"), number)
            for number, line in enumerate(lines, start=1)
            if line.strip()
        ]
        return cls(descriptors)

    @classmethod
    def from_text(cls, text: str) -> DescriptorTable:
        return cls.from_lines(text.splitlines())

    @classmethod
    def from_path(cls, path: Path) -> DescriptorTable:
        """Load a table from a file on disk.

        Raises:
            DescriptorTableError: If the file cannot be read or is malformed.
        """
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DescriptorTableError(
                f"Cannot read license table '{path}': {e}"
            ) from e
        return cls.from_text(content)

    @classmethod
    def load_default(cls) -> DescriptorTable:
        """Load the table bundled with the package."""
        resource = files("license_check").joinpath(DEFAULT_TABLE_RESOURCE)
        try:
            content = resource.read_text(encoding="utf-8")
        except OSError as e:
            raise DescriptorTableError(f"Cannot read bundled license table: {e}") from e
        return cls.from_text(content)

    @property
    def descriptors(self) -> tuple[LicenseDescriptor, ...]:
        return self._descriptors

    def __iter__(self) -> Iterator[LicenseDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

"""License descriptor model."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field


class LicenseDescriptor(BaseModel):
    """A single row of the descriptor table.

    The pattern is compiled case-insensitively and searched for anywhere
    within a license name.
    """

    model_config = {"extra": "forbid", "frozen": True}

    code: str = Field(min_length=1, description="Normalized license code")
    display_name: str = Field(description="Human readable license name")
    pattern: re.Pattern[str] = Field(description="Compiled license name pattern")

    def matches(self, license_name: str) -> bool:
        """Check whether the pattern occurs anywhere in ``license_name``."""
        return self.pattern.search(license_name) is not None

"""Beta feature flags of the API."""

from __future__ import annotations

from enum import Enum


class Beta(str, Enum):
    """A beta feature of the API."""

    TOOLS_2024_04_04 = "tools-2024-04-04"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> Beta:
        """Return the default beta feature."""
        return cls.TOOLS_2024_04_04
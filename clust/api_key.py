"""API key handling."""

from __future__ import annotations

import os
from dataclasses import dataclass

ENV_VAR = "ANTHROPIC_API_KEY"


@dataclass(frozen=True, repr=False)
class ApiKey:
    """The API key of the Anthropic API."""

    value: str

    def __repr__(self) -> str:
        return "ApiKey(****)"

    @classmethod
    def from_env(cls) -> ApiKey:
        """Load the API key from the ``ANTHROPIC_API_KEY`` environment variable.

        Raises ``KeyError`` when the variable is not set.
        """
        try:
            value = os.environ[ENV_VAR]
        except KeyError:
            raise KeyError(f"environment variable {ENV_VAR} is not set") from None
        return cls(value)
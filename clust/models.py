"""Claude models."""

from __future__ import annotations

from enum import Enum


class ClaudeModel(str, Enum):
    """The model that will complete the prompt."""

    CLAUDE_3_OPUS_20240229 = "claude-3-opus-20240229"
    CLAUDE_3_SONNET_20240229 = "claude-3-sonnet-20240229"
    CLAUDE_3_HAIKU_20240307 = "claude-3-haiku-20240307"
    CLAUDE_3_5_SONNET_20240620 = "claude-3-5-sonnet-20240620"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> ClaudeModel:
        """Return the default model."""
        return cls.CLAUDE_3_SONNET_20240229

    def max_tokens(self) -> int:
        """Return the largest number of tokens the model can generate."""
        return _MAX_TOKENS[self]


_MAX_TOKENS = {
    ClaudeModel.CLAUDE_3_OPUS_20240229: 4096,
    ClaudeModel.CLAUDE_3_SONNET_20240229: 4096,
    ClaudeModel.CLAUDE_3_HAIKU_20240307: 4096,
    ClaudeModel.CLAUDE_3_5_SONNET_20240620: 4096,
}
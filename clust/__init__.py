"""Building blocks for the Claude Messages API: models, keys, errors, codecs, streamed events and tool schemas."""

__version__ = "0.9.0"

__all__ = [
    "api_key",
    "beta",
    "chunk_stream",
    "errors",
    "models",
    "serialization",
    "tools",
]
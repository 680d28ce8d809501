"""Splitting a streamed response body into server-sent events."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, AsyncIterable, AsyncIterator, Iterable, Iterator


class ChunkDecodingError(ValueError):
    """A chunk of the stream could not be decoded."""


@dataclass(frozen=True)
class ServerSentEvent:
    """One event of a message stream: its name and its decoded JSON data."""

    event: str | None
    data: Any

    @property
    def type(self) -> str | None:
        """The ``type`` field of the data, falling back to the event name."""
        if isinstance(self.data, dict) and isinstance(self.data.get("type"), str):
            return self.data["type"]
        return self.event

    @classmethod
    def parse(cls, text: str) -> ServerSentEvent:
        """Parse the text of one event block.

        Raises :class:`ChunkDecodingError` when the block has no data, the
        data is not JSON, or the event name disagrees with the data's type.
        """
        event: str | None = None
        data_lines: list[str] = []
        for raw_line in text.split("\n"):
            line = raw_line.rstrip("\r")
            if not line or line.startswith(":"):
                continue
            field, _, value = line.partition(":")
            if value.startswith(" "):
                value = value[1:]
            if field == "event":
                event = value
            elif field == "data":
                data_lines.append(value)

        if not data_lines:
            raise ChunkDecodingError(f"chunk has no data: {text!r}")
        payload = "\n".join(data_lines)
        try:
            data = json.loads(payload)
        except ValueError as error:
            raise ChunkDecodingError(
                f"chunk data is not valid JSON: {payload!r}"
            ) from error

        if event is not None and isinstance(data, dict):
            data_type = data.get("type")
            if isinstance(data_type, str) and data_type != event:
                raise ChunkDecodingError(
                    f"event name {event!r} does not match data type {data_type!r}"
                )
        return cls(event, data)


def _decode(chunk: bytes) -> str:
    try:
        return chunk.decode("utf-8")
    except UnicodeDecodeError as error:
        raise ChunkDecodingError(f"chunk is not valid UTF-8: {error}") from error


class ChunkBuffer:
    """Collects bytes and yields the complete events they contain.

    An event ends at the line break after its second line; the blank line
    that follows it is dropped.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def feed(self, data: bytes) -> list[ServerSentEvent]:
        """Add bytes and return every event that is now complete."""
        self._buffer.extend(data)
        events: list[ServerSentEvent] = []
        while True:
            first = self._buffer.find(b"\n")
            if first < 0:
                break
            second = self._buffer.find(b"\n", first + 1)
            if second < 0:
                break
            chunk = bytes(self._buffer[: second + 1])
            # Drop the chunk and the blank line separating it from the next.
            del self._buffer[: second + 2]
            if chunk.strip(b"\n"):
                events.append(ServerSentEvent.parse(_decode(chunk)))
        return events

    def finish(self) -> ServerSentEvent | None:
        """Parse whatever is left once the input has ended."""
        remaining = bytes(self._buffer)
        self._buffer.clear()
        if not remaining.strip(b"\r\n"):
            return None
        return ServerSentEvent.parse(_decode(remaining))


def iter_chunks(byte_chunks: Iterable[bytes]) -> Iterator[ServerSentEvent]:
    """Yield the events carried by an iterable of byte chunks."""
    buffer = ChunkBuffer()
    for data in byte_chunks:
        yield from buffer.feed(data)
    last = buffer.finish()
    if last is not None:
        yield last


async def aiter_chunks(
    byte_chunks: AsyncIterable[bytes],
) -> AsyncIterator[ServerSentEvent]:
    """Yield the events carried by an asynchronous iterable of byte chunks."""
    buffer = ChunkBuffer()
    async for data in byte_chunks:
        for event in buffer.feed(data):
            yield event
    last = buffer.finish()
    if last is not None:
        yield last
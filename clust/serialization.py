"""Codecs between Python values and JSON-compatible data.

Each codec turns a value into plain JSON data (``str``, ``bool``, ``list``,
``dict`` and numbers) with :meth:`encode`, and back with :meth:`decode`.
Decoding raises :class:`ValueError` on data of the wrong shape; encoding
raises :class:`TypeError` on a value the codec does not know.
"""

from __future__ import annotations

import dataclasses
import json
from enum import Enum
from typing import Any, Generic, Hashable, Mapping, TypeVar

T = TypeVar("T", bound=Hashable)


def _encode_object(value: Any) -> Any:
    """Turn a structured value into JSON data."""
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def _decode_object(cls: type, data: Any) -> Any:
    """Build an instance of ``cls`` from JSON data."""
    from_dict = getattr(cls, "from_dict", None)
    if callable(from_dict):
        return from_dict(data)
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object for {cls.__name__}, got {data!r}")
    try:
        return cls(**data)
    except TypeError as error:
        raise ValueError(f"invalid fields for {cls.__name__}: {error}") from error


class StringEnumCodec(Generic[T]):
    """Encodes each member of an enumeration as a fixed string."""

    def __init__(self, mapping: Mapping[T, str], name: str = "enum") -> None:
        self.name = name
        self._to_str = dict(mapping)
        self._from_str = {text: member for member, text in self._to_str.items()}
        if len(self._from_str) != len(self._to_str):
            raise ValueError("string representations must be unique")

    def encode(self, value: T) -> str:
        try:
            return self._to_str[value]
        except (KeyError, TypeError):
            raise TypeError(f"{value!r} is not a member of {self.name}") from None

    def decode(self, data: Any) -> T:
        if not isinstance(data, str):
            raise ValueError(f"expected a string representing a {self.name}, got {data!r}")
        try:
            return self._from_str[data]
        except KeyError:
            raise ValueError(f"invalid value for enum {self.name}: {data!r}") from None


class TaggedUnionCodec:
    """Encodes a union of record types told apart by a string tag field.

    ``variants`` maps each tag to the type that carries it. Values are
    encoded with their own ``to_dict`` (or as dataclasses) and decoded with
    the type's ``from_dict`` (or its constructor).
    """

    def __init__(self, tag_field: str, variants: Mapping[str, type]) -> None:
        self.tag_field = tag_field
        self._by_tag = dict(variants)
        self._types = tuple(self._by_tag.values())

    def encode(self, value: Any) -> Any:
        if type(value) not in self._types:
            raise TypeError(f"{type(value).__name__} is not a variant of this union")
        return _encode_object(value)

    def decode(self, data: Any) -> Any:
        if not isinstance(data, Mapping):
            raise ValueError(f"expected an object, got {data!r}")
        tag = data.get(self.tag_field)
        if not isinstance(tag, str):
            raise ValueError(f"missing field `{self.tag_field}`")
        try:
            cls = self._by_tag[tag]
        except KeyError:
            raise ValueError(f"unknown tag: {tag}") from None
        return _decode_object(cls, data)


class BoolEnumCodec(Generic[T]):
    """Encodes a two-valued enumeration as a JSON boolean."""

    def __init__(self, true_value: T, false_value: T) -> None:
        self.true_value = true_value
        self.false_value = false_value

    def encode(self, value: T) -> bool:
        if value == self.true_value:
            return True
        if value == self.false_value:
            return False
        raise TypeError(f"{value!r} has no boolean representation")

    def decode(self, data: Any) -> T:
        if not isinstance(data, bool):
            raise ValueError(f"expected a boolean, got {data!r}")
        return self.true_value if data else self.false_value


class StringOrArrayCodec:
    """Encodes either a single string or a list of items.

    With ``item_type`` set, list items are encoded and decoded as instances
    of that type; otherwise they pass through unchanged.
    """

    def __init__(self, item_type: type | None = None) -> None:
        self.item_type = item_type

    def encode(self, value: str | list[Any]) -> Any:
        if isinstance(value, str):
            return value
        if isinstance(value, (list, tuple)):
            return [_encode_object(item) for item in value]
        raise TypeError(f"expected a string or a list, got {type(value).__name__}")

    def decode(self, data: Any) -> str | list[Any]:
        if isinstance(data, str):
            return data
        if isinstance(data, list):
            if self.item_type is None:
                return list(data)
            return [_decode_object(self.item_type, item) for item in data]
        raise ValueError(f"expected a single element or an array of elements, got {data!r}")


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    encoded = _encode_object(value)
    if encoded is value:
        raise TypeError(f"{type(value).__name__} is not JSON serializable")
    return encoded


def to_pretty_json(value: Any) -> str:
    """Render a value as JSON indented by two spaces."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=_json_default)
"""JSON schema types of tool parameters, derived from Python annotations."""

from __future__ import annotations

import collections.abc
import types
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Union, get_args, get_origin

_NONE_TYPE = type(None)

_ARRAY_ORIGINS = (
    list,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
)

_SCALAR_TYPES: dict[Any, str] = {
    bool: "boolean",
    int: "integer",
    float: "number",
    str: "string",
}

_SCALAR_NAMES = {
    "bool": "boolean",
    "int": "integer",
    "float": "number",
    "str": "string",
    "None": "null",
}


class ParameterKind(str, Enum):
    """The kind of a tool parameter."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OPTION = "option"
    OBJECT = "object"

    def __str__(self) -> str:
        return self.value


_CONTAINER_KINDS = (ParameterKind.ARRAY, ParameterKind.OPTION)


@dataclass(frozen=True)
class ParameterType:
    """The type of a tool parameter.

    ``inner`` is the element type of an array or the wrapped type of an
    option, and is ``None`` for every other kind.
    """

    kind: ParameterKind = ParameterKind.NULL
    inner: ParameterType | None = None

    def __post_init__(self) -> None:
        if self.kind in _CONTAINER_KINDS:
            if self.inner is None:
                raise ValueError(f"{self.kind} parameter type needs an inner type")
        elif self.inner is not None:
            raise ValueError(f"{self.kind} parameter type takes no inner type")

    def __str__(self) -> str:
        if self.kind is ParameterKind.ARRAY:
            return f"array of {self.inner}"
        if self.kind is ParameterKind.OPTION:
            return f"option of {self.inner}"
        return self.kind.value

    @classmethod
    def from_annotation(cls, annotation: Any) -> ParameterType:
        """Derive the parameter type from a type annotation."""
        if annotation is None or annotation is _NONE_TYPE:
            return cls(ParameterKind.NULL)

        if isinstance(annotation, str):
            name = _SCALAR_NAMES.get(annotation.strip())
            return cls(ParameterKind(name)) if name else cls(ParameterKind.OBJECT)

        origin = get_origin(annotation)
        args = get_args(annotation)

        if origin is Annotated:
            return cls.from_annotation(args[0])

        if origin is Union or origin is types.UnionType:
            present = [arg for arg in args if arg is not _NONE_TYPE]
            if len(present) == len(args):
                return cls(ParameterKind.OBJECT)
            if len(present) == 1:
                inner = cls.from_annotation(present[0])
            else:
                inner = cls(ParameterKind.OBJECT)
            return cls(ParameterKind.OPTION, inner)

        if origin in _ARRAY_ORIGINS or annotation in _ARRAY_ORIGINS:
            element = cls.from_annotation(args[0]) if args else cls(ParameterKind.OBJECT)
            return cls(ParameterKind.ARRAY, element)

        if origin is tuple:
            if len(args) == 2 and args[1] is Ellipsis:
                return cls(ParameterKind.ARRAY, cls.from_annotation(args[0]))
            return cls(ParameterKind.OBJECT)

        try:
            name = _SCALAR_TYPES.get(annotation)
        except TypeError:
            name = None
        if name is not None:
            return cls(ParameterKind(name))
        return cls(ParameterKind.OBJECT)

    def to_primitive_type(self) -> str:
        """Return the JSON schema type name; an option reports its inner type."""
        if self.kind is ParameterKind.OPTION:
            assert self.inner is not None
            return self.inner.to_primitive_type()
        return self.kind.value

    def optional(self) -> bool:
        """Whether the parameter may be left out."""
        return self.kind is ParameterKind.OPTION
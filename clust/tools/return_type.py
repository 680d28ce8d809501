"""Classification of a tool function's return annotation."""

from __future__ import annotations

import inspect
import types
from enum import Enum
from typing import Annotated, Any, Union, get_args, get_origin

_NONE_TYPE = type(None)


def _is_exception_type(value: Any) -> bool:
    return isinstance(value, type) and issubclass(value, BaseException)


class ReturnType(str, Enum):
    """What a tool function gives back.

    ``NONE``: declared ``-> None``.
    ``RESULT``: a value or an exception instance, e.g. ``-> int | ValueError``.
    ``VALUE``: anything else, including a missing annotation.
    """

    VALUE = "value"
    RESULT = "result"
    NONE = "none"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_annotation(cls, annotation: Any) -> ReturnType:
        """Classify a return annotation."""
        if annotation is inspect.Signature.empty:
            return cls.VALUE
        if annotation is None or annotation is _NONE_TYPE:
            return cls.NONE
        if isinstance(annotation, str):
            return cls.NONE if annotation.strip() == "None" else cls.VALUE

        origin = get_origin(annotation)
        if origin is Annotated:
            return cls.from_annotation(get_args(annotation)[0])
        if origin is Union or origin is types.UnionType:
            if any(_is_exception_type(arg) for arg in get_args(annotation)):
                return cls.RESULT
            return cls.VALUE
        if _is_exception_type(annotation):
            return cls.RESULT
        return cls.VALUE
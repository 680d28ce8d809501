"""Tool information gathered from a Python function and its docstring.

The docstring format understood here is:

1. A description block at the top.
2. An optional arguments block, opened by a ``# Arguments``,
   ``## Arguments``, ``# Parameters`` or ``## Parameters`` header and made
   of items ``- `name` - description`` (or with ``*`` bullets).
3. Anything after the arguments block is ignored.
"""

from __future__ import annotations

import inspect
import typing
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from clust.tools.parameter_type import ParameterKind, ParameterType

_PARAMETER_HEADERS = ("# Arguments", "## Arguments", "# Parameters", "## Parameters")
_BULLETS = ("- ", "* ")
_SEPARATOR = " - "


@dataclass
class DocComments:
    """The description and parameter descriptions found in a docstring."""

    description: str | None = None
    parameters: dict[str, str] = field(default_factory=dict)


@dataclass
class Parameter:
    """A parameter of a tool function."""

    name: str
    type_: ParameterType
    description: str | None = None


@dataclass
class ToolInformation:
    """Everything needed to describe a function as a tool."""

    name: str
    description: str | None = None
    parameters: list[Parameter] = field(default_factory=list)

    def build_json_schema(self) -> dict[str, Any]:
        """Build the JSON schema of the tool's input, with keys in sorted order."""
        properties: dict[str, Any] = {}
        for parameter in sorted(self.parameters, key=lambda p: p.name):
            prop: dict[str, Any] = {}
            if parameter.description is not None:
                prop["description"] = parameter.description
            if parameter.type_.kind is ParameterKind.ARRAY:
                assert parameter.type_.inner is not None
                prop["items"] = {"type": parameter.type_.inner.to_primitive_type()}
            prop["type"] = parameter.type_.to_primitive_type()
            properties[parameter.name] = prop

        schema: dict[str, Any] = {}
        if self.description is not None:
            schema["description"] = self.description
        schema["properties"] = properties
        schema["required"] = [
            parameter.name
            for parameter in self.parameters
            if not parameter.type_.optional()
        ]
        schema["type"] = "object"
        return schema


class _BlockState(Enum):
    DESCRIPTION = "description"
    PARAMETERS_HEADER = "parameters_header"
    PARAMETERS = "parameters"
    OTHERWISE = "otherwise"

    def next(self, line: str) -> _BlockState:
        if self is _BlockState.DESCRIPTION:
            if line.startswith(_PARAMETER_HEADERS):
                return _BlockState.PARAMETERS_HEADER
            return _BlockState.DESCRIPTION
        if self in (_BlockState.PARAMETERS_HEADER, _BlockState.PARAMETERS):
            if line.startswith(_BULLETS):
                return _BlockState.PARAMETERS
            return _BlockState.OTHERWISE
        return _BlockState.OTHERWISE


def _trim_prefix(text: str, prefix: str) -> str:
    while text.startswith(prefix):
        text = text[len(prefix):]
    return text


def get_doc_lines(func: Callable[..., Any]) -> list[str]:
    """Return the docstring of ``func`` as lines with leading spaces removed."""
    doc = inspect.getdoc(func)
    if not doc:
        return []
    return [line.lstrip(" ") for line in doc.split("\n")]


def _parse_parameter_line(line: str) -> tuple[str, str]:
    body = _trim_prefix(_trim_prefix(line, "- "), "* ")
    position = body.find(_SEPARATOR)
    if position < 0:
        raise ValueError(
            "Parameter description must be in the format "
            f"`'<name>' - <description>`: {line!r}"
        )
    name = body[:position].replace("`", "")
    description = _trim_prefix(body[position:], _SEPARATOR)
    return name, description


def parse_doc_comments(lines: typing.Iterable[str]) -> DocComments:
    """Split docstring lines into a description and parameter descriptions.

    Raises :class:`ValueError` for a parameter item without `` - ``.
    """
    description = ""
    parameters: dict[str, str] = {}
    state = _BlockState.DESCRIPTION

    for line in lines:
        state = state.next(line)
        if state is _BlockState.DESCRIPTION:
            description += line
        elif state is _BlockState.PARAMETERS:
            name, text = _parse_parameter_line(line)
            parameters[name] = text
        elif state is _BlockState.OTHERWISE:
            break

    return DocComments(description or None, parameters)


def _parameter_types(func: Callable[..., Any]) -> list[tuple[str, ParameterType]]:
    target = inspect.unwrap(func)
    code = getattr(target, "__code__", None)
    if code is None:
        raise TypeError(f"a tool can only be made from a Python function, got {func!r}")
    if code.co_flags & (inspect.CO_VARARGS | inspect.CO_VARKEYWORDS):
        raise TypeError(
            "a tool can only be made from a function with named parameters, "
            f"got {target.__name__}"
        )

    names = list(code.co_varnames[: code.co_argcount + code.co_kwonlyargcount])
    if inspect.ismethod(target) and names:
        names = names[1:]

    hints = dict(getattr(target, "__annotations__", None) or {})
    return [
        (name, ParameterType.from_annotation(hints.get(name, inspect.Parameter.empty)))
        for name in names
    ]


def get_tool_information(func: Callable[..., Any]) -> ToolInformation:
    """Collect the name, description and parameters of ``func``."""
    docs = parse_doc_comments(get_doc_lines(func))
    parameters = [
        Parameter(name, type_, docs.parameters.get(name))
        for name, type_ in _parameter_types(func)
    ]
    return ToolInformation(func.__name__, docs.description, parameters)
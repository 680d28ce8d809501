"""Errors raised while validating requests and calling the API.

- Validation of a request: :class:`ValidationError`
- Failure of the client while calling the API: :class:`ClientError`
- Error reported by the API server: :class:`ApiError`
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Any, Mapping


def _format_status(status: int) -> str:
    try:
        phrase = HTTPStatus(status).phrase
    except ValueError:
        phrase = "<unknown status code>"
    return f"{int(status)} {phrase}"


class ValidationError(ValueError):
    """A value failed validation."""

    def __init__(self, type_: str, expected: str, actual: Any) -> None:
        self.type_ = type_
        self.expected = expected
        self.actual = actual
        super().__init__(type_, expected, actual)

    def __str__(self) -> str:
        return (
            f"Validation error: ({self.type_}) {self.expected}, "
            f"actual value: {self.actual}"
        )


class ClientError(Exception):
    """A failure of the client while calling the API."""


class HttpRequestError(ClientError):
    """Sending the HTTP request failed."""

    def __init__(self, error: BaseException) -> None:
        self.error = error
        super().__init__(error)

    def __str__(self) -> str:
        return f"HTTP request error: {self.error!r}"


class ReadResponseTextFailed(ClientError):
    """Reading the response text failed."""

    def __init__(self, error: BaseException) -> None:
        self.error = error
        super().__init__(error)

    def __str__(self) -> str:
        return f"Reading response text failed: {self.error!r}"


class ResponseDeserializationFailed(ClientError):
    """The response body could not be decoded as JSON."""

    def __init__(self, error: BaseException, text: str) -> None:
        self.error = error
        self.text = text
        super().__init__(error, text)

    def __str__(self) -> str:
        return f"Failed to deserialize response as JSON: {self.error!r}, {self.text!r}"


class ErrorResponseDeserializationFailed(ClientError):
    """The error response body could not be decoded as JSON."""

    def __init__(self, error: BaseException, text: str) -> None:
        self.error = error
        self.text = text
        super().__init__(error, text)

    def __str__(self) -> str:
        return (
            f"Failed to deserialize error response as JSON: "
            f"{self.error!r}, {self.text!r}"
        )


def _require_str(data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class ApiErrorBody:
    """The error body of an API error response."""

    type_: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type_, "message": self.message}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ApiErrorBody:
        if not isinstance(data, Mapping):
            raise ValueError(f"expected an object, got {data!r}")
        return cls(_require_str(data, "type"), _require_str(data, "message"))

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class ApiErrorResponse:
    """The response body of an API error."""

    type_: str
    error: ApiErrorBody

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type_, "error": self.error.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ApiErrorResponse:
        if not isinstance(data, Mapping):
            raise ValueError(f"expected an object, got {data!r}")
        type_ = _require_str(data, "type")
        if "error" not in data:
            raise ValueError("missing field `error`")
        return cls(type_, ApiErrorBody.from_dict(data["error"]))

    @classmethod
    def from_json(cls, text: str) -> ApiErrorResponse:
        """Decode an error response body.

        Raises :class:`ErrorResponseDeserializationFailed` on malformed input.
        """
        try:
            return cls.from_dict(json.loads(text))
        except ValueError as error:
            raise ErrorResponseDeserializationFailed(error, text) from error

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


class ApiErrorType(str, Enum):
    """The kind of an API error, derived from the HTTP status."""

    INVALID_REQUEST_ERROR = "invalid_request_error"
    AUTHENTICATION_ERROR = "authentication_error"
    PERMISSION_ERROR = "permission_error"
    NOT_FOUND_ERROR = "not_found_error"
    RATE_LIMIT_ERROR = "rate_limit_error"
    API_ERROR = "api_error"
    OVERLOADED_ERROR = "overloaded_error"
    UNKNOWN = "unknown_error"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_status(cls, status: int) -> ApiErrorType:
        return _STATUS_TO_TYPE.get(int(status), cls.UNKNOWN)


_STATUS_TO_TYPE = {
    400: ApiErrorType.INVALID_REQUEST_ERROR,
    401: ApiErrorType.AUTHENTICATION_ERROR,
    403: ApiErrorType.PERMISSION_ERROR,
    404: ApiErrorType.NOT_FOUND_ERROR,
    429: ApiErrorType.RATE_LIMIT_ERROR,
    500: ApiErrorType.API_ERROR,
    529: ApiErrorType.OVERLOADED_ERROR,
}


class ApiError(Exception):
    """An error reported by the API server."""

    def __init__(self, status: int, response: ApiErrorResponse) -> None:
        self.status = int(status)
        self.type_ = ApiErrorType.from_status(self.status)
        self.response = response
        super().__init__(self.status, response)

    def __str__(self) -> str:
        status = _format_status(self.status)
        if self.type_ is ApiErrorType.UNKNOWN:
            kind = f"unknown_error({status})"
        else:
            kind = str(self.type_)
        return f"API error: ({status}) {kind}: {self.response}"
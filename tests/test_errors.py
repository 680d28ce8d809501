import json

import pytest

from clust.errors import (
    ApiError,
    ApiErrorBody,
    ApiErrorResponse,
    ApiErrorType,
    ClientError,
    ErrorResponseDeserializationFailed,
    HttpRequestError,
    ReadResponseTextFailed,
    ResponseDeserializationFailed,
    ValidationError,
)


def _response():
    return ApiErrorResponse("error", ApiErrorBody("invalid_request_error", "bad"))


def test_validation_error_message():
    error = ValidationError("MaxTokens", "must be <= 4096", 5000)
    assert str(error) == "Validation error: (MaxTokens) must be <= 4096, actual value: 5000"
    assert error.actual == 5000


def test_validation_error_fields():
    error = ValidationError("TopP", "in range", 2.0)
    assert (error.type_, error.expected, error.actual) == ("TopP", "in range", 2.0)
    assert isinstance(error, Exception)


@pytest.mark.parametrize(
    "cls",
    [HttpRequestError, ReadResponseTextFailed],
)
def test_single_cause_client_errors(cls):
    cause = OSError("boom")
    error = cls(cause)
    assert isinstance(error, ClientError)
    assert error.error is cause
    assert repr(cause) in str(error)


@pytest.mark.parametrize(
    "cls",
    [ResponseDeserializationFailed, ErrorResponseDeserializationFailed],
)
def test_deserialization_client_errors(cls):
    cause = ValueError("bad json")
    error = cls(cause, "not json")
    assert isinstance(error, ClientError)
    assert error.text == "not json"
    assert repr("not json") in str(error)


def test_error_body_round_trip():
    body = ApiErrorBody("rate_limit_error", "slow down")
    assert ApiErrorBody.from_dict(body.to_dict()) == body


def test_error_response_round_trip():
    response = _response()
    assert ApiErrorResponse.from_dict(response.to_dict()) == response


def test_error_response_display_is_pretty_json():
    response = _response()
    assert str(response) == (
        '{\n  "type": "error",\n  "error": {\n'
        '    "type": "invalid_request_error",\n    "message": "bad"\n  }\n}'
    )
    assert json.loads(str(response)) == response.to_dict()


def test_error_response_from_json():
    text = json.dumps(_response().to_dict())
    assert ApiErrorResponse.from_json(text) == _response()


@pytest.mark.parametrize(
    "text",
    ["not json", "{}", '{"type": "error"}', '{"type": "error", "error": {"type": 1}}'],
)
def test_error_response_from_json_invalid(text):
    with pytest.raises(ErrorResponseDeserializationFailed) as info:
        ApiErrorResponse.from_json(text)
    assert info.value.text == text


@pytest.mark.parametrize(
    "status, expected",
    [
        (400, ApiErrorType.INVALID_REQUEST_ERROR),
        (401, ApiErrorType.AUTHENTICATION_ERROR),
        (403, ApiErrorType.PERMISSION_ERROR),
        (404, ApiErrorType.NOT_FOUND_ERROR),
        (429, ApiErrorType.RATE_LIMIT_ERROR),
        (500, ApiErrorType.API_ERROR),
        (529, ApiErrorType.OVERLOADED_ERROR),
        (418, ApiErrorType.UNKNOWN),
    ],
)
def test_error_type_from_status(status, expected):
    assert ApiErrorType.from_status(status) is expected


def test_error_type_display():
    assert str(ApiErrorType.from_status(529)) == "overloaded_error"
    assert str(ApiErrorType.from_status(400)) == "invalid_request_error"


def test_api_error_fields_and_message():
    response = _response()
    error = ApiError(400, response)
    assert error.status == 400
    assert error.type_ is ApiErrorType.INVALID_REQUEST_ERROR
    assert error.response == response
    assert str(error) == f"API error: (400 Bad Request) invalid_request_error: {response}"


def test_api_error_unknown_status_message():
    error = ApiError(418, _response())
    assert error.type_ is ApiErrorType.UNKNOWN
    assert "unknown_error(418" in str(error)


def test_api_error_overloaded_message():
    error = ApiError(529, _response())
    assert error.type_ is ApiErrorType.OVERLOADED_ERROR
    assert "overloaded_error" in str(error)
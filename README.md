# clust

Building blocks for working with the Claude Messages API from Python. The
package has no runtime dependencies.

- `clust.models` — `ClaudeModel`, the known model names and their token limits.
- `clust.api_key` — `ApiKey`, read from the `ANTHROPIC_API_KEY` environment variable.
- `clust.beta` — `Beta`, beta feature flags such as `tools-2024-04-04`.
- `clust.errors` — validation, client and API errors, and the API error
  response body.
- `clust.serialization` — small codecs between Python values and JSON data,
  and `to_pretty_json`.
- `clust.chunk_stream` — splitting a streamed response body into
  server-sent events.
- `clust.tools` — JSON schema types and input schemas derived from
  documented Python functions.

## Installation

```
pip install clust
```

For running the tests:

```
pip install "clust[test]"
pytest
```

## Models, keys and beta flags

```python
from clust.api_key import ApiKey
from clust.beta import Beta
from clust.models import ClaudeModel

model = ClaudeModel.default()      # claude-3-sonnet-20240229
print(str(model), model.max_tokens())   # every known model allows 4096

key = ApiKey.from_env()            # reads ANTHROPIC_API_KEY
print(str(Beta.default()))         # tools-2024-04-04
```

`ApiKey.from_env()` raises `KeyError` when the variable is not set. The
key's `repr` does not show its value.

## Errors

```python
from clust.errors import ApiError, ApiErrorResponse, ApiErrorType

kind = ApiErrorType.from_status(529)   # ApiErrorType.OVERLOADED_ERROR
response = ApiErrorResponse.from_json(
    '{"type": "error", "error": {"type": "invalid_request_error", "message": "bad"}}'
)
error = ApiError(400, response)
print(error.type_)                     # invalid_request_error
```

Statuses 400, 401, 403, 404, 429, 500 and 529 map to their documented error
types; any other status maps to `ApiErrorType.UNKNOWN`, and `str(ApiError)`
then shows `unknown_error(<status>)`. `ApiErrorResponse.from_json` raises
`ErrorResponseDeserializationFailed` on malformed input.

The client error classes `HttpRequestError`, `ReadResponseTextFailed`,
`ResponseDeserializationFailed` and `ErrorResponseDeserializationFailed` all
derive from `ClientError`. `ValidationError` is a `ValueError` carrying the
checked type, the expectation and the actual value.

## JSON codecs

`clust.serialization` offers four codecs, each with `encode(value)` and
`decode(data)`:

- `StringEnumCodec(mapping, name)` — members as fixed strings.
- `TaggedUnionCodec(tag_field, variants)` — record types told apart by a tag.
- `BoolEnumCodec(true_value, false_value)` — a two-valued choice as a boolean.
- `StringOrArrayCodec(item_type=None)` — a single string or a list of items.

Decoding data of the wrong shape raises `ValueError`; encoding an unknown
value raises `TypeError`. `to_pretty_json(value)` renders JSON indented by
two spaces.

## Streamed events

`iter_chunks` takes any iterable of `bytes` pieces as they arrive and yields
one `ServerSentEvent` per event, holding the event name (`event`) and the
decoded JSON `data`; its `type` property gives the data's `type` field.
`aiter_chunks` does the same for an asynchronous iterable.

```python
from clust.chunk_stream import iter_chunks

for event in iter_chunks(response_body_pieces):
    print(event.type, event.data)
```

For finer control, feed a `ChunkBuffer` with `feed(data)`, which returns the
events completed so far, and call `finish()` once the input has ended.
Input that is not UTF-8, has no data line, is not JSON, or whose event name
disagrees with its data's `type` raises `ChunkDecodingError`.

## Tool schemas from functions

`clust.tools.schema.get_tool_information` reads a function's name,
signature and docstring. The docstring's first block is the description; an
`Arguments` (or `Parameters`) header followed by ``- `name` - text`` items
gives the parameter descriptions.

```python
from clust.tools.schema import get_tool_information


def get_weather(location: str, days: int | None = None) -> str:
    """Get the current weather in a given location

    ## Arguments
    - `location` - The city and state, e.g. San Francisco, CA
    - `days` - How many days ahead
    """
    return "15 degrees"


info = get_tool_information(get_weather)
print(info.build_json_schema())
```

Parameters annotated as optional are left out of `required`. Annotations map
through `ParameterType.from_annotation` (`bool`, `int`, `float`, `str`,
lists and other sequences, optionals; anything else is `object`), and
`ReturnType.from_annotation` tells a `None` return, a value, or a result
that may be an exception apart. A parameter item without ` - ` raises
`ValueError`; a function with `*args` or `**kwargs` raises `TypeError`.

## What the package does not do

It sends no HTTP requests: there is no client object that posts a message
or opens a stream. It does not call tools either: the schema module
describes a function's input, but there is no object that checks a tool
use's name, reads its arguments and runs the function. Those are left to
the code that uses these building blocks.
"""JSON-RPC 2.0 envelopes: requests, notifications and responses.

Incoming values are classified by :func:`parse_message`:

* ``id`` and ``method`` present: :class:`JsonRpcRequest`
* ``method`` without ``id``: :class:`JsonRpcNotification`
* ``error`` without ``method``: :class:`JsonRpcErrorResponse`
* ``result`` without ``method``: :class:`JsonRpcSuccessResponse`

A response is one of two classes rather than one class with two optional
members, so a response carrying both ``result`` and ``error`` (or neither)
cannot be constructed.
"""

from __future__ import annotations

import copy
import json
from typing import Any, Literal, Union

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationError

from mcp_types.base import WireModel
from mcp_types.errors import (
    MalformedEnvelopeError,
    McpError,
    McpProtocolError,
    MessageParseError,
    first_problem,
    validation_details,
)

JSONRPC_VERSION = "2.0"

RequestId = Union[StrictInt, StrictStr]
Params = Union[dict[str, Any], list[Any]]


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    return value


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


class JsonRpcRequest(WireModel):
    """A request that expects a correlated response."""

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: RequestId
    method: str = Field(min_length=1)
    params: Params | None = None

    @classmethod
    def new(
        cls, id: RequestId, method: str, params: BaseModel | Params | None = None
    ) -> JsonRpcRequest:
        """Build a request; model params are dumped with wire field names."""
        return cls(id=id, method=method, params=_dump(params))


class JsonRpcNotification(WireModel):
    """A one-way message; it is never answered."""

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    method: str = Field(min_length=1)
    params: Params | None = None

    @classmethod
    def new(cls, method: str, params: BaseModel | Params | None = None) -> JsonRpcNotification:
        return cls(method=method, params=_dump(params))


class JsonRpcSuccessResponse(WireModel):
    """A response carrying a ``result``."""

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: RequestId
    result: Any

    @property
    def is_error(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Return the result payload."""
        return self.result


class JsonRpcErrorResponse(WireModel):
    """A response carrying an ``error``.

    ``id`` is ``None`` only when the request id could not be determined,
    e.g. when the request text was not valid JSON.
    """

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: RequestId | None
    error: McpError

    @property
    def is_error(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Raise the carried error as :class:`McpProtocolError`."""
        raise McpProtocolError(self.error)


JsonRpcResponse = Union[JsonRpcSuccessResponse, JsonRpcErrorResponse]
JsonRpcMessage = Union[
    JsonRpcRequest, JsonRpcNotification, JsonRpcSuccessResponse, JsonRpcErrorResponse
]


class CancelledNotification(WireModel):
    """Params of ``notifications/cancelled``."""

    request_id: RequestId = Field(alias="requestId")
    reason: str | None = None


# ---------------------------------------------------------------------------
# Response construction
# ---------------------------------------------------------------------------


def success_response(id: RequestId, result: Any) -> JsonRpcSuccessResponse:
    """Answer the request *id* with *result* (a model or a plain JSON value)."""
    return JsonRpcSuccessResponse(id=id, result=_dump(result))


def error_response(
    id: RequestId | None, error: McpError | McpProtocolError
) -> JsonRpcErrorResponse:
    """Answer the request *id* with *error*."""
    if isinstance(error, McpProtocolError):
        error = error.error
    return JsonRpcErrorResponse(id=id, error=error)


# ---------------------------------------------------------------------------
# Discrimination and codec
# ---------------------------------------------------------------------------

_MESSAGE_TYPES: dict[str, type[WireModel]] = {
    "request": JsonRpcRequest,
    "notification": JsonRpcNotification,
    "result": JsonRpcSuccessResponse,
    "error": JsonRpcErrorResponse,
}


def message_kind(raw: Any) -> Literal["request", "notification", "result", "error"]:
    """Classify a decoded JSON value without validating it."""
    if not isinstance(raw, dict):
        msg = f"expected a JSON object, got {type(raw).__name__}"
        raise MalformedEnvelopeError(msg)
    if raw.get("jsonrpc") != JSONRPC_VERSION:
        msg = f"'jsonrpc' must be \"{JSONRPC_VERSION}\""
        raise MalformedEnvelopeError(msg)
    if "method" in raw:
        return "request" if "id" in raw else "notification"
    has_result = "result" in raw
    has_error = "error" in raw
    if has_result and has_error:
        msg = "response carries both 'result' and 'error'"
        raise MalformedEnvelopeError(msg)
    if has_error:
        return "error"
    if has_result:
        return "result"
    msg = "no 'method', 'result' or 'error' member"
    raise MalformedEnvelopeError(msg)


def parse_message(raw: Any) -> JsonRpcMessage:
    """Validate a decoded JSON value into the matching envelope class.

    The returned message never shares containers with *raw*.
    """
    kind = message_kind(raw)
    try:
        return _MESSAGE_TYPES[kind].model_validate(copy.deepcopy(raw))  # type: ignore[return-value]
    except ValidationError as exc:
        raise MalformedEnvelopeError(first_problem(exc), data=validation_details(exc)) from exc


def decode_message(data: str | bytes) -> JsonRpcMessage:
    """Parse one JSON-RPC message from JSON text."""
    try:
        raw = json.loads(data)
    except ValueError as exc:
        raise MessageParseError(str(exc)) from exc
    return parse_message(raw)


def encode_message(message: JsonRpcMessage) -> str:
    """Serialize an envelope to compact JSON text."""
    return message.to_json()

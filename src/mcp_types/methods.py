"""Method catalogue: which params and result model each protocol method carries.

Envelope discrimination (:func:`mcp_types.jsonrpc.parse_message`) yields an
untyped ``params`` or ``result``; :func:`parse_params` and
:func:`parse_result` turn them into the models of this package.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from mcp_types.base import EmptyResult
from mcp_types.capabilities import InitializeParams, InitializeResult
from mcp_types.errors import (
    InvalidParamsError,
    InvalidResultError,
    MalformedEnvelopeError,
    UnknownMethodError,
    first_problem,
    validation_details,
)
from mcp_types.jsonrpc import CancelledNotification, JsonRpcNotification, JsonRpcRequest, JsonRpcResponse
from mcp_types.logs import LogEntry, SetLoggingLevelRequest
from mcp_types.prompts import GetPromptRequest, GetPromptResult, ListPromptsRequest, ListPromptsResult
from mcp_types.resources import (
    ListResourcesRequest,
    ListResourcesResult,
    ListResourceTemplatesRequest,
    ListResourceTemplatesResult,
    ReadResourceRequest,
    ReadResourceResult,
    ResourceUpdatedNotification,
    SubscribeRequest,
    UnsubscribeRequest,
)
from mcp_types.sampling import CreateMessageRequest, CreateMessageResult
from mcp_types.tools import CallToolRequest, CallToolResult, ListToolsRequest, ListToolsResult

INITIALIZE = "initialize"
PING = "ping"
TOOLS_LIST = "tools/list"
TOOLS_CALL = "tools/call"
RESOURCES_LIST = "resources/list"
RESOURCES_TEMPLATES_LIST = "resources/templates/list"
RESOURCES_READ = "resources/read"
RESOURCES_SUBSCRIBE = "resources/subscribe"
RESOURCES_UNSUBSCRIBE = "resources/unsubscribe"
PROMPTS_LIST = "prompts/list"
PROMPTS_GET = "prompts/get"
LOGGING_SET_LEVEL = "logging/setLevel"
SAMPLING_CREATE_MESSAGE = "sampling/createMessage"

NOTIFICATION_INITIALIZED = "notifications/initialized"
NOTIFICATION_CANCELLED = "notifications/cancelled"
NOTIFICATION_MESSAGE = "notifications/message"
NOTIFICATION_RESOURCE_UPDATED = "notifications/resources/updated"
NOTIFICATION_RESOURCES_LIST_CHANGED = "notifications/resources/list_changed"
NOTIFICATION_TOOLS_LIST_CHANGED = "notifications/tools/list_changed"
NOTIFICATION_PROMPTS_LIST_CHANGED = "notifications/prompts/list_changed"


@dataclass(frozen=True)
class MethodSpec:
    """Shape of one method.

    ``capability`` names the feature (server-side for tools, resources,
    prompts and logging; client-side for sampling) that must be declared
    before the method may be used.
    """

    name: str
    params: type[BaseModel] | None = None
    result: type[BaseModel] | None = None
    notification: bool = False
    capability: str | None = None


METHODS: dict[str, MethodSpec] = {
    spec.name: spec
    for spec in (
        MethodSpec(INITIALIZE, InitializeParams, InitializeResult),
        MethodSpec(PING, None, EmptyResult),
        MethodSpec(TOOLS_LIST, ListToolsRequest, ListToolsResult, capability="tools"),
        MethodSpec(TOOLS_CALL, CallToolRequest, CallToolResult, capability="tools"),
        MethodSpec(RESOURCES_LIST, ListResourcesRequest, ListResourcesResult, capability="resources"),
        MethodSpec(
            RESOURCES_TEMPLATES_LIST,
            ListResourceTemplatesRequest,
            ListResourceTemplatesResult,
            capability="resources",
        ),
        MethodSpec(RESOURCES_READ, ReadResourceRequest, ReadResourceResult, capability="resources"),
        MethodSpec(RESOURCES_SUBSCRIBE, SubscribeRequest, EmptyResult, capability="resources"),
        MethodSpec(RESOURCES_UNSUBSCRIBE, UnsubscribeRequest, EmptyResult, capability="resources"),
        MethodSpec(PROMPTS_LIST, ListPromptsRequest, ListPromptsResult, capability="prompts"),
        MethodSpec(PROMPTS_GET, GetPromptRequest, GetPromptResult, capability="prompts"),
        MethodSpec(
            SAMPLING_CREATE_MESSAGE,
            CreateMessageRequest,
            CreateMessageResult,
            capability="sampling",
        ),
        MethodSpec(
            LOGGING_SET_LEVEL, SetLoggingLevelRequest, notification=True, capability="logging"
        ),
        MethodSpec(NOTIFICATION_INITIALIZED, notification=True),
        MethodSpec(NOTIFICATION_CANCELLED, CancelledNotification, notification=True),
        MethodSpec(NOTIFICATION_MESSAGE, LogEntry, notification=True, capability="logging"),
        MethodSpec(
            NOTIFICATION_RESOURCE_UPDATED,
            ResourceUpdatedNotification,
            notification=True,
            capability="resources",
        ),
        MethodSpec(NOTIFICATION_RESOURCES_LIST_CHANGED, notification=True, capability="resources"),
        MethodSpec(NOTIFICATION_TOOLS_LIST_CHANGED, notification=True, capability="tools"),
        MethodSpec(NOTIFICATION_PROMPTS_LIST_CHANGED, notification=True, capability="prompts"),
    )
}


def get_method(method: str) -> MethodSpec:
    spec = METHODS.get(method)
    if spec is None:
        raise UnknownMethodError(method)
    return spec


def is_notification_method(method: str) -> bool:
    """True if *method* is sent without an id and never answered."""
    return get_method(method).notification


def required_capability(method: str) -> str | None:
    return get_method(method).capability


def parse_params(message: JsonRpcRequest | JsonRpcNotification) -> BaseModel | None:
    """Validate the params of *message* against its method.

    Returns ``None`` for methods that take no params.
    """
    spec = get_method(message.method)
    is_notification = isinstance(message, JsonRpcNotification)
    if spec.notification and not is_notification:
        msg = f"'{spec.name}' is a notification and must not carry an id"
        raise MalformedEnvelopeError(msg)
    if is_notification and not spec.notification:
        msg = f"'{spec.name}' is a request and needs an id"
        raise MalformedEnvelopeError(msg)

    if spec.params is None:
        return None
    raw: Any = message.params if message.params is not None else {}
    if not isinstance(raw, dict):
        msg = f"Invalid params for {spec.name}: expected an object"
        raise InvalidParamsError(msg)
    try:
        return spec.params.model_validate(raw)
    except ValidationError as exc:
        msg = f"Invalid params for {spec.name}: {first_problem(exc)}"
        raise InvalidParamsError(msg, data=validation_details(exc)) from exc


def parse_result(method: str, response: JsonRpcResponse) -> BaseModel:
    """Validate the result of *response* against *method*.

    Error responses are raised as :class:`~mcp_types.errors.McpProtocolError`.
    """
    spec = get_method(method)
    if spec.result is None:
        msg = f"'{method}' is a notification and has no result"
        raise MalformedEnvelopeError(msg)
    result = response.unwrap()
    try:
        return spec.result.model_validate(result if result is not None else {})
    except ValidationError as exc:
        raise InvalidResultError(method, data=validation_details(exc)) from exc

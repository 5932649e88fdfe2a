"""MCP protocol types: JSON-RPC envelopes, error codes, capabilities and domain entities."""

from mcp_types.base import EmptyResult, PaginatedRequest, PaginatedResult, WireModel
from mcp_types.capabilities import (
    LATEST_PROTOCOL_VERSION,
    SUPPORTED_PROTOCOL_VERSIONS,
    ClientCapabilities,
    Implementation,
    InitializeParams,
    InitializeResult,
    LoggingCapability,
    PromptsCapability,
    ResourcesCapability,
    RootsCapability,
    SamplingCapability,
    ServerCapabilities,
    ToolsCapability,
)
from mcp_types.content import (
    ContentBlock,
    EmbeddedResource,
    ImageContent,
    Role,
    TextContent,
    UnknownContent,
    require_all_supported,
    require_supported,
)
from mcp_types.errors import (
    ErrorCode,
    InvalidParamsError,
    InvalidResultError,
    MalformedEnvelopeError,
    McpError,
    McpProtocolError,
    MessageParseError,
    MissingRequiredArgumentError,
    UnknownMethodError,
    UnsupportedContentKindError,
)
from mcp_types.jsonrpc import (
    JSONRPC_VERSION,
    CancelledNotification,
    JsonRpcErrorResponse,
    JsonRpcMessage,
    JsonRpcNotification,
    JsonRpcRequest,
    JsonRpcResponse,
    JsonRpcSuccessResponse,
    RequestId,
    decode_message,
    encode_message,
    error_response,
    parse_message,
    success_response,
)
from mcp_types.logs import LogEntry, LoggingLevel, SetLoggingLevelRequest
from mcp_types.methods import METHODS, MethodSpec, parse_params, parse_result
from mcp_types.prompts import (
    GetPromptRequest,
    GetPromptResult,
    ListPromptsRequest,
    ListPromptsResult,
    Prompt,
    PromptArgument,
    PromptMessage,
    PromptRole,
)
from mcp_types.resources import (
    BlobResourceContents,
    ListResourcesRequest,
    ListResourcesResult,
    ListResourceTemplatesRequest,
    ListResourceTemplatesResult,
    ReadResourceRequest,
    ReadResourceResult,
    Resource,
    ResourceContents,
    ResourceTemplate,
    ResourceUpdatedNotification,
    SubscribeRequest,
    TextResourceContents,
    UnsubscribeRequest,
)
from mcp_types.sampling import (
    CreateMessageRequest,
    CreateMessageResult,
    ModelHint,
    ModelPreferences,
    SamplingMessage,
)
from mcp_types.tools import (
    CallToolRequest,
    CallToolResult,
    ListToolsRequest,
    ListToolsResult,
    Tool,
    ToolInputSchema,
)

__version__ = "0.1.0"

__all__ = [
    "JSONRPC_VERSION",
    "LATEST_PROTOCOL_VERSION",
    "SUPPORTED_PROTOCOL_VERSIONS",
    "METHODS",
    "BlobResourceContents",
    "CallToolRequest",
    "CallToolResult",
    "CancelledNotification",
    "ClientCapabilities",
    "ContentBlock",
    "CreateMessageRequest",
    "CreateMessageResult",
    "EmbeddedResource",
    "EmptyResult",
    "ErrorCode",
    "GetPromptRequest",
    "GetPromptResult",
    "ImageContent",
    "Implementation",
    "InitializeParams",
    "InitializeResult",
    "InvalidParamsError",
    "InvalidResultError",
    "JsonRpcErrorResponse",
    "JsonRpcMessage",
    "JsonRpcNotification",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcSuccessResponse",
    "ListPromptsRequest",
    "ListPromptsResult",
    "ListResourceTemplatesRequest",
    "ListResourceTemplatesResult",
    "ListResourcesRequest",
    "ListResourcesResult",
    "ListToolsRequest",
    "ListToolsResult",
    "LogEntry",
    "LoggingCapability",
    "LoggingLevel",
    "MalformedEnvelopeError",
    "McpError",
    "McpProtocolError",
    "MessageParseError",
    "MethodSpec",
    "MissingRequiredArgumentError",
    "ModelHint",
    "ModelPreferences",
    "PaginatedRequest",
    "PaginatedResult",
    "Prompt",
    "PromptArgument",
    "PromptMessage",
    "PromptRole",
    "PromptsCapability",
    "ReadResourceRequest",
    "ReadResourceResult",
    "RequestId",
    "Resource",
    "ResourceContents",
    "ResourceTemplate",
    "ResourceUpdatedNotification",
    "ResourcesCapability",
    "Role",
    "RootsCapability",
    "SamplingCapability",
    "SamplingMessage",
    "ServerCapabilities",
    "SetLoggingLevelRequest",
    "SubscribeRequest",
    "TextContent",
    "TextResourceContents",
    "Tool",
    "ToolInputSchema",
    "ToolsCapability",
    "UnknownContent",
    "UnknownMethodError",
    "UnsubscribeRequest",
    "UnsupportedContentKindError",
    "WireModel",
    "decode_message",
    "encode_message",
    "error_response",
    "parse_message",
    "parse_params",
    "parse_result",
    "require_all_supported",
    "require_supported",
    "success_response",
]

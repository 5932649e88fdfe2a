"""Error taxonomy shared by every method.

:class:`ErrorCode` enumerates the JSON-RPC reserved codes plus the domain
codes of this protocol, :class:`McpError` is the error object carried by an
error response, and :class:`McpProtocolError` and its subclasses are the
exceptions that carry an :class:`McpError` through Python code.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any

from pydantic import Field, StrictInt, field_serializer, field_validator

from mcp_types.base import WireModel

if TYPE_CHECKING:
    from pydantic import ValidationError


class ErrorCode(IntEnum):
    """Known error codes.

    The first five are the codes reserved by JSON-RPC 2.0. Domain codes live
    in the implementation-defined server range (-32000 to -32099) and never
    reuse a reserved value.
    """

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    REQUEST_CANCELLED = -32001
    RESOURCE_NOT_FOUND = -32002
    TOOL_EXECUTION_FAILED = -32003
    PROMPT_NOT_FOUND = -32004
    UNSUPPORTED_CONTENT_KIND = -32005

    @property
    def is_reserved(self) -> bool:
        """True for the codes predefined by JSON-RPC 2.0."""
        return self in RESERVED_CODES


RESERVED_CODES = frozenset(
    {
        ErrorCode.PARSE_ERROR,
        ErrorCode.INVALID_REQUEST,
        ErrorCode.METHOD_NOT_FOUND,
        ErrorCode.INVALID_PARAMS,
        ErrorCode.INTERNAL_ERROR,
    }
)


def coerce_error_code(value: int) -> ErrorCode | int:
    """Return the :class:`ErrorCode` member for *value*, or *value* itself if unknown."""
    try:
        return ErrorCode(value)
    except ValueError:
        return value


class McpError(WireModel):
    """The ``error`` member of a JSON-RPC error response.

    ``code`` is an :class:`ErrorCode` when the value is known. Codes
    introduced by newer peers are kept as the raw integer instead of failing
    the whole message.
    """

    code: ErrorCode | StrictInt
    message: str = Field(min_length=1)
    data: Any = None

    @field_validator("code")
    @classmethod
    def _normalise_code(cls, value: int) -> ErrorCode | int:
        return coerce_error_code(int(value))

    @field_serializer("code")
    def _code_as_int(self, code: int) -> int:
        return int(code)

    def __str__(self) -> str:
        return f"{self.message} (code: {int(self.code)})"

    @property
    def is_known_code(self) -> bool:
        return isinstance(self.code, ErrorCode)

    @classmethod
    def new(cls, code: ErrorCode | int, message: str, data: Any = None) -> McpError:
        return cls(code=code, message=message, data=data)

    @classmethod
    def parse_error(cls, message: str = "Parse error", data: Any = None) -> McpError:
        return cls(code=ErrorCode.PARSE_ERROR, message=message, data=data)

    @classmethod
    def invalid_request(cls, message: str = "Invalid request", data: Any = None) -> McpError:
        return cls(code=ErrorCode.INVALID_REQUEST, message=message, data=data)

    @classmethod
    def method_not_found(cls, method: str, data: Any = None) -> McpError:
        return cls(code=ErrorCode.METHOD_NOT_FOUND, message=f"Method not found: {method}", data=data)

    @classmethod
    def invalid_params(cls, message: str = "Invalid params", data: Any = None) -> McpError:
        return cls(code=ErrorCode.INVALID_PARAMS, message=message, data=data)

    @classmethod
    def internal_error(cls, message: str = "Internal error", data: Any = None) -> McpError:
        return cls(code=ErrorCode.INTERNAL_ERROR, message=message, data=data)

    @classmethod
    def request_cancelled(cls, message: str = "Request cancelled", data: Any = None) -> McpError:
        return cls(code=ErrorCode.REQUEST_CANCELLED, message=message, data=data)

    @classmethod
    def resource_not_found(cls, uri: str) -> McpError:
        return cls(
            code=ErrorCode.RESOURCE_NOT_FOUND,
            message=f"Resource not found: {uri}",
            data={"uri": uri},
        )

    @classmethod
    def tool_execution_failed(cls, name: str, detail: str = "") -> McpError:
        return cls(
            code=ErrorCode.TOOL_EXECUTION_FAILED,
            message=f"Tool execution failed: {name}" + (f": {detail}" if detail else ""),
            data={"tool": name},
        )

    @classmethod
    def prompt_not_found(cls, name: str) -> McpError:
        return cls(
            code=ErrorCode.PROMPT_NOT_FOUND,
            message=f"Prompt not found: {name}",
            data={"prompt": name},
        )


def validation_details(exc: ValidationError) -> list[dict[str, Any]]:
    """Reduce a pydantic ``ValidationError`` to JSON-safe ``{loc, msg, type}`` entries."""
    return [
        {"loc": [str(part) for part in err["loc"]], "msg": err["msg"], "type": err["type"]}
        for err in exc.errors(include_url=False)
    ]


def first_problem(exc: ValidationError) -> str:
    """Render the first validation problem as ``loc: msg``."""
    errors = exc.errors(include_url=False)
    if not errors:
        return str(exc)
    err = errors[0]
    loc = ".".join(str(part) for part in err["loc"])
    return f"{loc}: {err['msg']}" if loc else err["msg"]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class McpProtocolError(Exception):
    """Base error for all protocol failures.

    ``error`` is the :class:`McpError` to put in the error response.
    """

    def __init__(self, error: McpError) -> None:
        self.error = error
        super().__init__(str(error))

    @property
    def code(self) -> ErrorCode | int:
        return self.error.code


class MessageParseError(McpProtocolError):
    """The message text is not valid JSON."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(McpError.parse_error("Parse error" + (f": {detail}" if detail else "")))


class MalformedEnvelopeError(McpProtocolError):
    """A decoded value is not a well-formed JSON-RPC request, notification or response."""

    def __init__(self, reason: str, data: Any = None) -> None:
        self.reason = reason
        super().__init__(
            McpError.invalid_request(f"Malformed JSON-RPC envelope: {reason}", data=data)
        )


class UnknownMethodError(McpProtocolError):
    """The method name is not part of the protocol."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(McpError.method_not_found(method))


class InvalidParamsError(McpProtocolError):
    """Params of a known method have the wrong shape."""

    def __init__(self, message: str, data: Any = None) -> None:
        super().__init__(McpError.invalid_params(message, data=data))


class MissingRequiredArgumentError(InvalidParamsError):
    """A prompt was requested without one or more of its required arguments."""

    def __init__(self, prompt: str, missing: list[str]) -> None:
        self.prompt = prompt
        self.missing = list(missing)
        super().__init__(
            f"Missing required argument(s) for prompt '{prompt}': {', '.join(self.missing)}",
            data={"prompt": prompt, "missing": self.missing},
        )


class InvalidResultError(McpProtocolError):
    """A success response carries a result of the wrong shape for its method."""

    def __init__(self, method: str, data: Any = None) -> None:
        self.method = method
        super().__init__(McpError.internal_error(f"Invalid result for {method}", data=data))


class UnsupportedContentKindError(McpProtocolError):
    """A content block has a ``type`` this library does not know how to handle."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(
            McpError(
                code=ErrorCode.UNSUPPORTED_CONTENT_KIND,
                message=f"Unsupported content kind: {kind}",
                data={"type": kind},
            )
        )

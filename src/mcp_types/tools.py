"""Tools: callable operations exposed by a server.

Implements the payloads of tool discovery (``tools/list``) and execution
(``tools/call``).
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field, model_validator

from mcp_types.base import PaginatedRequest, PaginatedResult, WireModel
from mcp_types.content import ContentBlock, SupportedContent, TextContent, require_all_supported

# ---------------------------------------------------------------------------
# Tool definitions
# ---------------------------------------------------------------------------


class ToolInputSchema(WireModel):
    """JSON Schema for a tool's arguments.

    Only ``type``, ``properties`` and ``required`` are modelled; any other
    JSON-Schema keyword is kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    type: str = "object"
    properties: dict[str, Any] | None = None
    required: list[str] | None = None

    @model_validator(mode="after")
    def _required_are_properties(self) -> ToolInputSchema:
        declared = self.properties or {}
        unknown = [name for name in self.required or [] if name not in declared]
        if unknown:
            msg = f"required names not in properties: {', '.join(unknown)}"
            raise ValueError(msg)
        return self


class Tool(WireModel):
    """A tool definition as returned by ``tools/list``."""

    name: str = Field(min_length=1)
    description: str | None = None
    input_schema: ToolInputSchema = Field(default_factory=ToolInputSchema, alias="inputSchema")

    @classmethod
    def new(cls, name: str, description: str | None = None) -> Tool:
        """Create a tool that takes no arguments yet."""
        return cls(name=name, description=description)

    def with_parameter(
        self,
        name: str,
        description: str = "",
        *,
        required: bool = False,
        type: str = "string",
    ) -> Tool:
        """Return a copy of this tool with one more argument in its schema."""
        schema = self.input_schema
        properties = dict(schema.properties or {})
        prop: dict[str, Any] = {"type": type}
        if description:
            prop["description"] = description
        properties[name] = prop

        required_names = list(schema.required or [])
        if required and name not in required_names:
            required_names.append(name)

        new_schema = schema.model_copy(
            update={"properties": properties, "required": required_names or None}
        )
        return self.model_copy(update={"input_schema": new_schema})


class ListToolsRequest(PaginatedRequest):
    """Params of ``tools/list``."""


class ListToolsResult(PaginatedResult):
    tools: list[Tool] = []

    @model_validator(mode="after")
    def _unique_names(self) -> ListToolsResult:
        seen: set[str] = set()
        for tool in self.tools:
            if tool.name in seen:
                msg = f"duplicate tool name: {tool.name}"
                raise ValueError(msg)
            seen.add(tool.name)
        return self


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------


class CallToolRequest(WireModel):
    """Params of ``tools/call``."""

    name: str = Field(min_length=1)
    arguments: dict[str, Any] | None = None


class CallToolResult(WireModel):
    """Result of ``tools/call``.

    ``is_error`` reports a failure inside the tool itself; protocol failures
    are error responses instead.
    """

    content: list[ContentBlock] = []
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def from_text(cls, text: str, *, is_error: bool = False) -> CallToolResult:
        """Create a result with a single text block."""
        return cls(content=[TextContent(text=text)], is_error=is_error)

    @classmethod
    def failure(cls, message: str) -> CallToolResult:
        return cls.from_text(message, is_error=True)

    def require_supported(self) -> list[SupportedContent]:
        """Return the content blocks, failing on any block of an unknown kind."""
        return require_all_supported(self.content)

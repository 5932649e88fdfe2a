"""Tests for tool definitions and tool-call payloads."""

from __future__ import annotations

import pytest

from mcp_types.content import ImageContent, TextContent, UnknownContent
from mcp_types.errors import UnsupportedContentKindError
from mcp_types.tools import (
    CallToolRequest,
    CallToolResult,
    ListToolsResult,
    Tool,
    ToolInputSchema,
)


def _calculate() -> Tool:
    return Tool(
        name="calculate",
        description="Perform calculations",
        input_schema=ToolInputSchema(
            type="object",
            properties={"expression": {"type": "string"}},
            required=["expression"],
        ),
    )


class TestTool:
    def test_wire_shape(self) -> None:
        data = _calculate().to_dict()
        assert data["name"] == "calculate"
        assert data["description"] == "Perform calculations"
        assert data["inputSchema"]["required"] == ["expression"]
        assert data["inputSchema"]["properties"]["expression"]["type"] == "string"
        assert data["inputSchema"]["type"] == "object"

    def test_round_trip(self) -> None:
        tool = _calculate()
        assert Tool.model_validate_json(tool.to_json()) == tool

    def test_defaults(self) -> None:
        tool = Tool(name="noop")
        assert tool.description is None
        assert tool.to_dict() == {"name": "noop", "inputSchema": {"type": "object"}}

    def test_accepts_snake_case_and_wire_names(self) -> None:
        a = Tool.model_validate({"name": "t", "inputSchema": {"type": "object"}})
        b = Tool.model_validate({"name": "t", "input_schema": {"type": "object"}})
        assert a == b

    def test_unknown_fields_tolerated(self) -> None:
        tool = Tool.model_validate(
            {"name": "t", "inputSchema": {"type": "object"}, "annotations": {"readOnly": True}}
        )
        assert tool.name == "t"

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            Tool(name="")

    def test_builder(self) -> None:
        tool = Tool.new("calculate", "Perform mathematical calculations").with_parameter(
            "expression", "Mathematical expression to evaluate", required=True
        )
        assert tool.input_schema.required == ["expression"]
        assert tool.input_schema.properties == {
            "expression": {"type": "string", "description": "Mathematical expression to evaluate"}
        }

    def test_builder_returns_new_tool(self) -> None:
        base = Tool.new("t")
        extended = base.with_parameter("x")
        assert base.input_schema.properties is None
        assert extended.input_schema.properties == {"x": {"type": "string"}}
        assert extended.input_schema.required is None


class TestToolInputSchema:
    def test_required_must_be_properties(self) -> None:
        with pytest.raises(ValueError, match="missing"):
            ToolInputSchema(properties={"a": {"type": "string"}}, required=["a", "missing"])

    def test_required_without_properties_rejected(self) -> None:
        with pytest.raises(ValueError):
            ToolInputSchema(required=["a"])

    def test_extra_keywords_kept(self) -> None:
        schema = ToolInputSchema.model_validate(
            {"type": "object", "properties": {}, "additionalProperties": False}
        )
        assert schema.to_dict() == {"type": "object", "properties": {}, "additionalProperties": False}


class TestListToolsResult:
    def test_pagination_cursor(self) -> None:
        result = ListToolsResult(tools=[Tool(name="a")], next_cursor="page-2")
        assert result.to_dict()["nextCursor"] == "page-2"

    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(ValueError, match="duplicate"):
            ListToolsResult(tools=[Tool(name="a"), Tool(name="a")])


class TestCallTool:
    def test_request_round_trip(self) -> None:
        req = CallToolRequest(name="calculate", arguments={"expression": "1+1"})
        assert CallToolRequest.model_validate(req.to_dict()) == req

    def test_request_without_arguments(self) -> None:
        assert CallToolRequest(name="noop").to_dict() == {"name": "noop"}

    def test_result_wire_shape(self) -> None:
        result = CallToolResult(
            content=[TextContent(text="2"), ImageContent(data="x", mime_type="image/png")]
        )
        assert result.to_dict() == {
            "content": [
                {"type": "text", "text": "2"},
                {"type": "image", "data": "x", "mimeType": "image/png"},
            ],
            "isError": False,
        }

    def test_result_from_wire(self) -> None:
        result = CallToolResult.model_validate(
            {"content": [{"type": "text", "text": "boom"}], "isError": True}
        )
        assert result.is_error is True
        assert isinstance(result.content[0], TextContent)

    def test_from_text_and_failure(self) -> None:
        assert CallToolResult.from_text("ok").is_error is False
        failed = CallToolResult.failure("boom")
        assert failed.is_error is True
        assert failed.content == [TextContent(text="boom")]

    def test_require_supported(self) -> None:
        result = CallToolResult.model_validate(
            {"content": [{"type": "text", "text": "a"}, {"type": "hologram"}]}
        )
        assert isinstance(result.content[1], UnknownContent)
        with pytest.raises(UnsupportedContentKindError):
            result.require_supported()

    def test_round_trip_with_unknown_block(self) -> None:
        result = CallToolResult.model_validate(
            {"content": [{"type": "hologram", "depth": 3}], "isError": False}
        )
        assert CallToolResult.model_validate_json(result.to_json()) == result

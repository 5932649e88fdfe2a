"""Tests for resources, templates and resource contents."""

from __future__ import annotations

import pytest

from mcp_types.resources import (
    BlobResourceContents,
    ListResourcesResult,
    ListResourceTemplatesResult,
    ReadResourceRequest,
    ReadResourceResult,
    Resource,
    ResourceTemplate,
    TextResourceContents,
)


class TestResource:
    def test_only_uri_required(self) -> None:
        res = Resource(uri="file:///etc/hosts")
        assert res.to_dict() == {"uri": "file:///etc/hosts"}

    def test_wire_shape(self) -> None:
        res = Resource(uri="db://users/1", name="User 1", mime_type="application/json")
        assert res.to_dict() == {
            "uri": "db://users/1",
            "name": "User 1",
            "mimeType": "application/json",
        }

    def test_round_trip(self) -> None:
        res = Resource(uri="db://users/1", name="User", description="A user", mime_type="text/plain")
        assert Resource.model_validate_json(res.to_json()) == res

    def test_uri_needs_scheme(self) -> None:
        with pytest.raises(ValueError, match="scheme"):
            Resource(uri="just-a-path")

    def test_list_result(self) -> None:
        result = ListResourcesResult.model_validate(
            {"resources": [{"uri": "file:///a"}], "nextCursor": "c2"}
        )
        assert result.resources[0].uri == "file:///a"
        assert result.next_cursor == "c2"


class TestResourceTemplate:
    def test_wire_shape(self) -> None:
        tpl = ResourceTemplate(uri_template="file:///logs/{date}.txt", name="Daily log")
        assert tpl.to_dict() == {"uriTemplate": "file:///logs/{date}.txt", "name": "Daily log"}

    def test_placeholders(self) -> None:
        tpl = ResourceTemplate(uri_template="db://{table}/{id}")
        assert tpl.placeholders == ["table", "id"]

    def test_expand(self) -> None:
        tpl = ResourceTemplate(uri_template="db://{table}/{id}")
        assert tpl.expand(table="users", id="42") == "db://users/42"

    def test_expand_missing_value(self) -> None:
        tpl = ResourceTemplate(uri_template="db://{table}/{id}")
        with pytest.raises(ValueError, match="id"):
            tpl.expand(table="users")

    def test_match(self) -> None:
        tpl = ResourceTemplate(uri_template="file:///logs/{date}.txt")
        assert tpl.match("file:///logs/2024-01-01.txt") == {"date": "2024-01-01"}
        assert tpl.match("file:///other/2024-01-01.txt") is None

    def test_list_result_alias(self) -> None:
        result = ListResourceTemplatesResult(
            resource_templates=[ResourceTemplate(uri_template="db://{id}")]
        )
        assert result.to_dict() == {"resourceTemplates": [{"uriTemplate": "db://{id}"}]}


class TestResourceContents:
    def test_text_contents(self) -> None:
        result = ReadResourceResult.model_validate(
            {"contents": [{"uri": "file:///a.txt", "mimeType": "text/plain", "text": "hello"}]}
        )
        [contents] = result.contents
        assert isinstance(contents, TextResourceContents)
        assert contents.text == "hello"

    def test_blob_contents(self) -> None:
        result = ReadResourceResult.model_validate(
            {"contents": [{"uri": "file:///a.bin", "blob": "AAE="}]}
        )
        [contents] = result.contents
        assert isinstance(contents, BlobResourceContents)
        assert contents.decode() == b"\x00\x01"

    def test_blob_from_bytes(self) -> None:
        contents = BlobResourceContents.from_bytes("file:///a.bin", b"\x00\x01", "application/octet-stream")
        assert contents.blob == "AAE="
        assert contents.to_dict()["mimeType"] == "application/octet-stream"

    def test_both_representations_rejected(self) -> None:
        with pytest.raises(ValueError):
            ReadResourceResult.model_validate(
                {"contents": [{"uri": "file:///a", "text": "x", "blob": "eA=="}]}
            )

    def test_no_representation_rejected(self) -> None:
        with pytest.raises(ValueError):
            ReadResourceResult.model_validate({"contents": [{"uri": "file:///a"}]})

    def test_round_trip(self) -> None:
        result = ReadResourceResult(
            contents=[
                TextResourceContents(uri="file:///a.txt", text="hi"),
                BlobResourceContents(uri="file:///b.bin", blob="AAE=", mime_type="image/png"),
            ]
        )
        assert ReadResourceResult.model_validate_json(result.to_json()) == result

    def test_contents_carry_type_tag(self) -> None:
        result = ReadResourceResult(
            contents=[
                TextResourceContents(uri="file:///a", text="x"),
                BlobResourceContents(uri="file:///b", blob="AAE="),
            ]
        )
        assert result.to_dict() == {
            "contents": [
                {"type": "text", "uri": "file:///a", "text": "x"},
                {"type": "blob", "uri": "file:///b", "blob": "AAE="},
            ]
        }

    def test_tagged_contents_from_wire(self) -> None:
        result = ReadResourceResult.model_validate(
            {
                "contents": [
                    {"type": "text", "uri": "file:///a", "mimeType": "text/plain", "text": "x"},
                    {"type": "blob", "uri": "file:///b", "blob": "AAE="},
                ]
            }
        )
        assert [type(c) for c in result.contents] == [TextResourceContents, BlobResourceContents]

    def test_tag_contradicting_payload_rejected(self) -> None:
        with pytest.raises(ValueError):
            ReadResourceResult.model_validate(
                {"contents": [{"type": "blob", "uri": "file:///a", "text": "x"}]}
            )


class TestReadResourceRequest:
    def test_round_trip(self) -> None:
        req = ReadResourceRequest(uri="file:///a.txt")
        assert req.to_dict() == {"uri": "file:///a.txt"}
        assert ReadResourceRequest.model_validate(req.to_dict()) == req

    def test_uri_needs_scheme(self) -> None:
        with pytest.raises(ValueError):
            ReadResourceRequest(uri="")

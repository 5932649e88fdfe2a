"""Resources: readable data exposed by a server under a URI."""

from __future__ import annotations

import base64
import re
from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag, field_validator

from mcp_types.base import PaginatedRequest, PaginatedResult, WireModel

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")
_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def _require_scheme(uri: str) -> str:
    if not _SCHEME.match(uri):
        msg = f"URI must be scheme-qualified: {uri!r}"
        raise ValueError(msg)
    return uri


# ---------------------------------------------------------------------------
# Resource descriptors
# ---------------------------------------------------------------------------


class Resource(WireModel):
    """A concrete resource advertised by ``resources/list``."""

    uri: str
    name: str | None = None
    description: str | None = None
    mime_type: str | None = Field(default=None, alias="mimeType")

    @field_validator("uri")
    @classmethod
    def _check_uri(cls, value: str) -> str:
        return _require_scheme(value)


class ResourceTemplate(WireModel):
    """A family of resources described by a URI template.

    Placeholders are written ``{name}``, e.g. ``file:///logs/{date}.txt``.
    """

    uri_template: str = Field(alias="uriTemplate")
    name: str | None = None
    description: str | None = None
    mime_type: str | None = Field(default=None, alias="mimeType")

    @field_validator("uri_template")
    @classmethod
    def _check_template(cls, value: str) -> str:
        return _require_scheme(value)

    @property
    def placeholders(self) -> list[str]:
        """Placeholder names in order of appearance."""
        return _PLACEHOLDER.findall(self.uri_template)

    def expand(self, **values: str) -> str:
        """Substitute every placeholder and return the concrete URI."""
        missing = [name for name in self.placeholders if name not in values]
        if missing:
            msg = f"Missing value(s) for placeholder(s): {', '.join(missing)}"
            raise ValueError(msg)
        return _PLACEHOLDER.sub(lambda m: str(values[m.group(1)]), self.uri_template)

    def match(self, uri: str) -> dict[str, str] | None:
        """Extract placeholder values from *uri*, or ``None`` if it does not fit."""
        names = self.placeholders
        literals = _PLACEHOLDER.split(self.uri_template)[::2]
        pattern = "([^/]+)".join(re.escape(part) for part in literals)
        found = re.fullmatch(pattern, uri)
        if found is None:
            return None
        return dict(zip(names, found.groups()))


# ---------------------------------------------------------------------------
# Resource contents
# ---------------------------------------------------------------------------


class TextResourceContents(WireModel):
    """Inline text contents of a resource."""

    type: Literal["text"] = "text"
    uri: str
    mime_type: str | None = Field(default=None, alias="mimeType")
    text: str


class BlobResourceContents(WireModel):
    """Inline binary contents of a resource, base64 encoded."""

    type: Literal["blob"] = "blob"
    uri: str
    mime_type: str | None = Field(default=None, alias="mimeType")
    blob: str

    @classmethod
    def from_bytes(
        cls, uri: str, data: bytes, mime_type: str | None = None
    ) -> BlobResourceContents:
        return cls(uri=uri, blob=base64.b64encode(data).decode("ascii"), mime_type=mime_type)

    def decode(self) -> bytes:
        return base64.b64decode(self.blob)


def _contents_kind(value: Any) -> str | None:
    if isinstance(value, dict):
        has_text, has_blob = "text" in value, "blob" in value
    else:
        has_text, has_blob = hasattr(value, "text"), hasattr(value, "blob")
    # the text/blob key decides, so untagged input is accepted; both or neither fails
    if has_text == has_blob:
        return None
    return "text" if has_text else "blob"


ResourceContents = Annotated[
    Union[
        Annotated[TextResourceContents, Tag("text")],
        Annotated[BlobResourceContents, Tag("blob")],
    ],
    Discriminator(
        _contents_kind,
        custom_error_type="invalid_resource_contents",
        custom_error_message="Resource contents need exactly one of 'text' or 'blob'",
    ),
]


# ---------------------------------------------------------------------------
# Requests and results
# ---------------------------------------------------------------------------


class ListResourcesRequest(PaginatedRequest):
    """Params of ``resources/list``."""


class ListResourcesResult(PaginatedResult):
    resources: list[Resource] = []


class ListResourceTemplatesRequest(PaginatedRequest):
    """Params of ``resources/templates/list``."""


class ListResourceTemplatesResult(PaginatedResult):
    resource_templates: list[ResourceTemplate] = Field(default=[], alias="resourceTemplates")


class ReadResourceRequest(WireModel):
    """Params of ``resources/read``."""

    uri: str

    @field_validator("uri")
    @classmethod
    def _check_uri(cls, value: str) -> str:
        return _require_scheme(value)


class ReadResourceResult(WireModel):
    contents: list[ResourceContents]


class SubscribeRequest(WireModel):
    """Params of ``resources/subscribe``."""

    uri: str


class UnsubscribeRequest(WireModel):
    """Params of ``resources/unsubscribe``."""

    uri: str


class ResourceUpdatedNotification(WireModel):
    """Params of ``notifications/resources/updated``."""

    uri: str

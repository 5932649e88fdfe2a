"""Content blocks: multimodal building blocks of tool, prompt and sampling payloads.

Blocks are a closed union tagged by ``type``. A block whose ``type`` is not
known here is kept as :class:`UnknownContent` so no data is dropped;
consumers call :func:`require_supported` to fail closed on it.
"""

from __future__ import annotations

import base64
from collections.abc import Iterable
from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Discriminator, Field, Tag

from mcp_types.base import WireModel
from mcp_types.errors import UnsupportedContentKindError
from mcp_types.resources import ResourceContents

Role = Literal["user", "assistant"]


class TextContent(WireModel):
    """Plain text content block."""

    type: Literal["text"] = "text"
    text: str


class ImageContent(WireModel):
    """Inline image content block (base64 data)."""

    type: Literal["image"] = "image"
    data: str
    mime_type: str = Field(alias="mimeType")

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str) -> ImageContent:
        return cls(data=base64.b64encode(data).decode("ascii"), mime_type=mime_type)


class EmbeddedResource(WireModel):
    """Resource contents embedded in a message or tool result."""

    type: Literal["resource"] = "resource"
    resource: ResourceContents


class UnknownContent(WireModel):
    """A content block of a kind introduced after this library was written.

    All members are kept so the block survives a round trip unchanged.
    """

    model_config = ConfigDict(extra="allow")

    type: str


def block_kind(value: Any, known: frozenset[str]) -> str:
    """Discriminator helper: the block's ``type`` if it is in *known*, else ``"unknown"``."""
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if isinstance(value, UnknownContent) or kind not in known:
        return "unknown"
    return kind


_CONTENT_KINDS = frozenset({"text", "image", "resource"})


def _content_kind(value: Any) -> str:
    return block_kind(value, _CONTENT_KINDS)


ContentBlock = Annotated[
    Union[
        Annotated[TextContent, Tag("text")],
        Annotated[ImageContent, Tag("image")],
        Annotated[EmbeddedResource, Tag("resource")],
        Annotated[UnknownContent, Tag("unknown")],
    ],
    Discriminator(_content_kind),
]

SupportedContent = Union[TextContent, ImageContent, EmbeddedResource]


def require_supported(block: Any) -> SupportedContent:
    """Return *block* unchanged, or raise if it is of an unknown kind."""
    if isinstance(block, UnknownContent):
        raise UnsupportedContentKindError(block.type)
    return block  # type: ignore[no-any-return]


def require_all_supported(blocks: Iterable[Any]) -> list[SupportedContent]:
    """Apply :func:`require_supported` to every block, keeping order."""
    return [require_supported(block) for block in blocks]

"""Capability negotiation: feature declarations exchanged by ``initialize``.

Each side declares the optional features it supports as a sparse mapping
from feature name to descriptor. A missing key means the feature is not
supported. Feature keys unknown to this library are kept, so capabilities
added by newer peers survive a round trip.
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from mcp_types.base import WireModel

LATEST_PROTOCOL_VERSION = "2024-11-05"
SUPPORTED_PROTOCOL_VERSIONS = (LATEST_PROTOCOL_VERSION, "2024-10-07")

# ---------------------------------------------------------------------------
# Feature descriptors
# ---------------------------------------------------------------------------


class ToolsCapability(WireModel):
    list_changed: bool | None = Field(default=None, alias="listChanged")


class ResourcesCapability(WireModel):
    subscribe: bool | None = None
    list_changed: bool | None = Field(default=None, alias="listChanged")


class PromptsCapability(WireModel):
    list_changed: bool | None = Field(default=None, alias="listChanged")


class LoggingCapability(WireModel):
    """Server can emit ``notifications/message``."""


class RootsCapability(WireModel):
    list_changed: bool | None = Field(default=None, alias="listChanged")


class SamplingCapability(WireModel):
    """Client can serve ``sampling/createMessage``."""


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


class _Capabilities(WireModel):
    model_config = ConfigDict(extra="allow")

    experimental: dict[str, Any] | None = None

    def features(self) -> dict[str, Any]:
        """Declared features only, keyed by wire name."""
        declared: dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value is not None:
                declared[field.alias or name] = value
        for name, value in (self.model_extra or {}).items():
            if value is not None:
                declared[name] = value
        return declared

    def supports(self, feature: str) -> bool:
        return feature in self.features()


class ServerCapabilities(_Capabilities):
    """Features a server offers."""

    tools: ToolsCapability | None = None
    resources: ResourcesCapability | None = None
    prompts: PromptsCapability | None = None
    logging: LoggingCapability | None = None


class ClientCapabilities(_Capabilities):
    """Features a client offers."""

    roots: RootsCapability | None = None
    sampling: SamplingCapability | None = None


# ---------------------------------------------------------------------------
# Handshake payloads
# ---------------------------------------------------------------------------


class Implementation(WireModel):
    """Name and version of a client or server implementation."""

    name: str
    version: str


class InitializeParams(WireModel):
    """Params of ``initialize``."""

    protocol_version: str = Field(default=LATEST_PROTOCOL_VERSION, alias="protocolVersion")
    capabilities: ClientCapabilities = Field(default_factory=ClientCapabilities)
    client_info: Implementation = Field(alias="clientInfo")


class InitializeResult(WireModel):
    """Result of ``initialize``."""

    protocol_version: str = Field(default=LATEST_PROTOCOL_VERSION, alias="protocolVersion")
    capabilities: ServerCapabilities = Field(default_factory=ServerCapabilities)
    server_info: Implementation = Field(alias="serverInfo")
    instructions: str | None = None

    @property
    def is_supported_version(self) -> bool:
        """True when the negotiated version is one this package understands."""
        return self.protocol_version in SUPPORTED_PROTOCOL_VERSIONS

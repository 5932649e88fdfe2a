"""Sampling: server-initiated LLM completions performed by the client.

The server sends ``sampling/createMessage`` with the conversation so far and
model-selection hints; the client answers with the generated turn.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import AliasChoices, ConfigDict, Discriminator, Field, Tag, model_validator

from mcp_types.base import WireModel
from mcp_types.content import ImageContent, Role, TextContent, UnknownContent, block_kind

_SAMPLING_KINDS = frozenset({"text", "image"})


def _sampling_kind(value: Any) -> str:
    return block_kind(value, _SAMPLING_KINDS)


SamplingContent = Annotated[
    Union[
        Annotated[TextContent, Tag("text")],
        Annotated[ImageContent, Tag("image")],
        Annotated[UnknownContent, Tag("unknown")],
    ],
    Discriminator(_sampling_kind),
]

IncludeContext = Literal["none", "thisServer", "allServers"]


class SamplingMessage(WireModel):
    """One conversation turn."""

    role: Role
    content: SamplingContent


class ModelHint(WireModel):
    """A model name or family the server would like, e.g. ``"claude-3-5-sonnet"``."""

    name: str


class ModelPreferences(WireModel):
    """Model-selection hints; each priority is in ``[0, 1]``."""

    hints: list[ModelHint] | None = None
    cost_priority: float | None = Field(default=None, ge=0, le=1, alias="costPriority")
    speed_priority: float | None = Field(default=None, ge=0, le=1, alias="speedPriority")
    intelligence_priority: float | None = Field(
        default=None, ge=0, le=1, alias="intelligencePriority"
    )


class CreateMessageRequest(WireModel):
    """Params of ``sampling/createMessage``."""

    model_config = ConfigDict(protected_namespaces=())

    messages: list[SamplingMessage] = Field(min_length=1)
    model_preferences: ModelPreferences | None = Field(default=None, alias="modelPreferences")
    system_prompt: str | None = Field(default=None, alias="systemPrompt")
    include_context: IncludeContext | None = Field(default=None, alias="includeContext")
    temperature: float | None = None
    max_tokens: int = Field(gt=0, alias="maxTokens")
    stop_sequences: list[str] | None = Field(
        default=None,
        alias="stopSequences",
        validation_alias=AliasChoices("stopSequences", "stop"),
    )
    metadata: dict[str, Any] | None = None


class CreateMessageResult(WireModel):
    """Result of ``sampling/createMessage``: the generated turn plus generation details.

    Emitted with the turn nested under ``message``. The flat form, with
    ``role`` and ``content`` next to ``model``, is accepted on input too.
    """

    message: SamplingMessage
    model: str | None = None
    stop_reason: str | None = Field(default=None, alias="stopReason")

    @model_validator(mode="before")
    @classmethod
    def _nest_flat_turn(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "message" in data:
            return data
        if "role" not in data and "content" not in data:
            return data
        data = dict(data)
        data["message"] = {key: data.pop(key) for key in ("role", "content") if key in data}
        return data

    @property
    def role(self) -> Role:
        return self.message.role

    @property
    def content(self) -> Any:
        return self.message.content

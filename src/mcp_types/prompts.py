"""Prompts: parameterised message templates exposed by a server."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator

from mcp_types.base import PaginatedRequest, PaginatedResult, WireModel
from mcp_types.content import ContentBlock
from mcp_types.errors import MissingRequiredArgumentError

PromptRole = Literal["user", "assistant", "system"]


class PromptArgument(WireModel):
    """An argument a prompt accepts."""

    name: str = Field(min_length=1)
    description: str | None = None
    required: bool = False


class Prompt(WireModel):
    """A prompt template as returned by ``prompts/list``.

    ``arguments`` keeps declaration order.
    """

    name: str = Field(min_length=1)
    description: str | None = None
    arguments: list[PromptArgument] = []

    @model_validator(mode="after")
    def _unique_arguments(self) -> Prompt:
        names = [arg.name for arg in self.arguments]
        if len(names) != len(set(names)):
            msg = f"duplicate argument names in prompt '{self.name}'"
            raise ValueError(msg)
        return self

    @property
    def required_arguments(self) -> list[str]:
        return [arg.name for arg in self.arguments if arg.required]


class ListPromptsRequest(PaginatedRequest):
    """Params of ``prompts/list``."""


class ListPromptsResult(PaginatedResult):
    prompts: list[Prompt] = []


class GetPromptRequest(WireModel):
    """Params of ``prompts/get``."""

    name: str = Field(min_length=1)
    arguments: dict[str, str] | None = None

    def check_arguments(self, prompt: Prompt) -> None:
        """Raise :class:`MissingRequiredArgumentError` unless every required argument is supplied."""
        supplied = self.arguments or {}
        missing = [name for name in prompt.required_arguments if name not in supplied]
        if missing:
            raise MissingRequiredArgumentError(prompt.name, missing)


class PromptMessage(WireModel):
    role: PromptRole
    content: ContentBlock


class GetPromptResult(WireModel):
    """Result of ``prompts/get``."""

    description: str | None = None
    messages: list[PromptMessage] = []

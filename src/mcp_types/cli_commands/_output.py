"""Shared CLI output formatters."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table
from rich.text import Text

from mcp_types.errors import McpError
from mcp_types.jsonrpc import (
    JsonRpcErrorResponse,
    JsonRpcMessage,
    JsonRpcNotification,
    JsonRpcRequest,
)

console = Console()


@dataclass
class InspectedLine:
    """Outcome of decoding one line: a message, or the error it was rejected with."""

    lineno: int
    message: JsonRpcMessage | None = None
    error: McpError | None = None


def describe(line: InspectedLine) -> tuple[str, str, str, str]:
    """Return ``(kind, id, method, status)`` for a table row."""
    if line.message is None:
        return "invalid", "-", "-", _truncate(str(line.error))

    message = line.message
    if isinstance(message, JsonRpcRequest):
        return "request", json.dumps(message.id), message.method, ""
    if isinstance(message, JsonRpcNotification):
        return "notification", "-", message.method, ""
    if isinstance(message, JsonRpcErrorResponse):
        return "error", json.dumps(message.id), "-", _truncate(str(message.error))
    return "result", json.dumps(message.id), "-", "ok"


def print_messages_table(lines: list[InspectedLine]) -> None:
    """Pretty-print decoded lines as a table."""
    table = Table(title="JSON-RPC Messages")
    table.add_column("Line", justify="right", no_wrap=True)
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Id", no_wrap=True)
    table.add_column("Method", no_wrap=True)
    table.add_column("Status")

    for line in lines:
        kind, id_, method, status = describe(line)
        style = "red" if kind in ("invalid", "error") else None
        table.add_row(str(line.lineno), kind, id_, method, status, style=style)

    console.print(table)


def print_messages_json(lines: list[InspectedLine]) -> None:
    """Print decoded lines as a JSON array."""
    data: list[dict[str, Any]] = []
    for line in lines:
        if line.message is not None:
            data.append({"line": line.lineno, "message": line.message.to_dict()})
        elif line.error is not None:
            data.append({"line": line.lineno, "error": line.error.to_dict()})
    console.print_json(json.dumps(data))


def print_models_table(models: dict[str, type[BaseModel]]) -> None:
    """List entity models with the first line of their docstring."""
    table = Table(title="Entity Models")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")

    for name, model in sorted(models.items()):
        doc = (model.__doc__ or "").strip().splitlines()
        table.add_row(name, _truncate(doc[0] if doc else ""))

    console.print(table)


def print_schema(model: type[BaseModel]) -> None:
    """Print the JSON schema of *model* using wire field names."""
    console.print_json(json.dumps(model.model_json_schema(by_alias=True)))


def _truncate(text: str, max_len: int = 80) -> str:
    clipped = Text(text)
    clipped.truncate(max_len, overflow="ellipsis")
    return clipped.plain

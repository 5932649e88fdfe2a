"""``mcp-types inspect``: decode newline-delimited JSON-RPC traffic."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import click

from mcp_types.cli_commands._output import (
    InspectedLine,
    console,
    print_messages_json,
    print_messages_table,
)
from mcp_types.errors import McpProtocolError
from mcp_types.jsonrpc import decode_message

logger = logging.getLogger(__name__)


def inspect_lines(stream: TextIO) -> list[InspectedLine]:
    """Decode every non-blank line of *stream*, keeping failures in place."""
    lines: list[InspectedLine] = []
    for lineno, text in enumerate(stream, start=1):
        if not text.strip():
            continue
        try:
            message = decode_message(text)
        except McpProtocolError as exc:
            logger.debug("Line %d rejected: %s", lineno, exc)
            lines.append(InspectedLine(lineno, error=exc.error))
            continue
        logger.debug("Line %d decoded as %s", lineno, type(message).__name__)
        lines.append(InspectedLine(lineno, message=message))
    return lines


@click.command("inspect")
@click.argument("messages_file", type=click.File("r", encoding="utf-8"))
@click.option("--json", "as_json", is_flag=True, help="Output the decoded messages as JSON.")
def inspect_cmd(messages_file: TextIO, as_json: bool) -> None:
    """Inspect a file of JSON-RPC messages.

    MESSAGES_FILE holds one message per line, as written by a stdio
    transport. Use ``-`` to read from stdin.
    """
    lines = inspect_lines(messages_file)
    if not lines:
        console.print("[yellow]No messages found.[/yellow]")
        return

    if as_json:
        print_messages_json(lines)
    else:
        print_messages_table(lines)

    failed = sum(1 for line in lines if line.error is not None)
    if failed:
        console.print(f"[red]{failed} line(s) failed to decode[/red]")
        sys.exit(1)

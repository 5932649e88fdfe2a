"""Subcommands of the ``mcp-types`` group."""

from __future__ import annotations

from mcp_types.cli_commands.inspect import inspect_cmd
from mcp_types.cli_commands.schema import schema_cmd

COMMANDS = (inspect_cmd, schema_cmd)

"""mcp-types CLI entrypoint."""

from __future__ import annotations

import logging

import click

from mcp_types import __version__
from mcp_types.cli_commands import COMMANDS


@click.group()
@click.version_option(version=__version__, prog_name="mcp-types")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """mcp-types: inspect MCP JSON-RPC traffic and entity schemas."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


for command in COMMANDS:
    main.add_command(command)

if __name__ == "__main__":
    main()

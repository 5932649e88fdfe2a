"""``mcp-types schema``: print the JSON schema of an entity model."""

from __future__ import annotations

import sys

import click
from pydantic import BaseModel

import mcp_types
from mcp_types.cli_commands._output import console, print_models_table, print_schema


def schema_models() -> dict[str, type[BaseModel]]:
    """Every public model of the package, by class name."""
    models: dict[str, type[BaseModel]] = {}
    for name in mcp_types.__all__:
        obj = getattr(mcp_types, name)
        if isinstance(obj, type) and issubclass(obj, BaseModel):
            models[name] = obj
    return models


@click.command("schema")
@click.argument("model_name", required=False)
def schema_cmd(model_name: str | None) -> None:
    """Print the JSON schema of MODEL_NAME (e.g. ``Tool``).

    Without MODEL_NAME, list the available models.
    """
    models = schema_models()
    if model_name is None:
        print_models_table(models)
        return

    model = models.get(model_name)
    if model is None:
        console.print(f"[red]Unknown model:[/red] {model_name}")
        sys.exit(1)
    print_schema(model)

"""CLI models command: list known context sizes."""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from tokenx.models import (
    DEFAULT_CONTEXT_SIZE,
    DEFAULT_EMBEDDING_CONTEXT_SIZE,
    EMBEDDING_CONTEXT_SIZES,
    MODEL_CONTEXT_SIZES,
)

console = Console()


def models_cmd(
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
) -> None:
    """List models with their context sizes."""
    if output_json:
        payload = {
            "models": dict(MODEL_CONTEXT_SIZES),
            "embeddings": dict(EMBEDDING_CONTEXT_SIZES),
            "default_context_size": DEFAULT_CONTEXT_SIZE,
            "default_embedding_context_size": DEFAULT_EMBEDDING_CONTEXT_SIZE,
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table(title="Model context sizes")
    table.add_column("Model")
    table.add_column("Kind")
    table.add_column("Context size", justify="right")
    for name, size in MODEL_CONTEXT_SIZES.items():
        table.add_row(name, "completion", str(size))
    for name, size in EMBEDDING_CONTEXT_SIZES.items():
        table.add_row(name, "embedding", str(size))
    console.print(table)
    console.print(
        f"[dim]Unknown models: {DEFAULT_CONTEXT_SIZE} "
        f"(embeddings: {DEFAULT_EMBEDDING_CONTEXT_SIZE})[/dim]"
    )

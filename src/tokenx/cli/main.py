"""Root Typer app for the tokenx CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

app = typer.Typer(
    name="tokenx",
    help="tokenx: GPT token estimation and context budgets without a tokenizer.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    log_dir: Annotated[
        Path | None, typer.Option(help="Append a JSONL run event to this directory.")
    ] = None,
) -> None:
    """Estimate tokens, chunk text and check context budgets."""
    ctx.obj = {"log_dir": log_dir}


def _register_commands() -> None:
    """Register all CLI commands."""
    from tokenx.cli.budget_cmd import budget_cmd
    from tokenx.cli.chunk_cmd import chunk_cmd
    from tokenx.cli.compare_cmd import compare_cmd
    from tokenx.cli.count_cmd import count_cmd
    from tokenx.cli.models_cmd import models_cmd

    app.command(name="count")(count_cmd)
    app.command(name="chunk")(chunk_cmd)
    app.command(name="budget")(budget_cmd)
    app.command(name="models")(models_cmd)
    app.command(name="compare")(compare_cmd)


_register_commands()

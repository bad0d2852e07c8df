"""CLI count command: estimate tokens for a file or stdin."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from tokenx.cli.common import read_input, run_event
from tokenx.config import Config
from tokenx.estimator import approximate_token_chunks, classify_segment

console = Console()


def count_cmd(
    ctx: typer.Context,
    path: Annotated[
        Path | None, typer.Argument(help="Text file to read. Reads stdin when omitted.")
    ] = None,
    segments: Annotated[
        bool, typer.Option("--segments", help="List every segment with its count.")
    ] = False,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
) -> None:
    """Estimate the number of tokens in a text."""
    config = Config()
    text = read_input(path)

    with run_event(ctx, config, "cli.count") as event:
        pairs = approximate_token_chunks(text)
        total = sum(p.count for p in pairs)
        event.update({"characters": len(text), "tokens": total})

    if output_json:
        payload: dict = {"characters": len(text), "tokens": total}
        if segments:
            payload["segments"] = [
                {
                    "substring": p.substring,
                    "count": p.count,
                    "rule": classify_segment(p.substring),
                }
                for p in pairs
            ]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    if segments:
        table = Table(title="Segments")
        table.add_column("#", justify="right")
        table.add_column("Segment")
        table.add_column("Rule")
        table.add_column("Tokens", justify="right")
        for i, p in enumerate(pairs, 1):
            table.add_row(
                str(i), Text(repr(p.substring)), classify_segment(p.substring), str(p.count)
            )
        console.print(table)

    console.print(f"Characters: {len(text)}")
    console.print(f"Estimated tokens: [bold]{total}[/bold]")

"""CLI chunk command: split text into token-bounded chunks."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from tokenx.chunker import chunk_token_counts
from tokenx.cli.common import err_console, read_input, run_event
from tokenx.config import Config
from tokenx.estimator import iter_token_chunks
from tokenx.exceptions import InvalidMaxTokensError

console = Console()


def chunk_cmd(
    ctx: typer.Context,
    path: Annotated[
        Path | None, typer.Argument(help="Text file to read. Reads stdin when omitted.")
    ] = None,
    max_tokens: Annotated[
        int | None, typer.Option("--max-tokens", "-m", help="Token budget per chunk.")
    ] = None,
    overlap: Annotated[
        int | None, typer.Option("--overlap", "-o", help="Tokens shared by neighbouring chunks.")
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
) -> None:
    """Split a text into chunks of at most --max-tokens estimated tokens."""
    config = Config()
    max_tokens = config.default_max_tokens if max_tokens is None else max_tokens
    overlap = config.default_overlap if overlap is None else overlap
    text = read_input(path)

    try:
        with run_event(ctx, config, "cli.chunk") as event:
            event.update({"max_tokens": max_tokens, "overlap": overlap})
            chunks = chunk_token_counts(iter_token_chunks(text), max_tokens, overlap)
            event["chunks"] = len(chunks)
    except InvalidMaxTokensError as e:
        err_console.print(f"[red]Invalid --max-tokens:[/red] {e}")
        raise typer.Exit(code=1) from e

    rendered = [
        {"text": "".join(p.substring for p in chunk), "tokens": sum(p.count for p in chunk)}
        for chunk in chunks
    ]

    if output_json:
        typer.echo(json.dumps({"chunks": rendered}, ensure_ascii=False, indent=2))
        return

    for i, chunk in enumerate(rendered, 1):
        console.print(
            Panel(Text(chunk["text"]), title=f"Chunk {i} ({chunk['tokens']} tokens)")
        )
    console.print(f"[dim]{len(rendered)} chunks, max {max_tokens} tokens, overlap {overlap}[/dim]")

"""CLI compare command: estimate versus tiktoken."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from tokenx.cli.common import err_console, read_input, run_event
from tokenx.config import Config
from tokenx.eval.compare import compare_samples, load_encoder
from tokenx.exceptions import TokenizerUnavailableError

console = Console()


def compare_cmd(
    ctx: typer.Context,
    paths: Annotated[list[Path], typer.Argument(help="Text files to compare.")],
    encoding: Annotated[
        str | None, typer.Option(help="tiktoken encoding name.")
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
) -> None:
    """Compare estimated token counts with a real tokenizer."""
    config = Config()
    encoding = encoding or config.comparison_encoding
    samples = [(str(p), read_input(p)) for p in paths]

    try:
        encoder = load_encoder(encoding)
    except TokenizerUnavailableError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e

    with run_event(ctx, config, "cli.compare") as event:
        report = compare_samples(samples, encoder, encoding)
        event.update({"encoding": encoding, "mean_abs_deviation": report.mean_abs_deviation})

    if output_json:
        typer.echo(report.model_dump_json(indent=2))
        return

    table = Table(title=f"Estimate vs {encoding}")
    table.add_column("File", max_width=40)
    table.add_column("Chars", justify="right")
    table.add_column("Estimated", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("Deviation", justify="right")
    for s in report.samples:
        table.add_row(
            s.name,
            str(s.characters),
            str(s.estimated_tokens),
            str(s.actual_tokens),
            f"{s.deviation * 100:+.2f}%",
        )
    console.print(table)
    console.print(f"Mean absolute deviation: [bold]{report.mean_abs_deviation * 100:.2f}%[/bold]")

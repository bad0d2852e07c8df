"""CLI budget command: context budget for a prompt and model."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from tokenx.budget import remaining_tokens
from tokenx.cli.common import read_input, run_event
from tokenx.config import Config
from tokenx.estimator import approximate_token_size
from tokenx.models import get_model_context_size, resolve_model_name

console = Console()


@dataclass
class BudgetReport:
    """Context budget for one prompt."""

    model: str
    resolved_model: str
    context_size: int
    prompt_tokens: int
    reserved_tokens: int
    remaining_tokens: int
    fits: bool


def build_budget_report(prompt: str, model: str, reserve: int) -> BudgetReport:
    """Compute the budget figures for ``prompt`` under ``model``."""
    context_size = get_model_context_size(model)
    prompt_tokens = approximate_token_size(prompt)
    return BudgetReport(
        model=model,
        resolved_model=resolve_model_name(model),
        context_size=context_size,
        prompt_tokens=prompt_tokens,
        reserved_tokens=reserve,
        remaining_tokens=remaining_tokens(prompt, context_size, reserve),
        fits=prompt_tokens + reserve <= context_size,
    )


def budget_cmd(
    ctx: typer.Context,
    path: Annotated[
        Path | None, typer.Argument(help="Prompt file to read. Reads stdin when omitted.")
    ] = None,
    model: Annotated[str | None, typer.Option(help="Model name, e.g. gpt-4-0613.")] = None,
    reserve: Annotated[
        int | None, typer.Option(help="Tokens reserved for the response.")
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
) -> None:
    """Show how much of a model's context a prompt leaves free."""
    config = Config()
    model = model or config.default_model
    reserve = config.reserve_tokens if reserve is None else reserve
    prompt = read_input(path)

    with run_event(ctx, config, "cli.budget") as event:
        report = build_budget_report(prompt, model, reserve)
        event.update(asdict(report))

    if output_json:
        typer.echo(json.dumps(asdict(report), indent=2))
        return

    table = Table(title=f"Context budget: {report.model}", show_header=False)
    table.add_column("Field")
    table.add_column("Value", justify="right")
    if report.resolved_model != report.model:
        table.add_row("Resolved model", report.resolved_model)
    table.add_row("Context size", str(report.context_size))
    table.add_row("Prompt tokens", str(report.prompt_tokens))
    table.add_row("Reserved for response", str(report.reserved_tokens))
    table.add_row("Remaining", str(report.remaining_tokens))
    table.add_row("Fits", "[green]yes[/green]" if report.fits else "[red]no[/red]")
    console.print(table)

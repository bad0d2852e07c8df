"""Input reading and run logging shared by CLI commands."""

from __future__ import annotations

import contextlib
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import typer
from rich.console import Console

from tokenx.config import Config
from tokenx.logging.logger import RunLogger

if TYPE_CHECKING:
    from collections.abc import Iterator

err_console = Console(stderr=True)


def read_input(path: Path | None) -> str:
    """Read text from ``path``, or from stdin when path is None or '-'."""
    if path is None or str(path) == "-":
        return sys.stdin.read()
    if not path.is_file():
        err_console.print(f"[red]File not found:[/red] {path}")
        raise typer.Exit(code=1)
    return path.read_text(encoding="utf-8", errors="replace")


def get_run_logger(ctx: typer.Context, config: Config) -> RunLogger | None:
    """RunLogger for --log-dir, or the config log dir when log_runs is set."""
    log_dir = (ctx.obj or {}).get("log_dir")
    if log_dir is not None:
        return RunLogger(Path(log_dir))
    if config.log_runs:
        config.ensure_dirs()
        return RunLogger(config.log_dir)
    return None


@contextlib.contextmanager
def run_event(ctx: typer.Context, config: Config, event_type: str) -> Iterator[dict]:
    """Yield a dict of event data, logged on exit if run logging is enabled."""
    run_logger = get_run_logger(ctx, config)
    if run_logger is None:
        yield {}
        return
    with run_logger.timed(event_type) as data:
        yield data

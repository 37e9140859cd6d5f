from __future__ import annotations

from typing import Optional

import typer
from importlib import metadata
from rich.console import Console
from rich.markup import escape

from advent.challenges.catalog import CHALLENGE_MODULES
from advent.core.config import HarnessConfig, load_config
from advent.core.execute import FileInputResolver, InputResolutionError, execute_all
from advent.core.logs import configure_logging
from advent.core.models import ChallengeRecord
from advent.core.registry import DuplicateIdentity, load_challenges, select
from advent.core.report import render_challenges, render_execution, render_verification
from advent.core.verify import verify_all


app = typer.Typer(add_completion=False, help="Advent: verify and run puzzle challenges")
console = Console()


def _get_version() -> str:
    try:
        return metadata.version("advent-harness")
    except metadata.PackageNotFoundError:
        return "0.0.0+local"


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the Advent version and exit.",
        is_eager=True,
    ),
):
    if version:
        console.print(_get_version())
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit()


def _get_env(config: Optional[str], verbose: bool = False) -> tuple[HarnessConfig, tuple[ChallengeRecord, ...]]:
    configure_logging(verbose)
    try:
        cfg = load_config(config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]❌ Could not load config: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    try:
        registry = load_challenges(CHALLENGE_MODULES, cfg.challenges)
    except (ImportError, AttributeError, FileNotFoundError) as e:
        console.print(f"[red]❌ Could not load challenges: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    try:
        records = registry.collect_all()
    except DuplicateIdentity as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(code=2)
    return cfg, records


@app.command("run")
def run(
    test_only: bool = typer.Option(False, "--test-only", "-t", help="Only run the embedded unit tests"),
    year: Optional[int] = typer.Option(None, "--year", "-y", help="Only challenges from this year"),
    day: Optional[int] = typer.Option(None, "--day", "-d", help="Only challenges from this day"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Worker threads (default: config, then CPU count)"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to advent.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """Verify every selected challenge, then run it on its input file."""
    cfg, records = _get_env(config, verbose)
    challenges = select(records, year=year, day=day)
    if not challenges:
        console.print("[yellow]No challenges found![/yellow]")
        return

    pool_size = workers or cfg.workers or None

    console.print("\nRunning unit tests....\n")
    render_verification(verify_all(challenges, pool_size), console)

    if test_only:
        console.print("test-only specified, skipping actual tests.")
        return

    console.print("\nRunning actual tests...\n")
    resolver = FileInputResolver(cfg.inputs_dir, cfg.input_pattern)
    try:
        outcomes = execute_all(challenges, resolver, pool_size)
    except InputResolutionError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(code=3)
    render_execution(outcomes, console)


@app.command("list")
def list_challenges(
    year: Optional[int] = typer.Option(None, "--year", "-y", help="Only challenges from this year"),
    day: Optional[int] = typer.Option(None, "--day", "-d", help="Only challenges from this day"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to advent.yaml"),
):
    """Show registered challenges."""
    _, records = _get_env(config)
    challenges = select(records, year=year, day=day)
    if not challenges:
        console.print("[yellow]No challenges found![/yellow]")
        return
    render_challenges(challenges, console)

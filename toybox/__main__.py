"""CLI for the toybox console programs.

Usage:
    python -m toybox list              # Show available programs
    python -m toybox guess             # Number guessing game
    python -m toybox guess --seed 42   # Same target every time
    python -m toybox calc              # Menu-driven calculator
    python -m toybox -v calc           # With debug logging on stderr
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from toybox.calculator import CalculatorSession
from toybox.errors import ConfigError, InputClosed
from toybox.guessing import make_rng, play
from toybox.log import setup_logging
from toybox.models import PROGRAMS
from toybox.prompter import Prompter
from toybox.settings import Settings, load_settings

app = typer.Typer(
    name="toybox",
    help="Two small console programs: a guessing game and a calculator",
    no_args_is_help=True,
)
console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr"),
) -> None:
    """Load settings and configure logging before any command runs."""
    try:
        settings = load_settings()
    except ConfigError as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    setup_logging(logging.DEBUG if verbose else settings.log_level_value)
    ctx.obj = settings


@app.command("list")
def cmd_list() -> None:
    """Show available programs."""
    table = Table(title="Available Programs", show_header=True, header_style="bold")
    table.add_column("Command", style="green", min_width=8)
    table.add_column("Name", min_width=15)
    table.add_column("Description", min_width=30)

    for program in PROGRAMS:
        table.add_row(program.command, program.name, program.description)

    console.print()
    console.print(table)
    console.print()


@app.command("guess")
def cmd_guess(
    ctx: typer.Context,
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed the target draw (default: wall clock)"),
) -> None:
    """Guess a number between 1 and 100."""
    settings = _settings(ctx)
    rng = make_rng(seed if seed is not None else settings.seed)
    try:
        play(Prompter(console), console, err_console, rng)
    except InputClosed:
        err_console.print("\n[red]Input closed before the number was guessed.[/red]")
        raise typer.Exit(1)


@app.command("calc")
def cmd_calc() -> None:
    """Add, subtract, multiply, divide, modulus or power two numbers."""
    CalculatorSession(Prompter(console), console, err_console).run()


if __name__ == "__main__":
    app()

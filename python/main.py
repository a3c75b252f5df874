#!/usr/bin/env python3
"""8-Puzzle solver.

Usage::

    python main.py play                    # interactive game (Rich)
    python main.py play -f vanilla         # plain ANSI terminal
    python main.py solve 123405678 -a bfs  # solve a board
    python main.py shuffle -n 40 --json    # solvable scramble
    python main.py validate 1,2,3,4,5,6,8,7,0
"""

import importlib
import json
import logging
import random
import sys
from dataclasses import replace
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamesolver import get_strategy_info  # noqa: E402
from backend.engine.gameservice import PuzzleService, SolveReport  # noqa: E402
from backend.errors import PuzzleError  # noqa: E402
from backend.models.board import Board  # noqa: E402
from backend.models.codec import decode, pretty  # noqa: E402
from backend.settings import Settings, load_settings  # noqa: E402

console = Console()
err_console = Console(stderr=True)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _parse_cells(text: str) -> list[int]:
    """Accept ``"123405678"`` or ``"1,2,3,4,0,5,6,7,8"``."""
    text = text.strip()
    if "," in text:
        try:
            return [int(part) for part in text.split(",")]
        except ValueError:
            raise typer.BadParameter(f"Not a comma-separated list of ints: {text!r}") from None
    try:
        return decode(text).to_list()
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj


def _fail(message: str, code: int = 2) -> typer.Exit:
    err_console.print(f"[red]{escape(message)}[/red]")
    return typer.Exit(code=code)


def _print_solve(report: SolveReport) -> None:
    if report.status != "solved":
        console.print(
            f"[yellow]No solution found within the search bound "
            f"({report.algorithm}, status {report.status}).[/yellow]"
        )
    elif not report.moves:
        console.print("[green]Already solved![/green]")
    else:
        noun = "move" if len(report.moves) == 1 else "moves"
        console.print(f"[bold green]{len(report.moves)} {noun}:[/bold green] {' '.join(report.moves)}")

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_row("[dim]Algorithm[/dim]", report.algorithm)
    table.add_row("[dim]Expanded[/dim]", str(report.expanded))
    table.add_row("[dim]Time[/dim]", f"{report.solve_time_ms} ms")
    console.print(table)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config",
        help="JSON settings file (default: $PUZZLE_CONFIG or ./config.json).",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search details to stderr.",
    ),
) -> None:
    """8-Puzzle solver: A*, BFS and depth-limited DFS."""
    settings = load_settings(config)
    _configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@app.command()
def play(
    ctx: typer.Context,
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Terminal frontend to launch.",
    ),
) -> None:
    """Play interactively, with hints and animated solutions."""
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(settings=_settings(ctx))


@app.command()
def solve(
    ctx: typer.Context,
    board: str = typer.Argument(..., help="Board as 9 digits or a comma-separated list."),
    algorithm: Optional[str] = typer.Option(
        None, "-a", "--algorithm",
        help="astar, bfs or dfs (default from settings).",
    ),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth", min=0,
        help="Depth ceiling for dfs.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the JSON payload."),
) -> None:
    """Solve BOARD and print the move sequence."""
    settings = _settings(ctx)
    if max_depth is not None:
        settings = replace(settings, dfs_max_depth=max_depth)

    service = PuzzleService(settings)
    try:
        report = service.solve(_parse_cells(board), algorithm or settings.algorithm)
    except PuzzleError as e:
        raise _fail(str(e))

    if as_json:
        typer.echo(json.dumps(report.to_dict()))
    else:
        _print_solve(report)


@app.command()
def shuffle(
    ctx: typer.Context,
    steps: Optional[int] = typer.Option(
        None, "-n", "--steps",
        help="Random moves to apply from the goal (default from settings).",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible scramble."),
    as_json: bool = typer.Option(False, "--json", help="Print the JSON payload."),
) -> None:
    """Print a guaranteed-solvable scrambled board."""
    service = PuzzleService(_settings(ctx), rng=random.Random(seed))
    report = service.shuffle(steps)

    if as_json:
        typer.echo(json.dumps(report.to_dict()))
    else:
        console.print(pretty(Board.from_flat(report.shuffled)))
        console.print(f"[dim]{report.moves_applied} moves applied[/dim]")


@app.command()
def validate(
    ctx: typer.Context,
    board: str = typer.Argument(..., help="Board as 9 digits or a comma-separated list."),
    as_json: bool = typer.Option(False, "--json", help="Print the JSON payload."),
) -> None:
    """Check that BOARD is well-formed and solvable (exit 1 if not)."""
    report = PuzzleService(_settings(ctx)).validate(_parse_cells(board))

    if as_json:
        typer.echo(json.dumps(report.to_dict()))
    else:
        style = "green" if report.ok else "red"
        console.print(f"[{style}]{report.message}[/{style}]")

    if not report.ok:
        raise typer.Exit(code=1)


@app.command()
def algorithms() -> None:
    """List the available search algorithms."""
    table = Table(title="Algorithms")
    table.add_column("Token", style="bold cyan")
    table.add_column("Name")
    table.add_column("Description", style="dim")
    for info in get_strategy_info():
        table.add_row(info["name"], info["label"], info["description"])
    console.print(table)


if __name__ == "__main__":
    app()

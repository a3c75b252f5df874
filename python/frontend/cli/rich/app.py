"""Rich terminal frontend — styled board, status bar, and solution playback.

Uses the ``rich`` library for rendering while sharing the same input
handler and backend as the vanilla CLI.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Algorithm, SolveResult, SolveStatus
from backend.models.board import Board, Move
from backend.settings import Settings
from frontend.cli.actions import ALGORITHM_KEYS, ARROWS, MOVE_KEYS, format_time
from frontend.cli.input_handler import get_key_timeout

console = Console()

_GRADE_STYLES = {"good": "bold green", "ok": "bold yellow", "bad": "bold red"}


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(3):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r * 3 + c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _render_stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(format_time(game.state.elapsed_time), style="bold yellow")
    stats.append("    Distance: ", style="dim")
    stats.append(str(game.distance), style="bold yellow")
    stats.append("    Algorithm: ", style="dim")
    stats.append(game.algorithm.label, style="bold cyan")
    return stats


def _render_coach(game: GamePlay) -> Text:
    """Arrow per legal move, coloured by its effect on the distance."""
    line = Text("Coach: ", style="dim")
    for move, grade in game.coach().items():
        line.append(f" {ARROWS[move]} ", style=_GRADE_STYLES[grade])
    return line


def _render_controls() -> Text:
    controls = Text()
    for key, label in (
        ("↑↓←→/WASD", "move"),
        ("R", "shuffle"),
        ("N", "hint"),
        ("V", "solve"),
        ("1-3/Tab", "algorithm"),
        ("C", "coach"),
        ("Q", "quit"),
    ):
        controls.append(key, style="bold cyan")
        controls.append(f" {label}   ", style="dim")
    return controls


# -- screens ------------------------------------------------------------------


def _draw_game(game: GamePlay, status: str = "", coach: bool = False) -> None:
    console.clear()

    won = game.is_won and game.state.moves > 0
    parts = [Align.center(_render_board(game.state.board))]
    if won:
        parts.append(Align.center(Text("\n★ Solved! ★", style="bold green")))

    panel = Panel(
        Group(*parts),
        title="[bold cyan]8-Puzzle[/bold cyan]",
        border_style="bold green" if won else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_render_stats(game)))
    if coach:
        console.print(Align.center(_render_coach(game)))
    if status:
        console.print(Align.center(Text.from_markup(status)))
    console.print(Align.center(_render_controls()))


def _draw_playback(game: GamePlay, step: int, total: int, move: Move) -> None:
    console.clear()

    progress = Text()
    progress.append(f"Solving… move {step}/{total} ", style="bold cyan")
    progress.append(f"({move.code})", style="dim")

    panel = Panel(
        Align.center(_render_board(game.state.board)),
        title=f"[bold cyan]Auto-Solve  {game.algorithm.label}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(progress))


# -- solver helpers -----------------------------------------------------------


def _describe_failure(result: SolveResult) -> str:
    if result.status is SolveStatus.DEPTH_LIMITED:
        return (
            "[yellow]No solution found within the depth limit "
            f"({result.expanded} nodes expanded). Try A* or BFS.[/yellow]"
        )
    return f"[red]Search ended without a solution ({result.expanded} nodes expanded).[/red]"


def _show_hint(game: GamePlay) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"
    hint = game.hint()
    if hint is None:
        return "[yellow]No hint available.[/yellow]"
    return f"[cyan]Hint:[/cyan] move [bold]{ARROWS[hint]} {hint.name.lower()}[/bold]"


def _auto_solve(game: GamePlay, delay: float) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"

    t0 = time.perf_counter()
    result = game.solve()
    elapsed_ms = (time.perf_counter() - t0) * 1000
    if not result.solved:
        return _describe_failure(result)

    for i, move in enumerate(result.moves, 1):
        game.move(move)
        _draw_playback(game, i, result.length, move)
        time.sleep(delay)

    return (
        f"[bold green]Solved in {result.length} moves[/bold green] "
        f"[dim]({game.algorithm.label}, {result.expanded} expanded, "
        f"{elapsed_ms:.0f} ms)[/dim]"
    )


# -- game loop ----------------------------------------------------------------


def _game_loop(settings: Settings) -> None:
    game = GamePlay(
        algorithm=Algorithm.parse(settings.algorithm),
        max_depth=settings.dfs_max_depth,
    )
    status = "[dim]Press R to shuffle.[/dim]"
    coach = False

    while True:
        _draw_game(game, status, coach)
        status = ""

        # Redraw every 0.5 s while the clock runs.
        key = get_key_timeout(0.5)
        while key is None:
            if game.state.is_running:
                _draw_game(game, status, coach)
            key = get_key_timeout(0.5)

        if key in MOVE_KEYS:
            game.move(MOVE_KEYS[key])
        elif key in ALGORITHM_KEYS:
            game.algorithm = ALGORITHM_KEYS[key]
            status = f"[cyan]Algorithm:[/cyan] {game.algorithm.label}"
        elif key == "algorithm":
            status = f"[cyan]Algorithm:[/cyan] {game.cycle_algorithm().label}"
        elif key == "shuffle":
            game.shuffle(settings.shuffle_steps)
            status = "[yellow]Shuffled![/yellow]"
        elif key == "hint":
            status = _show_hint(game)
        elif key == "solve":
            status = _auto_solve(game, settings.playback_delay)
        elif key == "coach":
            coach = not coach
        elif key == "quit":
            return


# -- public entry point -------------------------------------------------------


def run(settings: Settings) -> None:
    """Launch the Rich CLI game."""
    _game_loop(settings)
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))

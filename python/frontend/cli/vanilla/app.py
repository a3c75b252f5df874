"""Vanilla terminal frontend — no third-party rendering.

Uses only print and ANSI codes for output, with the shared tty/termios
input handler.
"""

from __future__ import annotations

import sys
import time

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Algorithm, SolveStatus
from backend.models.board import Board
from backend.settings import Settings
from frontend.cli.actions import ALGORITHM_KEYS, ARROWS, MOVE_KEYS, format_time
from frontend.cli.input_handler import get_key_timeout


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset

_GRADE_COLOURS = {"good": _G, "ok": _Y, "bad": _RED}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    sep = "+---+---+---+"
    lines: list[str] = [sep]
    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} · {_R}")
            elif board.is_tile_correct(r * 3 + c):
                cells.append(f"{_G} {val} {_R}")
            else:
                cells.append(f" {val} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _stats_line(game: GamePlay) -> str:
    return (
        f"  Moves: {_Y}{game.state.moves}{_R}  |  "
        f"Time: {_Y}{format_time(game.state.elapsed_time)}{_R}  |  "
        f"Distance: {_Y}{game.distance}{_R}  |  "
        f"Algorithm: {_C}{game.algorithm.label}{_R}"
    )


def _coach_line(game: GamePlay) -> str:
    marks = "  ".join(
        f"{_GRADE_COLOURS[grade]}{ARROWS[move]}{_R}"
        for move, grade in game.coach().items()
    )
    return f"  Coach: {marks}"


# -- screens ------------------------------------------------------------------


def _show_game(game: GamePlay, status: str = "", coach: bool = False) -> None:
    _clear()
    print(f"  {_C}=== 8-Puzzle ==={_R}")
    print()
    print(_render_board(game.state.board))
    print()
    if game.is_won and game.state.moves > 0:
        print(f"  {_G}★ Solved! ★{_R}")
    print(_stats_line(game))
    if coach:
        print(_coach_line(game))
    if status:
        print(f"  {status}")
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_C}R{_R}: shuffle  |  "
        f"{_C}N{_R}: hint  |  "
        f"{_C}V{_R}: solve  |  "
        f"{_C}1-3{_R}/{_C}Tab{_R}: algorithm  |  "
        f"{_C}C{_R}: coach  |  "
        f"{_C}Q{_R}: quit"
    )


# -- solver helpers -----------------------------------------------------------


def _show_hint(game: GamePlay) -> str:
    if game.is_won:
        return f"{_G}Already solved!{_R}"
    hint = game.hint()
    if hint is None:
        return f"{_Y}No hint available.{_R}"
    return f"{_C}Hint:{_R} move {_BOLD}{ARROWS[hint]} {hint.name.lower()}{_R}"


def _auto_solve(game: GamePlay, delay: float) -> str:
    """Run the solver and animate moves.  Returns a status message."""
    if game.is_won:
        return f"{_G}Already solved!{_R}"

    result = game.solve()
    if result.status is SolveStatus.DEPTH_LIMITED:
        return f"{_Y}No solution within the depth limit. Try A* or BFS.{_R}"
    if not result.solved:
        return f"{_RED}Search ended without a solution.{_R}"

    for i, move in enumerate(result.moves, 1):
        game.move(move)
        _clear()
        print(f"  {_C}=== Solving… ({game.algorithm.label}) ==={_R}")
        print()
        print(_render_board(game.state.board))
        print()
        print(f"  Move {i}/{result.length}  ({move.code})")
        sys.stdout.flush()
        time.sleep(delay)

    return (
        f"{_G}Solved in {result.length} moves!{_R} "
        f"{_DIM}({result.expanded} expanded){_R}"
    )


# -- game loop ----------------------------------------------------------------


def _game_loop(settings: Settings) -> None:
    game = GamePlay(
        algorithm=Algorithm.parse(settings.algorithm),
        max_depth=settings.dfs_max_depth,
    )
    status = f"{_DIM}Press R to shuffle.{_R}"
    coach = False

    while True:
        _show_game(game, status, coach)
        status = ""

        key = get_key_timeout(0.5)
        while key is None:
            if game.state.is_running:
                _show_game(game, status, coach)
            key = get_key_timeout(0.5)

        if key in MOVE_KEYS:
            game.move(MOVE_KEYS[key])
        elif key in ALGORITHM_KEYS:
            game.algorithm = ALGORITHM_KEYS[key]
        elif key == "algorithm":
            game.cycle_algorithm()
        elif key == "shuffle":
            game.shuffle(settings.shuffle_steps)
            status = f"{_Y}Shuffled!{_R}"
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
    """Launch the vanilla CLI game."""
    _game_loop(settings)
    _clear()
    print("  Goodbye!\n")

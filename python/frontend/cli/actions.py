"""Key-action tables and small formatters shared by the CLI frontends."""

from __future__ import annotations

from backend.engine.gamesolver import Algorithm
from backend.models.board import Move

MOVE_KEYS: dict[str, Move] = {
    "up": Move.UP,
    "down": Move.DOWN,
    "left": Move.LEFT,
    "right": Move.RIGHT,
}

ALGORITHM_KEYS: dict[str, Algorithm] = {
    "astar": Algorithm.ASTAR,
    "bfs": Algorithm.BFS,
    "dfs": Algorithm.DFS,
}

ARROWS: dict[Move, str] = {
    Move.UP: "↑",
    Move.DOWN: "↓",
    Move.LEFT: "←",
    Move.RIGHT: "→",
}


def format_time(seconds: float) -> str:
    return f"{seconds:.1f} s"

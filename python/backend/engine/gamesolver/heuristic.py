"""Manhattan-distance heuristic for the 8-puzzle.

For every non-blank tile, add ``|row - goal_row| + |col - goal_col|``;
tile ``v`` belongs at index ``v - 1``.  A single move shifts exactly one
tile by one cell, so the sum drops by at most 1 per move: the estimate
is admissible and consistent, which is what the A* strategy relies on.
"""

from __future__ import annotations

from backend.models.board import CELLS, SIZE, Board


def _distance(index: int, tile: int) -> int:
    if tile == 0:
        return 0
    row, col = divmod(index, SIZE)
    goal_row, goal_col = divmod(tile - 1, SIZE)
    return abs(row - goal_row) + abs(col - goal_col)


# _TABLE[index][tile] -> contribution of *tile* sitting at *index*.
_TABLE: tuple[tuple[int, ...], ...] = tuple(
    tuple(_distance(i, t) for t in range(CELLS)) for i in range(CELLS)
)


def estimate(board: Board) -> int:
    """Return a lower bound on the moves left; 0 iff *board* is the goal."""
    return sum(_TABLE[i][v] for i, v in enumerate(board.cells))

"""8-puzzle solver facade."""

from __future__ import annotations

from backend.engine.gamesolver.algorithms import (
    Algorithm,
    create_strategy,
    get_strategy,
)
from backend.engine.gamesolver.result import SolveResult
from backend.engine.gamevalidator import validator
from backend.models.board import Board, Move


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        board: Board,
        algorithm: Algorithm | str = Algorithm.ASTAR,
        *,
        max_depth: int | None = None,
    ) -> SolveResult:
        """Solve *board* with the selected strategy.

        *max_depth* only applies to DFS; it replaces the default ceiling.
        """
        alg = Algorithm.parse(algorithm)
        if max_depth is not None and alg is Algorithm.DFS:
            strategy = create_strategy(alg, max_depth=max_depth)
        else:
            strategy = get_strategy(alg)
        return strategy.solve(board)

    @staticmethod
    def hint(
        board: Board,
        algorithm: Algorithm | str = Algorithm.ASTAR,
        *,
        max_depth: int | None = None,
    ) -> Move | None:
        """Return the first move of a solution, or ``None`` if solved / not found."""
        if board.is_goal():
            return None
        if not Solver.is_solvable(board):
            return None

        result = Solver.solve(board, algorithm, max_depth=max_depth)
        return result.moves[0] if result.moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return validator.is_solvable(board)

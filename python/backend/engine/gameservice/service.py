"""Client-facing puzzle operations: solve, shuffle, validate.

Inputs are raw cell lists as a client sends them; outputs are plain
payload dataclasses whose ``to_dict`` matches the JSON wire format.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Sequence
from dataclasses import dataclass

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Algorithm, Solver, SolveResult
from backend.engine.gamevalidator import ValidationReport, validate
from backend.errors import InvalidPuzzleError
from backend.models.board import Board, Move
from backend.models.codec import encode
from backend.settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveReport:
    algorithm: str
    moves: list[str]
    states: list[list[int]]
    expanded: int
    solve_time_ms: int
    status: str

    @classmethod
    def from_result(
        cls, algorithm: Algorithm, result: SolveResult, solve_time_ms: int
    ) -> SolveReport:
        return cls(
            algorithm=algorithm.value,
            moves=result.move_codes,
            states=[b.to_list() for b in result.path],
            expanded=result.expanded,
            solve_time_ms=solve_time_ms,
            status=result.status.value,
        )

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "moves": self.moves,
            "solveTimeMs": self.solve_time_ms,
            "expandedNodeCount": self.expanded,
            "pathStates": self.states,
            "status": self.status,
        }


@dataclass(frozen=True)
class ShuffleReport:
    shuffled: list[int]
    moves_applied: int

    def to_dict(self) -> dict:
        return {"shuffledState": self.shuffled, "movesAppliedCount": self.moves_applied}


class PuzzleService:
    """Validates input, picks a strategy, runs it and packages the result."""

    def __init__(
        self, settings: Settings | None = None, rng: random.Random | None = None
    ) -> None:
        self.settings = settings or Settings()
        self._rng = rng or random.Random()

    # -- operations -----------------------------------------------------------

    def solve(
        self, cells: Sequence[int] | None, algorithm: Algorithm | str | None
    ) -> SolveReport:
        """Solve a client-supplied state.

        Raises:
            InvalidPuzzleError: Missing, malformed or unsolvable state, or
                no algorithm given
            UnsupportedAlgorithmError: Unknown algorithm token
            SearchExhaustedError: An optimal strategy failed on a state
                that passed validation
        """
        if cells is None:
            raise InvalidPuzzleError("Solve request start state is missing.")
        if algorithm is None:
            raise InvalidPuzzleError(
                "Solve request algorithm is missing (expected astar, bfs, or dfs)."
            )

        board = self._checked_board(cells)
        alg = Algorithm.parse(algorithm)

        t0 = time.perf_counter()
        result = Solver.solve(board, alg, max_depth=self.settings.dfs_max_depth)
        elapsed_ms = int((time.perf_counter() - t0) * 1000)

        logger.info(
            "solve %s with %s: %s, %d moves, %d expanded, %d ms",
            encode(board), alg, result.status, result.length, result.expanded, elapsed_ms,
        )
        return SolveReport.from_result(alg, result, elapsed_ms)

    def shuffle(self, steps: int | None = None) -> ShuffleReport:
        if steps is None:
            steps = self.settings.shuffle_steps
        outcome = GameGenerator.scramble(steps, self._rng)
        logger.info("shuffle %d steps -> %s", outcome.moves_applied, encode(outcome.board))
        return ShuffleReport(
            shuffled=outcome.board.to_list(), moves_applied=outcome.moves_applied
        )

    def validate(self, cells: Sequence[int] | None) -> ValidationReport:
        return validate(cells)

    def hint(
        self, cells: Sequence[int] | None, algorithm: Algorithm | str | None = None
    ) -> Move | None:
        """Return the first move of a solution for *cells*, or ``None``."""
        if cells is None:
            raise InvalidPuzzleError("Hint request state is missing.")
        board = self._checked_board(cells)
        return Solver.hint(
            board,
            Algorithm.parse(algorithm or self.settings.algorithm),
            max_depth=self.settings.dfs_max_depth,
        )

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _checked_board(cells: Sequence[int]) -> Board:
        report = validate(cells)
        if not report.valid:
            raise InvalidPuzzleError(f"Invalid state: {report.message}")
        if not report.solvable:
            raise InvalidPuzzleError(f"Unsolvable state: {report.message}")
        return Board.from_flat(cells)

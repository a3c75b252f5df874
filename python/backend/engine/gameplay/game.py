"""Core gameplay logic — processes moves, shuffles, hints and coaching."""

from __future__ import annotations

import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Algorithm, Solver, SolveResult, estimate
from backend.engine.gamestate import GameState
from backend.models.board import Board, Move


class GamePlay:
    """Orchestrates a single game session.

    Moves name the direction the *blank* travels, the same convention the
    solver uses, so a solution can be replayed move by move.
    """

    def __init__(
        self,
        board: Board | None = None,
        algorithm: Algorithm = Algorithm.ASTAR,
        max_depth: int | None = None,
    ) -> None:
        self.state = GameState(board if board is not None else GameGenerator.solved())
        self.algorithm = algorithm
        # DFS ceiling; None keeps the strategy default.
        self.max_depth = max_depth

    @classmethod
    def from_board(
        cls,
        board: Board,
        algorithm: Algorithm = Algorithm.ASTAR,
        max_depth: int | None = None,
    ) -> GamePlay:
        """Create a game session from an existing board (e.g. parsed from the CLI)."""
        return cls(board, algorithm, max_depth)

    # -- movement -------------------------------------------------------------

    def move(self, move: Move) -> bool:
        """Move the blank one cell in *move*'s direction.

        Returns True if the move was legal and applied.  The first move
        starts the clock; reaching the goal stops it.
        """
        board = self.state.board
        if not board.can_move(move):
            return False

        if not self.state.is_running and not self.state.is_solved:
            self.state.resume()
        self.state.advance(board.apply(move))
        if self.state.is_solved:
            self.state.pause()
        return True

    def apply_code(self, code: str) -> bool:
        """Apply a one-letter move code; unknown codes are ignored."""
        try:
            move = Move.from_code(code)
        except ValueError:
            return False
        return self.move(move)

    def shuffle(self, steps: int, rng: random.Random | None = None) -> None:
        """Replace the board with a fresh scramble and restart the clock."""
        self.state = GameState(GameGenerator.generate(steps, rng))
        self.state.resume()

    def reset(self) -> None:
        self.state = GameState(GameGenerator.solved())

    # -- solver helpers -------------------------------------------------------

    def solve(self) -> SolveResult:
        return Solver.solve(self.state.board, self.algorithm, max_depth=self.max_depth)

    def hint(self) -> Move | None:
        return Solver.hint(self.state.board, self.algorithm, max_depth=self.max_depth)

    def coach(self) -> dict[Move, str]:
        """Grade each legal move by how it changes the Manhattan distance.

        ``"good"`` lowers it, ``"ok"`` keeps it, ``"bad"`` raises it.
        """
        board = self.state.board
        h0 = estimate(board)
        grades: dict[Move, str] = {}
        for move in Move:
            if not board.can_move(move):
                continue
            dh = estimate(board.apply(move)) - h0
            grades[move] = "good" if dh < 0 else "ok" if dh == 0 else "bad"
        return grades

    def cycle_algorithm(self) -> Algorithm:
        algorithms = list(Algorithm)
        self.algorithm = algorithms[(algorithms.index(self.algorithm) + 1) % len(algorithms)]
        return self.algorithm

    # -- queries --------------------------------------------------------------

    @property
    def distance(self) -> int:
        return estimate(self.state.board)

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

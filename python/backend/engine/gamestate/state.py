"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time

from backend.models.board import Board


class GameState:
    """Holds the current board, move counter, and elapsed time.

    The clock starts stopped and is started by the first manual move,
    like the web client's timer.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self._start_time: float = 0.0
        self._elapsed_banked: float = 0.0
        self._running: bool = False

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    @property
    def is_running(self) -> bool:
        return self._running

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.time()
            self._running = True

    def reset_clock(self) -> None:
        self._elapsed_banked = 0.0
        self._running = False

    # -- moves ----------------------------------------------------------------

    def advance(self, board: Board) -> None:
        self.board = board
        self.moves += 1

    @property
    def is_solved(self) -> bool:
        return self.board.is_goal()

"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from backend.models.board import GOAL, Board, Move
from backend.models.codec import encode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShuffleOutcome:
    board: Board
    moves_applied: int


class GameGenerator:
    """Creates solvable puzzles by walking randomly away from the goal.

    Every step is a legal move, so the result is always reachable.
    """

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        return GOAL

    @staticmethod
    def scramble(steps: int, rng: random.Random | None = None) -> ShuffleOutcome:
        """Apply *steps* random legal moves to the goal board.

        A step never undoes the previous one unless nothing else is legal.
        Negative *steps* counts as zero.
        """
        rng = rng or random.Random()
        board = GOAL
        prev: Move | None = None
        applied = 0

        for _ in range(max(0, steps)):
            neighbors = board.neighbors()
            if prev is not None:
                forward = [n for n in neighbors if n[1] is not prev.opposite()]
                if forward:
                    neighbors = forward
            board, prev = rng.choice(neighbors)
            applied += 1

        logger.debug("scrambled %d steps -> %s", applied, encode(board))
        return ShuffleOutcome(board=board, moves_applied=applied)

    @staticmethod
    def generate(steps: int, rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board that is not already solved."""
        rng = rng or random.Random()
        outcome = GameGenerator.scramble(steps, rng)

        # A walk can loop back to the goal; nothing to retry for zero steps.
        while outcome.board.is_goal() and steps > 0:
            outcome = GameGenerator.scramble(steps, rng)

        return outcome.board

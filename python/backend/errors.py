"""Exception types raised by the puzzle backend."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error the backend raises on purpose."""


class InvalidPuzzleError(PuzzleError, ValueError):
    """A submitted state is malformed or cannot reach the goal."""


class UnsupportedAlgorithmError(PuzzleError, ValueError):
    """No strategy is registered under the requested algorithm."""


class IllegalMoveError(PuzzleError, ValueError):
    """A move would push the blank off the grid."""


class SearchExhaustedError(PuzzleError, RuntimeError):
    """An optimal strategy emptied its frontier without reaching the goal.

    For a validated, solvable start this cannot happen, so it always
    points at an upstream validation gap or a defect in the search.
    """

    def __init__(self, algorithm: str, expanded: int) -> None:
        super().__init__(
            f"{algorithm} exhausted its frontier after expanding "
            f"{expanded} nodes without reaching the goal."
        )
        self.algorithm = algorithm
        self.expanded = expanded

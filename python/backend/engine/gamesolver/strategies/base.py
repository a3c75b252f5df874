"""Common contract for the search strategies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from backend.engine.gamesolver.node import SearchNode, SearchTree
from backend.engine.gamesolver.result import SolveResult
from backend.models.board import Board
from backend.models.codec import encode

logger = logging.getLogger(__name__)


class SolverStrategy(ABC):
    """Base class for all strategies.

    ``solve`` handles the shared preamble (argument check, already-solved
    fast path) and hands everything else to ``_search``.  A strategy keeps
    no per-call state on ``self``, so one instance can serve concurrent
    calls.

    Attributes:
        name: Wire token the selector registers the strategy under
        description: Human-readable summary for the UI
    """

    name: str = "base"
    description: str = "Base strategy"

    def solve(self, start: Board) -> SolveResult:
        """Search from *start* to the goal.

        The caller is expected to pass a structurally valid, solvable
        board; only a missing board is rejected here.
        """
        if start is None:
            raise ValueError("start board cannot be None.")

        if start.is_goal():
            return SolveResult.already_solved(start)

        logger.debug("%s: searching from %s", self.name, encode(start))
        result = self._search(start)
        logger.debug(
            "%s: %s, %d moves, %d expanded",
            self.name, result.status, result.length, result.expanded,
        )
        return result

    @abstractmethod
    def _search(self, start: Board) -> SolveResult:
        """Run the search proper; *start* is never the goal here."""

    @staticmethod
    def _build_result(tree: SearchTree, goal: SearchNode, expanded: int) -> SolveResult:
        moves, path = tree.path_to(goal)
        return SolveResult(moves=moves, path=path, expanded=expanded)

"""A* strategy: best-first search on ``f = g + h``."""

from __future__ import annotations

import logging
from collections.abc import Callable

from backend.engine.gamesolver.frontier import PriorityFrontier
from backend.engine.gamesolver.heuristic import estimate
from backend.engine.gamesolver.node import SearchNode, SearchTree, priority
from backend.engine.gamesolver.result import SolveResult
from backend.engine.gamesolver.strategies.base import SolverStrategy
from backend.errors import SearchExhaustedError
from backend.models.board import Board

logger = logging.getLogger(__name__)


class AStarStrategy(SolverStrategy):
    """Optimal informed search.

    The frontier may hold several entries for the same board; re-pushing
    is cheaper than a decrease-key.  Whichever entry pops first wins and
    the rest are dropped by the closed-set check on removal.  With a
    consistent heuristic the first goal popped has the optimal ``g``.
    """

    name = "astar"
    description = "A* with Manhattan distance (optimal)"

    def __init__(self, heuristic: Callable[[Board], int] = estimate) -> None:
        self.heuristic = heuristic

    def _search(self, start: Board) -> SolveResult:
        tree = SearchTree()
        frontier: PriorityFrontier[SearchNode] = PriorityFrontier(key=priority)
        frontier.push(tree.add_root(start, h=self.heuristic(start)))
        closed: set[Board] = set()
        expanded = 0

        while frontier:
            node = frontier.pop()
            if node.board in closed:
                continue  # stale duplicate
            closed.add(node.board)

            if node.board.is_goal():
                return self._build_result(tree, node, expanded)

            expanded += 1
            for board, move in node.board.neighbors():
                if board in closed:
                    continue
                frontier.push(tree.add_child(node, board, move, h=self.heuristic(board)))

        logger.error("astar: frontier exhausted after %d expansions", expanded)
        raise SearchExhaustedError(self.name, expanded)

"""Breadth-first strategy: uninformed, shortest path in moves."""

from __future__ import annotations

import logging
from collections import deque

from backend.engine.gamesolver.node import SearchNode, SearchTree
from backend.engine.gamesolver.result import SolveResult
from backend.engine.gamesolver.strategies.base import SolverStrategy
from backend.errors import SearchExhaustedError
from backend.models.board import Board

logger = logging.getLogger(__name__)


class BreadthFirstStrategy(SolverStrategy):
    """Level-order search with a FIFO frontier.

    Boards are marked seen when enqueued, not when dequeued, so each board
    enters the queue at most once.  The goal test runs when a child is
    generated: levels are explored in order, so the first goal generated
    sits at minimum depth.
    """

    name = "bfs"
    description = "Breadth-first search (optimal, uninformed)"

    def _search(self, start: Board) -> SolveResult:
        tree = SearchTree()
        queue: deque[SearchNode] = deque([tree.add_root(start)])
        seen: set[Board] = {start}
        expanded = 0

        while queue:
            node = queue.popleft()
            expanded += 1

            for board, move in node.board.neighbors():
                if board in seen:
                    continue
                seen.add(board)
                child = tree.add_child(node, board, move)
                if board.is_goal():
                    return self._build_result(tree, child, expanded)
                queue.append(child)

        logger.error("bfs: frontier exhausted after %d expansions", expanded)
        raise SearchExhaustedError(self.name, expanded)

"""Depth-first strategy with a fixed depth ceiling.

Not optimal and not complete: a board whose solution lies beyond the
ceiling, or behind the fixed exploration order within it, is reported as
``DEPTH_LIMITED``.  That status means "not found within bound", never
"unsolvable".  The trade-off keeps response times short; raise
``max_depth`` to search further.
"""

from __future__ import annotations

import logging

from backend.engine.gamesolver.node import SearchNode, SearchTree
from backend.engine.gamesolver.result import SolveResult, SolveStatus
from backend.engine.gamesolver.strategies.base import SolverStrategy
from backend.models.board import Board, Move

logger = logging.getLogger(__name__)

# Optimal 8-puzzle solutions never exceed 31 moves.
MAX_DEPTH = 60

# Exploration order, highest priority first.
ORDER: tuple[Move, ...] = (Move.RIGHT, Move.DOWN, Move.LEFT, Move.UP)


def _rank(successor: tuple[Board, Move]) -> int:
    return ORDER.index(successor[1])


class DepthFirstStrategy(SolverStrategy):
    name = "dfs"
    description = f"Depth-first search, capped at {MAX_DEPTH} moves (not optimal)"

    def __init__(self, max_depth: int = MAX_DEPTH) -> None:
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}.")
        self.max_depth = max_depth

    def _search(self, start: Board) -> SolveResult:
        tree = SearchTree()
        stack: list[SearchNode] = [tree.add_root(start)]
        seen: set[Board] = {start}
        expanded = 0
        pruned = 0

        while stack:
            node = stack.pop()
            if node.board.is_goal():
                return self._build_result(tree, node, expanded)

            if node.g >= self.max_depth:
                pruned += 1
                continue

            expanded += 1
            successors = sorted(node.board.neighbors(), key=_rank)
            # Reverse push so the highest-priority move is popped next.
            for board, move in reversed(successors):
                if board not in seen:
                    seen.add(board)
                    stack.append(tree.add_child(node, board, move))

        status = SolveStatus.DEPTH_LIMITED if pruned else SolveStatus.EXHAUSTED
        logger.info(
            "dfs: no solution within depth %d (%d expanded, %d pruned)",
            self.max_depth, expanded, pruned,
        )
        return SolveResult.not_found(expanded, status)

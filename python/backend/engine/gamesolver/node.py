"""Search nodes and the per-solve arena that owns them.

Nodes refer to their parent by arena index instead of by object, so a
whole search tree is a flat list that is dropped in one go when the
``solve`` call returns.
"""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Board, Move


@dataclass(frozen=True, slots=True)
class SearchNode:
    index: int
    board: Board
    parent: int | None
    move: Move | None
    g: int
    h: int = 0

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def is_root(self) -> bool:
        return self.parent is None


def priority(node: SearchNode) -> tuple[int, int, int]:
    """Frontier key: lowest ``f`` first, then lowest ``h``, then lowest ``g``.

    Among equal-``f`` nodes this prefers the ones that look closer to the
    goal; ``f`` stays the dominant key, so optimality is unaffected.
    """
    return (node.f, node.h, node.g)


class SearchTree:
    """Append-only arena of ``SearchNode`` records for one search."""

    def __init__(self) -> None:
        self._nodes: list[SearchNode] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> SearchNode:
        return self._nodes[index]

    # -- growth ---------------------------------------------------------------

    def add_root(self, board: Board, h: int = 0) -> SearchNode:
        if self._nodes:
            raise RuntimeError("SearchTree already has a root.")
        return self._append(board, None, None, 0, h)

    def add_child(
        self, parent: SearchNode, board: Board, move: Move, h: int = 0
    ) -> SearchNode:
        return self._append(board, parent.index, move, parent.g + 1, h)

    # -- path reconstruction --------------------------------------------------

    def path_to(self, node: SearchNode) -> tuple[tuple[Move, ...], tuple[Board, ...]]:
        """Walk parent links back to the root.

        Returns the moves and boards in start → *node* order; the board
        tuple includes both the root and *node*.
        """
        moves: list[Move] = []
        boards: list[Board] = []
        current: SearchNode | None = node
        while current is not None:
            boards.append(current.board)
            if current.move is not None:
                moves.append(current.move)
            current = None if current.parent is None else self._nodes[current.parent]
        moves.reverse()
        boards.reverse()
        return tuple(moves), tuple(boards)

    # -- helpers --------------------------------------------------------------

    def _append(
        self,
        board: Board,
        parent: int | None,
        move: Move | None,
        g: int,
        h: int,
    ) -> SearchNode:
        node = SearchNode(
            index=len(self._nodes), board=board, parent=parent, move=move, g=g, h=h
        )
        self._nodes.append(node)
        return node

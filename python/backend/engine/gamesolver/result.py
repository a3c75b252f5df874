"""Outcome of a single strategy run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.models.board import Board, Move


class SolveStatus(StrEnum):
    SOLVED = "solved"
    # Bounded search gave up: nodes were cut at the depth ceiling, so a
    # solution may still exist.  Never read this as "unsolvable".
    DEPTH_LIMITED = "depth_limited"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class SolveResult:
    """Moves and boards from start to goal, plus search diagnostics.

    ``path`` holds ``len(moves) + 1`` boards when solved and is empty
    otherwise.  ``expanded`` counts nodes whose successors were generated.
    """

    moves: tuple[Move, ...]
    path: tuple[Board, ...]
    expanded: int
    status: SolveStatus = SolveStatus.SOLVED

    @classmethod
    def already_solved(cls, start: Board) -> SolveResult:
        return cls(moves=(), path=(start,), expanded=0)

    @classmethod
    def not_found(cls, expanded: int, status: SolveStatus) -> SolveResult:
        return cls(moves=(), path=(), expanded=expanded, status=status)

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED

    @property
    def move_codes(self) -> list[str]:
        return [m.code for m in self.moves]

    @property
    def length(self) -> int:
        return len(self.moves)

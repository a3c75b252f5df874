"""Board model for the 8-puzzle."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from backend.errors import IllegalMoveError

SIZE = 3
CELLS = SIZE * SIZE


class Move(StrEnum):
    """Direction the *blank* travels; the value is its one-letter code."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def code(self) -> str:
        return self.value

    @property
    def row_delta(self) -> int:
        return _DELTAS[self][0]

    @property
    def col_delta(self) -> int:
        return _DELTAS[self][1]

    def opposite(self) -> Move:
        return _OPPOSITES[self]

    @classmethod
    def from_code(cls, code: str) -> Move:
        """Parse ``"U"``, ``"d"``, ``" L "`` ... into a move."""
        try:
            return cls(code.strip().upper())
        except (AttributeError, ValueError):
            raise ValueError(
                f"Unsupported move code: {code!r} (expected U, D, L, R)"
            ) from None


_DELTAS: dict[Move, tuple[int, int]] = {
    Move.UP: (-1, 0),
    Move.DOWN: (1, 0),
    Move.LEFT: (0, -1),
    Move.RIGHT: (0, 1),
}

_OPPOSITES: dict[Move, Move] = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}

# For each blank index, the indices whose tile can slide into it.
#   0 1 2
#   3 4 5
#   6 7 8
_ADJACENCY: tuple[tuple[int, ...], ...] = (
    (1, 3),
    (0, 2, 4),
    (1, 5),
    (0, 4, 6),
    (1, 3, 5, 7),
    (2, 4, 8),
    (3, 7),
    (4, 6, 8),
    (5, 7),
)


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable 3×3 board.

    Cells are stored as a flat row-major tuple of ints; 0 is the blank.
    Equality and hashing are structural, so boards work as set and dict
    keys.  Permutation validity is the validator's job, not this class's.
    """

    cells: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        cells = tuple(flat)
        if len(cells) != CELLS:
            raise ValueError(
                f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(cells)}."
            )
        return cls(cells=cells)

    @classmethod
    def goal(cls) -> Board:
        return GOAL

    # -- queries --------------------------------------------------------------

    def blank_index(self) -> int:
        try:
            return self.cells.index(0)
        except ValueError:
            raise ValueError(f"Board {self.cells} has no blank tile.") from None

    def is_goal(self) -> bool:
        return self.cells == GOAL.cells

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* sits on its goal cell."""
        val = self.cells[index]
        if val == 0:
            return index == CELLS - 1
        return index == val - 1

    def can_move(self, move: Move) -> bool:
        row, col = divmod(self.blank_index(), SIZE)
        return (
            0 <= row + move.row_delta < SIZE
            and 0 <= col + move.col_delta < SIZE
        )

    def neighbors(self) -> list[tuple[Board, Move]]:
        """Return every legal successor with the move that produces it.

        Order follows the fixed adjacency table, so it is the same for
        every call on the same board.
        """
        blank = self.blank_index()
        blank_row, blank_col = divmod(blank, SIZE)
        results: list[tuple[Board, Move]] = []
        for src in _ADJACENCY[blank]:
            row, col = divmod(src, SIZE)
            if row == blank_row:
                move = Move.LEFT if col < blank_col else Move.RIGHT
            else:
                move = Move.UP if row < blank_row else Move.DOWN
            results.append((self._swap(blank, src), move))
        return results

    def apply(self, move: Move) -> Board:
        """Return the board reached by moving the blank in *move*'s direction."""
        blank = self.blank_index()
        row, col = divmod(blank, SIZE)
        nr, nc = row + move.row_delta, col + move.col_delta
        if not (0 <= nr < SIZE and 0 <= nc < SIZE):
            raise IllegalMoveError(
                f"Cannot move blank {move.name} from ({row}, {col})."
            )
        return self._swap(blank, nr * SIZE + nc)

    def to_list(self) -> list[int]:
        return list(self.cells)

    def rows(self) -> list[list[int]]:
        return [list(self.cells[r * SIZE : (r + 1) * SIZE]) for r in range(SIZE)]

    # -- helpers --------------------------------------------------------------

    def _swap(self, blank: int, src: int) -> Board:
        cells = list(self.cells)
        cells[blank] = cells[src]
        cells[src] = 0
        return Board(cells=tuple(cells))


GOAL = Board(cells=(1, 2, 3, 4, 5, 6, 7, 8, 0))

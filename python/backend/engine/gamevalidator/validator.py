"""Structural and solvability checks for submitted 8-puzzle states.

A state must be 9 integers covering 0..8 exactly once.  On a 3-wide
board a state can reach the goal iff the number of inversions among its
non-blank tiles is even.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass

from backend.models.board import CELLS, Board


@dataclass(frozen=True)
class ValidationReport:
    valid: bool
    solvable: bool
    message: str

    @property
    def ok(self) -> bool:
        return self.valid and self.solvable

    def to_dict(self) -> dict:
        return asdict(self)


def count_inversions(cells: Sequence[int]) -> int:
    """Count pairs ``i < j`` with ``cells[i] > cells[j]``, blank ignored."""
    tiles = [v for v in cells if v != 0]
    inversions = 0
    for i in range(len(tiles)):
        for j in range(i + 1, len(tiles)):
            if tiles[i] > tiles[j]:
                inversions += 1
    return inversions


def is_solvable(board: Board) -> bool:
    return count_inversions(board.cells) % 2 == 0


def shape_error(cells: Sequence[int] | None) -> str | None:
    """Return why *cells* is not a permutation of 0..8, or ``None`` if it is."""
    if cells is None:
        return "Puzzle state is missing."
    if len(cells) != CELLS:
        return f"Invalid shape: expected length {CELLS}, got {len(cells)}."

    seen: set[int] = set()
    for value in cells:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < CELLS:
            return f"Invalid tile value: {value!r} (allowed range is 0..{CELLS - 1})."
        if value in seen:
            return f"Duplicate tile value detected: {value}."
        seen.add(value)
    return None


def validate(cells: Sequence[int] | None) -> ValidationReport:
    error = shape_error(cells)
    if error is not None:
        return ValidationReport(valid=False, solvable=False, message=error)

    inversions = count_inversions(cells)
    if inversions % 2:
        return ValidationReport(
            valid=True,
            solvable=False,
            message=(
                "Unsolvable 3×3 configuration: inversion count is odd "
                f"({inversions})."
            ),
        )
    return ValidationReport(valid=True, solvable=True, message="State is valid and solvable.")

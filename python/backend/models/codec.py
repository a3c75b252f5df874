"""Compact string keys for boards (``"123405678"``), used in logs and CLI."""

from __future__ import annotations

from backend.models.board import CELLS, SIZE, Board

_DIGITS = frozenset("012345678")


def encode(board: Board) -> str:
    for i, v in enumerate(board.cells):
        if not 0 <= v <= 8:
            raise ValueError(
                f"Tile value out of range at index {i}: {v} (expected 0..8)"
            )
    return "".join(str(v) for v in board.cells)


def decode(key: str) -> Board:
    """Rebuild a board from a 9-character key over ``'0'..'8'``.

    Only the alphabet and length are checked here; whether the digits form
    a permutation is left to the validator.
    """
    if len(key) != CELLS:
        raise ValueError(f"Key must be length {CELLS}, got {len(key)}.")
    for i, ch in enumerate(key):
        if ch not in _DIGITS:
            raise ValueError(
                f"Invalid character at position {i}: {ch!r} (expected '0'..'8')"
            )
    return Board(cells=tuple(int(ch) for ch in key))


def pretty(board: Board) -> str:
    """Render the board as three space-separated rows."""
    return "\n".join(
        " ".join(str(v) for v in board.cells[r * SIZE : (r + 1) * SIZE])
        for r in range(SIZE)
    )

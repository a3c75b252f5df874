"""Shared fixtures; puts ``python/`` on the import path for plain ``pytest`` runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.board import Board  # noqa: E402


@pytest.fixture
def one_move_board() -> Board:
    return Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run in an empty directory with no ``$PUZZLE_CONFIG``."""
    monkeypatch.delenv("PUZZLE_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path

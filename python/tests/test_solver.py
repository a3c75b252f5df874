"""Solver test suite — replays every solution through the game engine.

Boards are built by walking the blank away from the goal, so each one is
solvable and its optimal length is at most the walk length.  Every test
is hard-killed by ``pytest-timeout`` (configured in ``pyproject.toml``).
"""

from __future__ import annotations

import pytest

from backend.engine.gameplay.game import GamePlay
from backend.engine.gamesolver import Algorithm, SolveStatus, Solver
from backend.engine.gamesolver.strategies import (
    AStarStrategy,
    BreadthFirstStrategy,
    DepthFirstStrategy,
)
from backend.errors import SearchExhaustedError
from backend.models.board import GOAL, Board, Move

# (id, blank walk from the goal)
_WALKS = [
    ("one", "U"),
    ("two", "LU"),
    ("corner", "ULUL"),
    ("loop", "LLUURDDR"),
    ("zigzag", "ULDLUURD"),
    ("snake", "LULURDRDLLUURRDD"),
    ("ring", "UULLDDRRUULLDDRR"),
]

_LONG_WALKS = [w for w in _WALKS if len(w[1]) >= 16]


def _ids(walk: tuple[str, str]) -> str:
    return walk[0]


# -- helpers ------------------------------------------------------------------


def scrambled(moves: str) -> Board:
    """Apply a string of blank-move codes to the goal board."""
    board = GOAL
    for code in moves:
        board = board.apply(Move.from_code(code))
    return board


def _assert_replays(board: Board, moves: tuple[Move, ...]) -> None:
    """Apply *moves* through the real game engine and check the win."""
    game = GamePlay.from_board(board)
    for i, move in enumerate(moves):
        ok = game.move(move)
        assert ok, f"Move {i} ({move.code}) was illegal on {game.state.board.cells}"
    assert game.is_won, f"Board not solved after {len(moves)} moves"


def _assert_path(board: Board, result) -> None:
    assert len(result.path) == len(result.moves) + 1
    assert result.path[0] == board
    assert result.path[-1] == GOAL
    for before, move, after in zip(result.path, result.moves, result.path[1:]):
        assert before.apply(move) == after


# -- optimal strategies -------------------------------------------------------


@pytest.mark.parametrize("walk", _WALKS, ids=_ids)
@pytest.mark.parametrize("algorithm", [Algorithm.ASTAR, Algorithm.BFS], ids=str)
def test_optimal_solution_replays(walk: tuple[str, str], algorithm: Algorithm) -> None:
    board = scrambled(walk[1])
    result = Solver.solve(board, algorithm)

    assert result.status is SolveStatus.SOLVED
    assert result.length <= len(walk[1])
    _assert_path(board, result)
    _assert_replays(board, result.moves)


@pytest.mark.parametrize("walk", _WALKS, ids=_ids)
def test_astar_and_bfs_agree_on_length(walk: tuple[str, str]) -> None:
    board = scrambled(walk[1])
    assert Solver.solve(board, "astar").length == Solver.solve(board, "bfs").length


@pytest.mark.parametrize("walk", _LONG_WALKS, ids=_ids)
def test_astar_expands_no_more_than_bfs(walk: tuple[str, str]) -> None:
    board = scrambled(walk[1])
    astar = Solver.solve(board, Algorithm.ASTAR)
    bfs = Solver.solve(board, Algorithm.BFS)
    assert astar.expanded <= bfs.expanded


# One of the hardest 8-puzzle boards: 31 moves from the goal.
_DEEP = Board.from_flat([8, 6, 7, 2, 5, 4, 3, 0, 1])


@pytest.mark.parametrize("algorithm", [Algorithm.ASTAR, Algorithm.BFS], ids=str)
def test_deep_board_optimal_length(algorithm: Algorithm) -> None:
    result = Solver.solve(_DEEP, algorithm)

    assert result.status is SolveStatus.SOLVED
    assert result.length == 31
    _assert_path(_DEEP, result)
    _assert_replays(_DEEP, result.moves)


def test_deep_board_astar_prunes_most_of_bfs() -> None:
    astar = Solver.solve(_DEEP, Algorithm.ASTAR)
    bfs = Solver.solve(_DEEP, Algorithm.BFS)
    assert astar.expanded * 10 < bfs.expanded


@pytest.mark.parametrize(
    "cells, expected",
    [
        ([1, 2, 3, 4, 5, 6, 7, 0, 8], ["R"]),
        ([1, 2, 3, 4, 5, 6, 0, 7, 8], ["R", "R"]),
        ([1, 2, 3, 4, 0, 6, 7, 5, 8], ["D", "R"]),
        ([1, 2, 3, 4, 5, 0, 7, 8, 6], ["D"]),
    ],
    ids=["right", "right-right", "down-right", "down"],
)
def test_hand_computed_solutions(cells: list[int], expected: list[str]) -> None:
    result = Solver.solve(Board.from_flat(cells), Algorithm.ASTAR)
    assert result.move_codes == expected


def test_one_move_scenario(one_move_board: Board) -> None:
    result = AStarStrategy().solve(one_move_board)

    assert result.move_codes == ["R"]
    assert result.path == (one_move_board, GOAL)
    assert result.expanded == 1


# -- fast path ----------------------------------------------------------------


@pytest.mark.parametrize("algorithm", list(Algorithm), ids=str)
def test_goal_board_needs_no_search(algorithm: Algorithm) -> None:
    result = Solver.solve(GOAL, algorithm)

    assert result.moves == ()
    assert result.path == (GOAL,)
    assert result.expanded == 0
    assert result.solved


@pytest.mark.parametrize(
    "strategy",
    [AStarStrategy(), BreadthFirstStrategy(), DepthFirstStrategy()],
    ids=["astar", "bfs", "dfs"],
)
def test_missing_start_is_rejected(strategy) -> None:
    with pytest.raises(ValueError, match="start board cannot be None"):
        strategy.solve(None)


# -- depth-first --------------------------------------------------------------


@pytest.mark.parametrize("walk", _WALKS, ids=_ids)
def test_dfs_solution_is_valid_or_depth_limited(walk: tuple[str, str]) -> None:
    board = scrambled(walk[1])
    result = DepthFirstStrategy().solve(board)

    if result.solved:
        assert result.length <= DepthFirstStrategy().max_depth
        _assert_path(board, result)
        _assert_replays(board, result.moves)
    else:
        assert result.status is SolveStatus.DEPTH_LIMITED
        assert result.moves == ()
        assert result.path == ()


def test_dfs_follows_right_down_left_up_order() -> None:
    # Blank at the right edge: RIGHT is illegal, DOWN reaches the goal.
    result = DepthFirstStrategy().solve(scrambled("U"))
    assert result.move_codes == ["D"]


def test_dfs_ceiling_below_optimal_is_depth_limited() -> None:
    board = Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8])  # optimal: R R
    result = DepthFirstStrategy(max_depth=1).solve(board)

    assert result.status is SolveStatus.DEPTH_LIMITED
    assert not result.solved
    assert result.expanded == 1


def test_dfs_zero_ceiling_expands_nothing(one_move_board: Board) -> None:
    result = DepthFirstStrategy(max_depth=0).solve(one_move_board)

    assert result.status is SolveStatus.DEPTH_LIMITED
    assert result.expanded == 0


def test_dfs_rejects_negative_ceiling() -> None:
    with pytest.raises(ValueError):
        DepthFirstStrategy(max_depth=-1)


def test_solver_passes_depth_ceiling_to_dfs() -> None:
    board = Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8])
    assert Solver.solve(board, "dfs", max_depth=1).status is SolveStatus.DEPTH_LIMITED
    assert Solver.solve(board, "dfs").solved


# -- exhaustion ---------------------------------------------------------------


def test_bfs_on_unsolvable_board_exhausts() -> None:
    board = Board.from_flat([1, 2, 3, 4, 5, 6, 8, 7, 0])
    with pytest.raises(SearchExhaustedError) as info:
        BreadthFirstStrategy().solve(board)

    # Half of the 9! permutations are reachable from any board.
    assert info.value.algorithm == "bfs"
    assert info.value.expanded == 181440


# -- hints --------------------------------------------------------------------


def test_hint_is_first_solution_move(one_move_board: Board) -> None:
    assert Solver.hint(one_move_board) is Move.RIGHT


def test_hint_none_for_goal_and_unsolvable() -> None:
    assert Solver.hint(GOAL) is None
    assert Solver.hint(Board.from_flat([1, 2, 3, 4, 5, 6, 8, 7, 0])) is None

"""Search building blocks: node arena, frontier ordering, algorithm selector."""

from __future__ import annotations

import pytest

from backend.engine.gamesolver import (
    Algorithm,
    create_strategy,
    get_strategy,
    get_strategy_info,
    supported_algorithms,
)
from backend.engine.gamesolver.frontier import PriorityFrontier
from backend.engine.gamesolver.node import SearchTree, priority
from backend.engine.gamesolver.strategies import (
    AStarStrategy,
    BreadthFirstStrategy,
    DepthFirstStrategy,
)
from backend.errors import UnsupportedAlgorithmError
from backend.models.board import GOAL, Board, Move

_START = Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8])


# -- node arena ---------------------------------------------------------------


def test_tree_reconstructs_path_from_root() -> None:
    tree = SearchTree()
    root = tree.add_root(_START, h=2)
    mid = tree.add_child(root, _START.apply(Move.RIGHT), Move.RIGHT, h=1)
    leaf = tree.add_child(mid, GOAL, Move.RIGHT)

    moves, boards = tree.path_to(leaf)

    assert moves == (Move.RIGHT, Move.RIGHT)
    assert boards == (_START, _START.apply(Move.RIGHT), GOAL)
    assert len(tree) == 3
    assert tree[leaf.index] is leaf


def test_root_path_is_just_the_root() -> None:
    tree = SearchTree()
    root = tree.add_root(GOAL)
    assert root.is_root
    assert tree.path_to(root) == ((), (GOAL,))


def test_child_depth_and_parent_link() -> None:
    tree = SearchTree()
    root = tree.add_root(_START)
    child = tree.add_child(root, _START.apply(Move.UP), Move.UP, h=3)

    assert child.g == 1
    assert child.f == 4
    assert child.parent == root.index
    assert not child.is_root


def test_tree_accepts_one_root_only() -> None:
    tree = SearchTree()
    tree.add_root(_START)
    with pytest.raises(RuntimeError):
        tree.add_root(GOAL)


# -- frontier -----------------------------------------------------------------


def test_frontier_pops_smallest_key_first() -> None:
    frontier: PriorityFrontier[int] = PriorityFrontier(key=lambda x: x)
    for value in (5, 1, 4, 2, 3):
        frontier.push(value)

    assert frontier.peek() == 1
    assert [frontier.pop() for _ in range(len(frontier))] == [1, 2, 3, 4, 5]
    assert not frontier


def test_frontier_breaks_ties_in_insertion_order() -> None:
    frontier: PriorityFrontier[str] = PriorityFrontier(key=lambda _: 0)
    for item in ("a", "b", "c"):
        frontier.push(item)
    assert [frontier.pop(), frontier.pop(), frontier.pop()] == ["a", "b", "c"]


def test_empty_frontier_raises() -> None:
    frontier: PriorityFrontier[int] = PriorityFrontier(key=lambda x: x)
    with pytest.raises(IndexError):
        frontier.pop()
    with pytest.raises(IndexError):
        frontier.peek()


def test_priority_orders_by_f_then_h_then_g() -> None:
    tree = SearchTree()
    root = tree.add_root(_START, h=4)
    a = tree.add_child(root, _START.apply(Move.UP), Move.UP, h=3)        # f=4 h=3
    b = tree.add_child(root, _START.apply(Move.RIGHT), Move.RIGHT, h=1)  # f=2 h=1
    c = tree.add_child(b, GOAL, Move.RIGHT, h=0)                         # f=2 h=0

    frontier = PriorityFrontier(key=priority)
    for node in (root, a, b, c):
        frontier.push(node)

    assert [frontier.pop() for _ in range(4)] == [c, b, a, root]


# -- selector -----------------------------------------------------------------


@pytest.mark.parametrize(
    "token, expected",
    [
        ("astar", Algorithm.ASTAR),
        ("BFS", Algorithm.BFS),
        (" dfs ", Algorithm.DFS),
        (Algorithm.BFS, Algorithm.BFS),
    ],
)
def test_parse_algorithm(token, expected: Algorithm) -> None:
    assert Algorithm.parse(token) is expected


@pytest.mark.parametrize("token", ["greedy", "", "a*", None])
def test_parse_rejects_unknown_algorithm(token) -> None:
    with pytest.raises(UnsupportedAlgorithmError):
        Algorithm.parse(token)


def test_unsupported_algorithm_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="greedy"):
        get_strategy("greedy")


@pytest.mark.parametrize(
    "token, cls",
    [("astar", AStarStrategy), ("bfs", BreadthFirstStrategy), ("dfs", DepthFirstStrategy)],
)
def test_get_strategy_returns_shared_instance(token: str, cls: type) -> None:
    strategy = get_strategy(token)
    assert isinstance(strategy, cls)
    assert strategy.name == token
    assert get_strategy(token) is strategy


def test_create_strategy_builds_fresh_instance() -> None:
    strategy = create_strategy("dfs", max_depth=5)
    assert strategy.max_depth == 5
    assert strategy is not get_strategy("dfs")


def test_strategy_listing() -> None:
    assert supported_algorithms() == [Algorithm.ASTAR, Algorithm.BFS, Algorithm.DFS]
    info = get_strategy_info()
    assert [i["name"] for i in info] == ["astar", "bfs", "dfs"]
    assert [i["label"] for i in info] == ["A*", "BFS", "DFS"]
    assert all(i["description"] for i in info)

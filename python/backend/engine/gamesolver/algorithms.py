"""Algorithm selector: maps a wire token to a strategy."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from backend.engine.gamesolver.strategies import (
    AStarStrategy,
    BreadthFirstStrategy,
    DepthFirstStrategy,
    SolverStrategy,
)
from backend.errors import UnsupportedAlgorithmError


class Algorithm(StrEnum):
    ASTAR = "astar"
    BFS = "bfs"
    DFS = "dfs"

    @property
    def label(self) -> str:
        return "A*" if self is Algorithm.ASTAR else self.value.upper()

    @classmethod
    def parse(cls, token: str | Algorithm) -> Algorithm:
        """Case-insensitive lookup of ``"astar"``, ``"BFS"``, ``" dfs "`` ..."""
        if isinstance(token, Algorithm):
            return token
        if token is None:
            raise UnsupportedAlgorithmError("Algorithm value cannot be None.")
        try:
            return cls(str(token).strip().lower())
        except ValueError:
            expected = ", ".join(a.value for a in cls)
            raise UnsupportedAlgorithmError(
                f"Unsupported algorithm: {token!r} (expected: {expected})"
            ) from None


_CLASSES: dict[Algorithm, type[SolverStrategy]] = {
    Algorithm.ASTAR: AStarStrategy,
    Algorithm.BFS: BreadthFirstStrategy,
    Algorithm.DFS: DepthFirstStrategy,
}

# Strategies are stateless between calls, so one shared instance each.
_INSTANCES: dict[Algorithm, SolverStrategy] = {
    alg: cls() for alg, cls in _CLASSES.items()
}


def get_strategy(algorithm: Algorithm | str) -> SolverStrategy:
    """Return the shared strategy for *algorithm*.

    Raises:
        UnsupportedAlgorithmError: If nothing is registered for it
    """
    alg = Algorithm.parse(algorithm)
    try:
        return _INSTANCES[alg]
    except KeyError:
        raise UnsupportedAlgorithmError(f"No strategy registered for {alg}.") from None


def create_strategy(algorithm: Algorithm | str, **kwargs: Any) -> SolverStrategy:
    """Build a fresh strategy, passing *kwargs* to its constructor.

    Used when a caller needs non-default settings (e.g. a DFS depth
    ceiling) without touching the shared instances.
    """
    alg = Algorithm.parse(algorithm)
    try:
        cls = _CLASSES[alg]
    except KeyError:
        raise UnsupportedAlgorithmError(f"No strategy registered for {alg}.") from None
    return cls(**kwargs)


def supported_algorithms() -> list[Algorithm]:
    return list(_INSTANCES)


def get_strategy_info() -> list[dict[str, str]]:
    """Name, label and description of every registered strategy."""
    return [
        {"name": alg.value, "label": alg.label, "description": s.description}
        for alg, s in _INSTANCES.items()
    ]

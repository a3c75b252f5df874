from backend.engine.gamesolver.algorithms import (
    Algorithm,
    create_strategy,
    get_strategy,
    get_strategy_info,
    supported_algorithms,
)
from backend.engine.gamesolver.heuristic import estimate
from backend.engine.gamesolver.result import SolveResult, SolveStatus
from backend.engine.gamesolver.solver import Solver

__all__ = [
    "Algorithm",
    "SolveResult",
    "SolveStatus",
    "Solver",
    "create_strategy",
    "estimate",
    "get_strategy",
    "get_strategy_info",
    "supported_algorithms",
]

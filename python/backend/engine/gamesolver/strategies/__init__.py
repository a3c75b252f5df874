from backend.engine.gamesolver.strategies.astar import AStarStrategy
from backend.engine.gamesolver.strategies.base import SolverStrategy
from backend.engine.gamesolver.strategies.bfs import BreadthFirstStrategy
from backend.engine.gamesolver.strategies.dfs import MAX_DEPTH, DepthFirstStrategy

__all__ = [
    "MAX_DEPTH",
    "AStarStrategy",
    "BreadthFirstStrategy",
    "DepthFirstStrategy",
    "SolverStrategy",
]

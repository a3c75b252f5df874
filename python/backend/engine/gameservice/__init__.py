from backend.engine.gameservice.service import PuzzleService, ShuffleReport, SolveReport

__all__ = ["PuzzleService", "ShuffleReport", "SolveReport"]

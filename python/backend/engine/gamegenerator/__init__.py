from backend.engine.gamegenerator.generator import GameGenerator, ShuffleOutcome

__all__ = ["GameGenerator", "ShuffleOutcome"]

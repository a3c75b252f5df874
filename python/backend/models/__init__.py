from backend.models.board import GOAL, Board, Move
from backend.models.codec import decode, encode, pretty

__all__ = ["GOAL", "Board", "Move", "decode", "encode", "pretty"]

"""Optimal 8-puzzle solver."""

from eightpuzzle.errors import InvalidBoardError
from eightpuzzle.models import GOAL, Board, Direction, Position

__all__ = ["GOAL", "Board", "Direction", "InvalidBoardError", "Position"]

__version__ = "0.1.0"

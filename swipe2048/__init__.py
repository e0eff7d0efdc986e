"""2048 sliding-tile puzzle: grid engine and game session."""

from swipe2048.core import Direction, InvalidBoardShape, MoveOutcome, move
from swipe2048.game import GameSession

__all__ = ['Direction', 'GameSession', 'InvalidBoardShape', 'MoveOutcome', 'move']

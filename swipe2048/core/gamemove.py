"""
Game move utilities for the 2048 game, providing functions for determining legal and illegal moves.
"""

from typing import Sequence

from swipe2048.core.grid import Cell, Direction, move


def legal_moves(board: Sequence[Sequence[Cell]]) -> list[Direction]:
    """
    Determine legal moves for the current board.

    Parameters
    ----------
    board : Sequence[Sequence[Cell]]
        The current board.

    Returns
    -------
    list[Direction]
        Directions that change the board, in left, up, right, down order.
    """
    return [direction for direction in Direction if move(board, direction).is_moved]


def illegal_moves(board: Sequence[Sequence[Cell]]) -> list[Direction]:
    """
    Determine illegal moves for the current board.

    Parameters
    ----------
    board : Sequence[Sequence[Cell]]
        The current board.

    Returns
    -------
    list[Direction]
        Directions that leave the board unchanged.
    """
    legal = legal_moves(board)
    return [direction for direction in Direction if direction not in legal]

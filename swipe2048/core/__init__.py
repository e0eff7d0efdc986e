# -*- coding: utf-8 -*-
"""
This module provides the rules of a 2048-like game.

It includes the grid engine (board validation, rotation, row collapse and directional moves),
legal and illegal move queries, tile spawning, score computation and end of game detection.
"""

from .gameboard import TILE_SPAWN_PROBS, WIN_TILE, empty_board, has_won, is_done, new_board, score_delta, spawn_tile
from .gamemove import illegal_moves, legal_moves
from .grid import (
    Board,
    Cell,
    Direction,
    InvalidBoardShape,
    MoveOutcome,
    collapse_row,
    is_rectangular,
    move,
    move_left,
    rotate,
    validate_board,
)

__all__ = [
    'Board',
    'Cell',
    'Direction',
    'InvalidBoardShape',
    'MoveOutcome',
    'TILE_SPAWN_PROBS',
    'WIN_TILE',
    'collapse_row',
    'empty_board',
    'has_won',
    'illegal_moves',
    'is_done',
    'is_rectangular',
    'legal_moves',
    'move',
    'move_left',
    'new_board',
    'rotate',
    'score_delta',
    'spawn_tile',
    'validate_board',
]

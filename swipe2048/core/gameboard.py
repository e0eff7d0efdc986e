"""
Game rules around the grid engine: tile spawning, scoring and termination.
"""

from typing import Sequence

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, int64, ndarray
from numpy.random import PCG64DXSM, default_rng

from swipe2048.core.grid import Board, Cell

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Reaching this tile ends the game.
WIN_TILE = 128

_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())

# ##>: Module-level generator for performance (avoids repeated initialization).
_GENERATOR = default_rng(PCG64DXSM())


def _to_array(board: Sequence[Sequence[Cell]]) -> ndarray:
    """Numeric view of a board with empty cells as zeros."""
    return array([[cell or 0 for cell in row] for row in board], dtype=int64)


def _from_array(state: ndarray) -> Board:
    """Board from a numeric array, zeros becoming empty cells."""
    return [[int(value) if value else None for value in row] for row in state]


def empty_board(size: int = 4) -> Board:
    """Square board without any tile."""
    return [[None] * size for _ in range(size)]


def spawn_tile(board: Sequence[Sequence[Cell]], seed: int | None = None) -> Board:
    """
    Add one tile (2 or 4) to a random empty cell.

    Parameters
    ----------
    board : Sequence[Sequence[Cell]]
        The current board. It is left untouched.
    seed : int, optional
        Random number generator seed for reproducibility.

    Returns
    -------
    Board
        A new board with one more tile, or an identical copy if the board is full.

    Notes
    -----
    - The new tile has a 90% chance of being 2 and a 10% chance of being 4.
    - Every empty cell is equally likely.
    """
    rng = default_rng(seed) if seed is not None else _GENERATOR
    state = _to_array(board)

    # ##: Only if there are still available places.
    available_cells = argwhere(state == 0)
    if len(available_cells) > 0:
        cell = available_cells[rng.integers(len(available_cells))]
        state[tuple(cell)] = rng.choice(_TILE_VALUES, p=_TILE_PROBS)
    return _from_array(state)


def new_board(size: int = 4, number_tile: int = 2, seed: int | None = None) -> Board:
    """
    Create a square board holding a few random tiles.

    Parameters
    ----------
    size : int, optional
        Number of rows and columns (default is 4).
    number_tile : int, optional
        Number of tiles to spawn (default is 2).
    seed : int, optional
        Random number generator seed for reproducibility.

    Returns
    -------
    Board
        The starting board.
    """
    rng = default_rng(seed)
    board = empty_board(size)
    for _ in range(number_tile):
        board = spawn_tile(board, seed=int(rng.integers(2**32)))
    return board


def score_delta(previous: Sequence[Sequence[Cell]], current: Sequence[Sequence[Cell]]) -> int:
    """
    Compute the points gained between two boards of the same shape.

    Parameters
    ----------
    previous : Sequence[Sequence[Cell]]
        Board before the move.
    current : Sequence[Sequence[Cell]]
        Board after the move, before a new tile is spawned.

    Returns
    -------
    int
        Sum of every positive increase at matching positions, empty cells counting as zero.
    """
    gain = _to_array(current) - _to_array(previous)
    return int(gain[gain > 0].sum())


def has_won(board: Sequence[Sequence[Cell]], win_tile: int = WIN_TILE) -> bool:
    """Check whether the winning tile is on the board."""
    return bool(np_any(_to_array(board) == win_tile))


def is_done(board: Sequence[Sequence[Cell]], win_tile: int = WIN_TILE) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : Sequence[Sequence[Cell]]
        The current board.
    win_tile : int, optional
        Tile value that ends the game when reached (default is 128).

    Returns
    -------
    bool
        True if the winning tile is present or no move is possible, False otherwise.

    Notes
    -----
    No move is possible when there are no empty cells AND no adjacent cells have the same value.
    """
    if has_won(board, win_tile):
        return True
    state = _to_array(board)
    return bool(
        np_all(state != 0) and not np_any(state[:-1] == state[1:]) and not np_any(state[:, :-1] == state[:, 1:])
    )

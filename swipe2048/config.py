"""
Configuration of a 2048 game session.
"""

from argparse import Namespace
from dataclasses import dataclass
from pathlib import Path

from swipe2048.core.gameboard import WIN_TILE


@dataclass
class GameConfig:
    """
    Settings of a game session.

    Attributes
    ----------
    size : int
        Number of rows and columns of a new board.
    start_tiles : int
        Number of tiles on a new board.
    win_tile : int
        Tile value that ends the game.
    history_limit : int | None
        Maximum number of snapshots kept for undo. None keeps them all.
    store_path : str | Path | None
        JSON file where the game is saved. None keeps the game in memory.
    """

    size: int = 4
    start_tiles: int = 2
    win_tile: int = WIN_TILE
    history_limit: int | None = None
    store_path: str | Path | None = None

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')
        if not 0 < self.start_tiles <= self.size**2:
            raise ValueError(f'start_tiles must be in [1, {self.size ** 2}], got {self.start_tiles}')
        if self.store_path is not None:
            self.store_path = Path(self.store_path)

    @classmethod
    def from_args(cls, args: Namespace) -> 'GameConfig':
        """Build a configuration from parsed command line options."""
        return cls(size=args.size, win_tile=args.win_tile, store_path=args.store)

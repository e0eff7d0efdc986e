"""2048 game session: board, score, undo history and persistence."""

import logging

from swipe2048.config import GameConfig
from swipe2048.core.gameboard import is_done, new_board, score_delta, spawn_tile
from swipe2048.core.gamemove import legal_moves
from swipe2048.core.grid import Board, Direction, move, validate_board
from swipe2048.game.history import History, Snapshot
from swipe2048.game.storage import JsonStore, MemoryStore, Store

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class GameSession:
    """
    2048 game session.

    This class owns the current board and score, applies player moves through the grid engine,
    keeps an undo history and saves the game after every change.
    """

    # ##: All Actions.
    ACTIONS = {direction.value: direction for direction in Direction}

    def __init__(self, config: GameConfig | None = None, store: Store | None = None, seed: int | None = None):
        """
        Start a session, resuming the saved game if there is one.

        Parameters
        ----------
        config : GameConfig, optional
            Session settings (default is ``GameConfig()``).
        store : Store, optional
            Where the game is saved. Defaults to a ``JsonStore`` on ``config.store_path``,
            or to a ``MemoryStore`` when no path is configured.
        seed : int, optional
            Random number generator seed for the first board.
        """
        self.config = config or GameConfig()
        if store is None:
            store = JsonStore(self.config.store_path) if self.config.store_path else MemoryStore()
        self._store = store
        self._history = History(limit=self.config.history_limit)
        self._game_over = False

        saved = self._store.load()
        if saved is None:
            self._board = new_board(self.config.size, self.config.start_tiles, seed=seed)
            self._score = 0
            self._save()
        else:
            validate_board(saved.board)
            self._board, self._score = saved.board, saved.score
            _logger.info('Resumed saved game with score %d', self._score)

    @property
    def board(self) -> Board:
        """Copy of the current board."""
        return [list(row) for row in self._board]

    @property
    def score(self) -> int:
        """Current score."""
        return self._score

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True once a move reached the winning tile or left no move possible. Undo clears it.
        """
        return self._game_over

    @property
    def history_size(self) -> int:
        """Number of snapshots available for undo."""
        return len(self._history)

    @property
    def legal_moves(self) -> list[Direction]:
        """Directions that would change the current board."""
        return legal_moves(self._board)

    def _save(self) -> None:
        self._store.save(Snapshot(board=self._board, score=self._score))

    def reset(self, seed: int | None = None) -> Board:
        """
        Start a new game.

        Parameters
        ----------
        seed : int, optional
            Random number generator seed for reproducibility.

        Returns
        -------
        Board
            The new board, holding ``config.start_tiles`` random tiles.
        """
        self._board = new_board(self.config.size, self.config.start_tiles, seed=seed)
        self._score = 0
        self._history.clear()
        self._game_over = False
        self._save()
        _logger.info('Started a new %dx%d game', self.config.size, self.config.size)
        return self.board

    def step(self, direction: Direction | str, seed: int | None = None) -> tuple[Board, int, bool]:
        """
        Apply a player move.

        Parameters
        ----------
        direction : Direction | str
            The swipe direction.
        seed : int, optional
            Random number generator seed for the spawned tile.

        Returns
        -------
        tuple[Board, int, bool]
            A tuple containing:
            - The current board (Board)
            - The current score (int)
            - Whether the game is finished (bool)

        Notes
        -----
        - Moves are ignored once the game is finished.
        - The snapshot before the move is recorded even if the move changes nothing,
          unless it equals the latest recorded snapshot.
        - A new tile (2 or 4) is added to the board after each successful move.
        """
        direction = Direction(direction)
        if self._game_over:
            return self.board, self._score, True

        self._history.push(Snapshot(board=self._board, score=self._score))
        result, is_moved = move(self._board, direction)
        if is_moved:
            gained = score_delta(self._board, result)
            self._board = spawn_tile(result, seed=seed)
            self._score += gained
            self._game_over = is_done(self._board, win_tile=self.config.win_tile)
            self._save()
            _logger.debug('Moved %s, gained %d, score %d', direction.value, gained, self._score)
        else:
            _logger.debug('Move %s changed nothing', direction.value)

        return self.board, self._score, self._game_over

    def undo(self) -> bool:
        """
        Restore the board and score from before the last move.

        Returns
        -------
        bool
            False if there was nothing to undo.
        """
        if not self._history:
            return False
        self._board, self._score = self._history.pop()
        self._game_over = False
        self._save()
        _logger.info('Undo, score back to %d', self._score)
        return True

    def render(self) -> str:
        """
        Render the game board as text, one line per row and ``.`` for empty cells.
        """
        return '\n'.join(' \t'.join('.' if cell is None else str(cell) for cell in row) for row in self._board)

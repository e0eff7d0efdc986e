"""
Persistence of a game between runs.

A store keeps one snapshot as two keys: ``board`` (the JSON-encoded board) and ``score``.
"""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from swipe2048.game.history import Snapshot

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Raised when a stored snapshot cannot be decoded."""


def _is_tile(value) -> bool:
    """Check that a value is a power of two greater than one."""
    return type(value) is int and value > 1 and value & (value - 1) == 0


class Store(ABC):
    """Key-value store holding the last saved snapshot."""

    @abstractmethod
    def _read(self) -> dict[str, str] | None:
        """Return the stored keys, or None if nothing was saved."""

    @abstractmethod
    def _write(self, entries: dict[str, str]) -> None:
        """Replace the stored keys."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the saved snapshot."""

    def load(self) -> Snapshot | None:
        """
        Load the saved snapshot.

        Returns
        -------
        Snapshot | None
            The saved board and score, or None if nothing was saved.

        Raises
        ------
        StoreError
            If the stored keys are missing or malformed.
        """
        entries = self._read()
        if entries is None:
            return None
        try:
            board = json.loads(entries['board'])
            score = int(entries['score'])
        except (KeyError, TypeError, ValueError) as error:
            raise StoreError(f'Cannot decode saved game: {error!r}') from error
        if not isinstance(board, list) or not all(isinstance(row, list) for row in board):
            raise StoreError(f'Saved board is not a list of rows: {entries["board"]!r}')
        for row in board:
            for cell in row:
                if not (cell is None or _is_tile(cell)):
                    raise StoreError(f'Saved board holds an invalid cell: {cell!r}')
        return Snapshot(board=board, score=score)

    def save(self, snapshot: Snapshot) -> None:
        """Save a snapshot, replacing the previous one."""
        self._write({'board': json.dumps(snapshot.board), 'score': str(snapshot.score)})


class MemoryStore(Store):
    """Store kept in a dictionary, lost when the process exits."""

    def __init__(self):
        self.entries: dict[str, str] = {}

    def _read(self) -> dict[str, str] | None:
        return dict(self.entries) if self.entries else None

    def _write(self, entries: dict[str, str]) -> None:
        self.entries = dict(entries)

    def clear(self) -> None:
        self.entries = {}


class JsonStore(Store):
    """
    Store backed by a JSON file.

    Parameters
    ----------
    path : str | Path
        File holding the snapshot. Parent directories are created on first save.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict[str, str] | None:
        if not self.path.exists():
            return None
        try:
            entries = json.loads(self.path.read_text(encoding='utf-8'))
        except json.JSONDecodeError as error:
            raise StoreError(f'Malformed save file {self.path}: {error}') from error
        if not isinstance(entries, dict):
            raise StoreError(f'Save file {self.path} does not hold an object')
        return entries

    def _write(self, entries: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # ##>: Write to a sibling file then swap it in place.
        descriptor, temporary = tempfile.mkstemp(dir=self.path.parent, prefix=f'.{self.path.name}.')
        try:
            with os.fdopen(descriptor, 'w', encoding='utf-8') as file:
                json.dump(entries, file)
            os.replace(temporary, self.path)
        except BaseException:
            os.unlink(temporary)
            raise
        _logger.debug('Saved game to %s', self.path)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)

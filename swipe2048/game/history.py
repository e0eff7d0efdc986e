"""
Undo history of a game session.
"""

from collections import deque
from typing import NamedTuple

from swipe2048.core.grid import Board


class Snapshot(NamedTuple):
    """Board and score at one point of a game."""

    board: Board
    score: int


class History:
    """
    Last-in first-out stack of snapshots, without consecutive duplicates.

    Parameters
    ----------
    limit : int, optional
        Maximum number of snapshots kept; the oldest ones are dropped first.
    """

    def __init__(self, limit: int | None = None):
        self._snapshots: deque[Snapshot] = deque(maxlen=limit)

    def __len__(self) -> int:
        return len(self._snapshots)

    def push(self, snapshot: Snapshot) -> bool:
        """
        Record a snapshot, copying its board.

        Returns
        -------
        bool
            False if the snapshot equals the latest one and was not recorded.
        """
        if self._snapshots and self._snapshots[-1] == snapshot:
            return False
        self._snapshots.append(Snapshot(board=[list(row) for row in snapshot.board], score=snapshot.score))
        return True

    def pop(self) -> Snapshot:
        """
        Remove and return the latest snapshot.

        Raises
        ------
        IndexError
            If the history is empty.
        """
        if not self._snapshots:
            raise IndexError('pop from an empty history')
        return self._snapshots.pop()

    def clear(self) -> None:
        """Forget every snapshot."""
        self._snapshots.clear()

# -*- coding: utf-8 -*-
"""
Playable 2048 game built on the grid engine.

This module provides the `GameSession` class, which keeps the board, the score and the undo history,
and the stores that save a game between runs.
"""

from .history import History, Snapshot
from .session import GameSession
from .storage import JsonStore, MemoryStore, Store, StoreError

__all__ = ['GameSession', 'History', 'Snapshot', 'Store', 'MemoryStore', 'JsonStore', 'StoreError']

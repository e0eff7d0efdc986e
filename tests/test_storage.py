"""
Tests for game persistence and undo history.
"""

import json
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import TestCase, main

from swipe2048.config import GameConfig
from swipe2048.game.history import History, Snapshot
from swipe2048.game.storage import JsonStore, MemoryStore, StoreError


class TestHistory(TestCase):
    """Test the snapshot stack."""

    def test_last_in_first_out(self):
        """Snapshots come back in reverse order."""
        history = History()
        history.push(Snapshot(board=[[2]], score=0))
        history.push(Snapshot(board=[[4]], score=4))

        self.assertEqual(len(history), 2)
        self.assertEqual(history.pop(), Snapshot(board=[[4]], score=4))
        self.assertEqual(history.pop(), Snapshot(board=[[2]], score=0))
        self.assertFalse(history)

    def test_identical_push_skipped(self):
        """Pushing the latest snapshot again leaves room for older ones."""
        history = History(limit=2)
        self.assertTrue(history.push(Snapshot(board=[[2, None]], score=0)))
        self.assertTrue(history.push(Snapshot(board=[[4, None]], score=4)))
        self.assertFalse(history.push(Snapshot(board=[[4, None]], score=4)))

        self.assertEqual(len(history), 2)
        history.pop()
        self.assertEqual(history.pop(), Snapshot(board=[[2, None]], score=0))

    def test_pop_empty(self):
        """Popping an empty history raises IndexError."""
        with self.assertRaises(IndexError):
            History().pop()

    def test_push_copies_board(self):
        """Later changes to a pushed board are not recorded."""
        board = [[2, None]]
        history = History()
        history.push(Snapshot(board=board, score=0))
        board[0][1] = 2

        self.assertEqual(history.pop().board, [[2, None]])

    def test_limit_drops_oldest(self):
        """A bounded history forgets the oldest snapshots."""
        history = History(limit=2)
        for score in range(3):
            history.push(Snapshot(board=[[2]], score=score))

        self.assertEqual([history.pop().score, history.pop().score], [2, 1])

    def test_clear(self):
        """Clear empties the history."""
        history = History()
        history.push(Snapshot(board=[[2]], score=0))
        history.clear()
        self.assertEqual(len(history), 0)


class TestMemoryStore(TestCase):
    """Test the in-memory store."""

    def test_empty_store(self):
        """Nothing saved loads as None."""
        self.assertIsNone(MemoryStore().load())

    def test_save_and_load(self):
        """Saved snapshots are encoded under the board and score keys."""
        store = MemoryStore()
        store.save(Snapshot(board=[[2, None]], score=8))

        self.assertEqual(store.entries, {'board': '[[2, null]]', 'score': '8'})
        self.assertEqual(store.load(), Snapshot(board=[[2, None]], score=8))

    def test_clear(self):
        """Clear forgets the snapshot."""
        store = MemoryStore()
        store.save(Snapshot(board=[[2]], score=0))
        store.clear()
        self.assertIsNone(store.load())

    def test_malformed_entries(self):
        """Undecodable entries raise StoreError."""
        store = MemoryStore()
        store.entries = {'board': '[[2, ', 'score': '0'}
        with self.assertRaises(StoreError):
            store.load()

        store.entries = {'board': '[[2]]'}
        with self.assertRaises(StoreError):
            store.load()

        store.entries = {'board': '{"a": 1}', 'score': '0'}
        with self.assertRaises(StoreError):
            store.load()

    def test_invalid_cells(self):
        """Cells other than empty or a power of two above one raise StoreError."""
        store = MemoryStore()
        for cell in ('"x"', '0', '3', '2.5', 'true', '-2', '[2]'):
            store.entries = {'board': f'[[{cell}, 2], [null, 2]]', 'score': '0'}
            with self.assertRaises(StoreError):
                store.load()

    def test_valid_cells(self):
        """Empty cells and powers of two load unchanged."""
        store = MemoryStore()
        store.entries = {'board': '[[null, 2], [1024, 4]]', 'score': '0'}
        self.assertEqual(store.load().board, [[None, 2], [1024, 4]])


class TestJsonStore(TestCase):
    """Test the JSON file store."""

    def setUp(self):
        self._directory = TemporaryDirectory()
        self.path = Path(self._directory.name) / 'games' / 'save.json'

    def tearDown(self):
        self._directory.cleanup()

    def test_missing_file(self):
        """A missing file loads as None."""
        self.assertIsNone(JsonStore(self.path).load())

    def test_save_creates_file(self):
        """Saving creates parent directories and writes both keys."""
        JsonStore(self.path).save(Snapshot(board=[[None, 4]], score=4))

        content = json.loads(self.path.read_text(encoding='utf-8'))
        self.assertEqual(content, {'board': '[[null, 4]]', 'score': '4'})
        self.assertEqual(JsonStore(self.path).load(), Snapshot(board=[[None, 4]], score=4))

    def test_save_replaces_previous(self):
        """Only the last snapshot is kept and no temporary file remains."""
        store = JsonStore(self.path)
        store.save(Snapshot(board=[[2]], score=0))
        store.save(Snapshot(board=[[4]], score=4))

        self.assertEqual(store.load(), Snapshot(board=[[4]], score=4))
        self.assertEqual(list(self.path.parent.iterdir()), [self.path])

    def test_malformed_file(self):
        """A corrupted file raises StoreError."""
        self.path.parent.mkdir(parents=True)
        self.path.write_text('{not json', encoding='utf-8')
        with self.assertRaises(StoreError):
            JsonStore(self.path).load()

        self.path.write_text('[1, 2]', encoding='utf-8')
        with self.assertRaises(StoreError):
            JsonStore(self.path).load()

    def test_clear(self):
        """Clear removes the file and tolerates a missing one."""
        store = JsonStore(self.path)
        store.save(Snapshot(board=[[2]], score=0))
        store.clear()
        store.clear()
        self.assertFalse(self.path.exists())


class TestGameConfig(TestCase):
    """Test session configuration."""

    def test_defaults(self):
        """Defaults describe the classic game stopping at 128."""
        config = GameConfig()
        self.assertEqual((config.size, config.start_tiles, config.win_tile), (4, 2, 128))
        self.assertIsNone(config.store_path)

    def test_store_path_as_path(self):
        """String paths are converted to Path objects."""
        self.assertEqual(GameConfig(store_path='save.json').store_path, Path('save.json'))

    def test_invalid_values(self):
        """Out of range settings are rejected."""
        with self.assertRaises(ValueError):
            GameConfig(size=1)
        with self.assertRaises(ValueError):
            GameConfig(size=2, start_tiles=5)


if __name__ == '__main__':
    main()

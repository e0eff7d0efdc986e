from unittest import TestCase, main

from swipe2048.core.gamemove import illegal_moves, legal_moves
from swipe2048.core.grid import Direction


class TestGameMove(TestCase):
    def setUp(self):
        self.board = [[2, None, None, None], [2, None, None, None], [None] * 4, [None] * 4]

    def test_illegal_moves(self):
        """
        Test if illegal moves are correctly identified.
        """
        self.assertEqual(illegal_moves(self.board), [Direction.LEFT])

    def test_legal_moves(self):
        """
        Test if legal moves are correctly identified.
        """
        self.assertEqual(legal_moves(self.board), [Direction.UP, Direction.RIGHT, Direction.DOWN])

    def test_locked_board(self):
        """
        Test that no move is legal on a locked board.
        """
        board = [[2, 4], [4, 2]]
        self.assertEqual(legal_moves(board), [])
        self.assertEqual(illegal_moves(board), list(Direction))


if __name__ == '__main__':
    main()

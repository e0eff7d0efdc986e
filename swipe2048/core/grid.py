"""
Grid engine for the 2048 game: validation, rotation, row collapse and directional moves.

Every function here is pure: boards are read, never mutated, and each call builds a new board.
"""

from enum import Enum
from typing import NamedTuple, Sequence

from numpy import array, rot90

Cell = int | None
Row = list[Cell]
Board = list[Row]


class Direction(str, Enum):
    """Swipe direction requested by the player."""

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'


class MoveOutcome(NamedTuple):
    """Board produced by a move and whether it differs from the input."""

    result: Board
    is_moved: bool


class InvalidBoardShape(ValueError):
    """Raised when a board is not a rectangular, non-empty grid."""


# ##>: Counter-clockwise rotation that turns each direction into a left move, and its inverse.
ROTATE_DEGREES = {Direction.UP: 90, Direction.RIGHT: 180, Direction.DOWN: 270, Direction.LEFT: 0}
REVERT_DEGREES = {Direction.UP: 270, Direction.RIGHT: 180, Direction.DOWN: 90, Direction.LEFT: 0}


def is_rectangular(board: Sequence[Sequence[Cell]]) -> bool:
    """
    Check that every row of the board has the same length as the first one.

    Parameters
    ----------
    board : Sequence[Sequence[Cell]]
        The board to check.

    Returns
    -------
    bool
        True if the board is rectangular, False otherwise.

    Notes
    -----
    A board without rows, or whose rows have no cells, is not considered rectangular.
    """
    if len(board) == 0 or len(board[0]) == 0:
        return False
    column_count = len(board[0])
    return all(len(row) == column_count for row in board)


def validate_board(board: Sequence[Sequence[Cell]]) -> None:
    """
    Raise ``InvalidBoardShape`` unless the board is rectangular.

    Parameters
    ----------
    board : Sequence[Sequence[Cell]]
        The board to validate.

    Raises
    ------
    InvalidBoardShape
        If the rows have unequal lengths or the board is empty.
    """
    if not is_rectangular(board):
        lengths = [len(row) for row in board]
        raise InvalidBoardShape(f'Board is not N by M, row lengths: {lengths}')


def rotate(board: Sequence[Sequence[Cell]], degree: int) -> Board:
    """
    Rotate a board counter-clockwise by a multiple of 90 degrees.

    Parameters
    ----------
    board : Sequence[Sequence[Cell]]
        A rectangular board.
    degree : int
        One of 0, 90, 180 or 270.

    Returns
    -------
    Board
        A new board. Rows and columns swap for 90 and 270.

    Raises
    ------
    ValueError
        If the degree is not a multiple of 90 in [0, 270].
    """
    if degree not in (0, 90, 180, 270):
        raise ValueError(f'Rotation must be 0, 90, 180 or 270 degrees, got {degree}')

    # ##>: Object dtype keeps empty cells as None through the rotation.
    grid = array([list(row) for row in board], dtype=object)
    return rot90(grid, k=degree // 90).tolist()


def collapse_row(row: Sequence[Cell]) -> tuple[Row, bool]:
    """
    Slide a row to the left and merge adjacent equal tiles.

    Parameters
    ----------
    row : Sequence[Cell]
        One row of the board.

    Returns
    -------
    collapsed : Row
        The row after sliding and merging, padded with None to its original length.
    is_moved : bool
        True if any position changed.

    Notes
    -----
    - Empty cells are skipped before comparing values.
    - A tile produced by a merge is never merged again during the same call.
    """
    result: Row = []
    pending: Cell = None

    for cell in row:
        if cell is None:
            continue
        if pending is None:
            pending = cell
        elif pending == cell:
            result.append(cell * 2)
            pending = None
        else:
            result.append(pending)
            pending = cell

    if pending is not None:
        result.append(pending)

    collapsed = result + [None] * (len(row) - len(result))
    return collapsed, any(before != after for before, after in zip(row, collapsed))


def move_left(board: Sequence[Sequence[Cell]]) -> MoveOutcome:
    """
    Collapse every row of the board to the left.

    Parameters
    ----------
    board : Sequence[Sequence[Cell]]
        A rectangular board.

    Returns
    -------
    MoveOutcome
        The collapsed board and whether any row changed.
    """
    collapsed = [collapse_row(row) for row in board]
    return MoveOutcome(
        result=[row for row, _ in collapsed],
        is_moved=any(moved for _, moved in collapsed),
    )


def move(board: Sequence[Sequence[Cell]], direction: Direction | str) -> MoveOutcome:
    """
    Apply a swipe to the board following the 2048 rules.

    Parameters
    ----------
    board : Sequence[Sequence[Cell]]
        The current board. It is left untouched.
    direction : Direction | str
        The swipe direction ("up", "down", "left" or "right").

    Returns
    -------
    MoveOutcome
        The new board and whether the move changed anything.

    Raises
    ------
    InvalidBoardShape
        If the board is not rectangular.
    ValueError
        If the direction is unknown.

    Notes
    -----
    The board is rotated so that the swipe becomes a left move, collapsed, then rotated back.
    """
    validate_board(board)
    direction = Direction(direction)

    rotated = rotate(board, ROTATE_DEGREES[direction])
    result, is_moved = move_left(rotated)
    return MoveOutcome(result=rotate(result, REVERT_DEGREES[direction]), is_moved=is_moved)

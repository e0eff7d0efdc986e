# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
from argparse import ArgumentParser, Namespace
from typing import Any

from swipe2048.config import GameConfig
from swipe2048.core import WIN_TILE
from swipe2048.game import GameSession
from swipe2048.utils import WindowBoard

# ##: Keyboard bindings.
CONSOLE_KEYS = {"w": "up", "s": "down", "a": "left", "d": "right"}


def caption(session: GameSession) -> str:
    """Text shown above the board."""
    if session.is_finished:
        return f"Score: {session.score} - Game over!"
    return f"Score: {session.score}"


def redraw(window: WindowBoard, session: GameSession):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    session: GameSession
        Game to draw
    """
    window.show_board(session.board, caption(session))


def key_handler(session: GameSession, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    session: GameSession
        The game session

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        session.reset()
    elif event.key == "u":
        session.undo()
    elif event.key in session.ACTIONS:
        session.step(session.ACTIONS[event.key])
    else:
        return None
    redraw(window, session)


def play_window(session: GameSession):
    """Play in a Matplotlib window until it is closed."""
    rows, columns = len(session.board), len(session.board[0])
    window = WindowBoard(title="2048 Game", rows=rows, columns=columns)
    window.register_key_handler(lambda event: key_handler(session, window, event))

    redraw(window, session)

    # Blocking event loop
    window.show(block=True)


def play_console(session: GameSession):
    """Play in the terminal: w/a/s/d to move, u to undo, r to restart, q to quit."""
    while True:
        print(session.render())
        print(caption(session))
        command = input("> ").strip().lower()

        if command == "q":
            return
        if command == "r":
            session.reset()
        elif command == "u":
            if not session.undo():
                print("Nothing to undo.")
        elif command in CONSOLE_KEYS:
            session.step(CONSOLE_KEYS[command])
        else:
            print("Use w/a/s/d to move, u to undo, r to restart, q to quit.")


def parse_args() -> Namespace:
    """Parse command line options."""
    parser = ArgumentParser(description="Play 2048.")
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--win-tile", type=int, default=WIN_TILE)
    parser.add_argument("--store", type=str, default=None, help="JSON file where the game is saved")
    parser.add_argument("--console", action="store_true", help="play in the terminal")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    game = GameSession(config=GameConfig.from_args(args))
    if args.console:
        play_console(game)
    else:
        play_window(game)

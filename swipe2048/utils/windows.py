# -*- coding: utf-8 -*-
"""
Display a 2048 board in a Matplotlib window.
"""
from typing import Callable, Sequence

from matplotlib import pyplot as plt

from swipe2048.core.grid import Cell


class WindowBoard:
    """
    Window drawing the 2048 board and the score using Matplotlib.
    """

    # ##: Colors, None for empty cells.
    COLORS = {
        None: '#CDC1B4',
        2: '#EEE4DA',
        4: '#ECE0C8',
        8: '#ECB280',
        16: '#EC8D53',
        32: '#F57C5F',
        64: '#E95937',
        128: '#F3D96B',
        256: '#F2D04A',
        512: '#E5BF2E',
        1024: '#E2B814',
        2048: '#EBC502',
    }
    OVERFLOW_COLOR = '#3C3A32'

    def __init__(self, title: str, rows: int, columns: int):
        # ## ----> Create support.
        self.fig = plt.figure()
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.9, wspace=0.1, hspace=0.1)
        self.fig.patch.set_facecolor('#BBADA0')
        self.fig.canvas.manager.set_window_title(title)
        self.title = self.fig.suptitle('', fontsize='large', fontweight='bold')

        # ## ----> Add cell for board.
        self.texts = []
        self.axes = [self.fig.add_subplot(rows, columns, index + 1) for index in range(rows * columns)]
        for _ax in self.axes:
            text = _ax.text(
                0.5,
                0.5,
                '',
                horizontalalignment='center',
                verticalalignment='center',
                fontsize='x-large',
                fontweight='demibold',
            )
            self.texts.append(text)
            _ = _ax.set_xticks([])
            _ = _ax.set_yticks([])

        # ## ----> Flag indicating that the window was closed.
        self.closed = False

        def close_handler(evt):
            self.closed = True

        self.fig.canvas.mpl_connect('close_event', close_handler)

    def show_board(self, board: Sequence[Sequence[Cell]], caption: str = ''):
        """
        Show a board or update the board being shown.

        Parameters
        ----------
        board: Sequence[Sequence[Cell]]
            Board to draw
        caption: str
            Text shown above the board, such as the score
        """
        # ## ----> Update the cells.
        cells = [cell for row in board for cell in row]
        for _ax, text, cell in zip(self.axes, self.texts, cells):
            text.set_text('' if cell is None else str(cell))
            _ax.set_facecolor(self.COLORS.get(cell, self.OVERFLOW_COLOR))
        self.title.set_text(caption)

        # ## ---> Request the window to be redrawn
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

        # ## ----> Let Matplotlib process UI events
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler: Callable
            Called with each Matplotlib key press event
        """
        self.fig.canvas.mpl_connect('key_press_event', key_handler)

    def show(self, block: bool = True):
        """
        Show the window, and start an event loop.

        Parameters
        ----------
        block: bool
            Activate or not the interactive mode
        """
        # ## ----> If not blocking, trigger interactive mode.
        if not block:
            plt.ion()

        # ## ----> Show the plot.
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True

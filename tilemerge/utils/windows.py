# -*- coding: utf-8 -*-
"""
Graphical window for the sliding-tile merge puzzle.

This module draws the board with Matplotlib, shows the score and the latest status message, and
forwards key presses to a handler.
"""
from typing import Callable

from matplotlib import pyplot as plt
from numpy import ndarray


class WindowBoard:
    """
    A class for rendering the board and the status line using Matplotlib.

    Methods
    -------
    show_image(board: np.ndarray)
        Update the display with the current board.
    show_status(score: int, message: str)
        Update the score and status message above the board.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    show(block: bool = True)
        Display the game window.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "#CCC0B3",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
    }

    def __init__(self, title: str, size: int):
        """
        Initialize the game window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            Number of cells on a side of the board.
        """
        # ##>: Drop Matplotlib's default shortcuts ('q' quits, 's' saves) so every key reaches the handler.
        for name in plt.rcParams:
            if name.startswith("keymap."):
                plt.rcParams[name] = []

        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(size)

    def _setup_axes(self, size: int):
        """
        Create one subplot per cell, each holding a centered text.

        Parameters
        ----------
        size : int
            Number of cells on a side of the board.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.9, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#BBADA0")
        self.axe.set_axis_off()

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

        self.status = self.fig.suptitle("", fontsize="medium")

    def _refresh(self):
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def show_image(self, board: ndarray):
        """
        Show or update the board.

        Parameters
        ----------
        board : ndarray
            Cell values in row-major order; 0 is drawn as an empty cell.
        """
        for ax, text, value in zip(self.axes, self.texts, board.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            ax.set_facecolor(self.COLORS.get(value, "#3C3A32"))
        self._refresh()

    def show_status(self, score: int, message: str):
        """
        Show the score and the latest status message above the board.

        Parameters
        ----------
        score : int
            The current score.
        message : str
            Status text, as announced.
        """
        self.status.set_text(f"Score: {score}\n{message.strip()}")
        self._refresh()

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler, called on every key press in the window.

        Parameters
        ----------
        key_handler : Callable
            A function receiving the Matplotlib key event.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

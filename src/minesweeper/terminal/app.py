"""
Curses game loop.

Reads keys, forwards them to the board and repaints until the game is
won, lost or aborted.
"""
import curses
from typing import Optional

from ..game.board import Board, BoardConfig
from .keys import apply_command, map_key
from .renderer import Renderer, init_colors


# Input timeout so the clock keeps ticking on screen without key presses.
INPUT_TIMEOUT_MS = 1000


def run(
    stdscr: "curses.window",
    config: BoardConfig,
    board: Optional[Board] = None,
) -> Board:
    """
    Play one game on an initialized curses screen.

    Args:
        stdscr: Screen returned by ``curses.initscr`` (or ``wrapper``).
        config: Board configuration for a new game.
        board: Existing board to play on instead of a new one.

    Returns:
        The board in its final state.
    """
    if board is None:
        board = Board(config)

    init_colors()
    curses.cbreak()
    curses.noecho()
    stdscr.refresh()

    renderer = Renderer(board)
    renderer.field.keypad(True)
    renderer.field.timeout(INPUT_TIMEOUT_MS)
    renderer.draw(board)

    while not board.is_done:
        command = map_key(renderer.field.getch())
        if command is not None:
            apply_command(board, command)
        renderer.draw(board)

    return board


def play(config: BoardConfig) -> Board:
    """Run a game full screen; the terminal is restored even on errors."""
    return curses.wrapper(run, config)

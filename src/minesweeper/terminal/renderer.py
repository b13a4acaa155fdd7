"""
Curses renderer for the terminal game.

The text for both panels is built by plain functions so it can be checked
without a terminal; ``Renderer`` only paints that text into curses windows.
"""
import curses
from typing import List

from ..game.board import Board
from ..game.cell import FLAGGED_CODE, HIDDEN_CODE, MINE_CODE
from .keys import HELP_LINES


# ============================================================================
# Constants
# ============================================================================

HIDDEN_CHAR = "."
FLAG_CHAR = "F"
MINE_CHAR = "*"
WRONG_FLAG_CHAR = "X"
EMPTY_CHAR = " "

SCORE_HEIGHT = 11
# Fits five-digit flag and mine counts (127 x 127 board).
SCORE_WIDTH = 40
FIELD_TOP = 12
LEFT_MARGIN = 1

# Color pair per neighbor count; pair 3 doubles as the exploded mine color.
NUMBER_COLORS = {
    1: curses.COLOR_BLUE,
    2: curses.COLOR_GREEN,
    3: curses.COLOR_RED,
    4: curses.COLOR_MAGENTA,
    5: curses.COLOR_RED,
    6: curses.COLOR_CYAN,
    7: curses.COLOR_WHITE,
    8: curses.COLOR_WHITE,
}
EXPLODED_PAIR = 3


# ============================================================================
# Text Builders
# ============================================================================

def observation_char(value: int) -> str:
    """Map one observation code to the character drawn for it."""
    if value == HIDDEN_CODE:
        return HIDDEN_CHAR
    if value == FLAGGED_CODE:
        return FLAG_CHAR
    if value == MINE_CODE:
        return MINE_CHAR
    if value == 0:
        return EMPTY_CHAR
    return str(value)


def field_rows(board: Board) -> List[str]:
    """
    Build the minefield, one string per board row.

    After a loss every unflagged mine is shown and every flag on a safe
    cell is marked as wrong.
    """
    obs = board.get_observation()
    grid = [[observation_char(int(value)) for value in row] for row in obs]

    if board.is_lost:
        for row, col in board.get_mine_positions():
            if not board.get_cell(row, col).is_flagged:
                grid[row][col] = MINE_CHAR
        for row, col in board.get_wrong_flags():
            grid[row][col] = WRONG_FLAG_CHAR

    return ["".join(row) for row in grid]


def status_lines(board: Board) -> List[str]:
    """Build the score panel text, one string per window line."""
    return [
        "",
        "         Minesweeper",
        "",
        *HELP_LINES,
        "",
        f"Flags: {board.flagged_count:2d} / {board.num_mines:2d}  "
        f"Status: {board.status}",
        f"Time: {board.elapsed_ms} ms",
    ]


# ============================================================================
# Curses Painting
# ============================================================================

def init_colors() -> None:
    """Register the digit color pairs if the terminal supports color."""
    if not curses.has_colors():
        return
    curses.start_color()
    for count, color in NUMBER_COLORS.items():
        curses.init_pair(count, color, curses.COLOR_BLACK)


class Renderer:
    """
    Paints a board into a score window and a field window.

    Attributes:
        score: Window holding the title, key help, flags, status and time.
        field: Window holding one character per cell.
    """

    def __init__(self, board: Board) -> None:
        """
        Create the windows sized for the board.

        Must be called after curses has been initialized.
        """
        self.colors = curses.has_colors()
        self.score = curses.newwin(SCORE_HEIGHT, SCORE_WIDTH, 1, LEFT_MARGIN)
        # One spare column so writing the last cell never scrolls the window.
        self.field = curses.newwin(
            board.config.height, board.config.width + 1, FIELD_TOP, LEFT_MARGIN
        )

    def draw(self, board: Board) -> None:
        """Repaint both windows from the current board state."""
        self._draw_score(board)
        self._draw_field(board)

    def _draw_score(self, board: Board) -> None:
        self.score.erase()
        for line_no, text in enumerate(status_lines(board)):
            self.score.addstr(line_no, 0, text)
        self.score.refresh()

    def _draw_field(self, board: Board) -> None:
        cursor_row, cursor_col = board.cursor
        for row, text in enumerate(field_rows(board)):
            for col, char in enumerate(text):
                self.field.addstr(row, col, char, self._attr_for(board, row, col, char))
        self.field.move(cursor_row, cursor_col)
        self.field.refresh()

    def _attr_for(self, board: Board, row: int, col: int, char: str) -> int:
        if not self.colors:
            return curses.A_NORMAL
        if char == MINE_CHAR and board.is_lost and board.cursor == (row, col):
            return curses.color_pair(EXPLODED_PAIR)
        if char.isdigit():
            return curses.color_pair(int(char))
        return curses.A_NORMAL

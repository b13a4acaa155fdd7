"""
Key bindings for the terminal game.

Translates raw curses key codes into discrete board commands.
"""
import curses
from dataclasses import dataclass
from typing import Dict, Optional

from ..game.board import Board


# ============================================================================
# Commands
# ============================================================================

MOVE = "move"
REVEAL = "reveal"
FLAG = "flag"
QUIT = "quit"


@dataclass(frozen=True)
class Command:
    """
    A single player command.

    Attributes:
        action: One of "move", "reveal", "flag" or "quit".
        delta_row: Row offset for moves.
        delta_col: Column offset for moves.
    """

    action: str
    delta_row: int = 0
    delta_col: int = 0


UP = Command(MOVE, -1, 0)
DOWN = Command(MOVE, 1, 0)
LEFT = Command(MOVE, 0, -1)
RIGHT = Command(MOVE, 0, 1)

KEY_BINDINGS: Dict[int, Command] = {
    ord("h"): LEFT,
    curses.KEY_LEFT: LEFT,
    ord("l"): RIGHT,
    curses.KEY_RIGHT: RIGHT,
    ord("j"): DOWN,
    curses.KEY_DOWN: DOWN,
    ord("k"): UP,
    curses.KEY_UP: UP,
    ord(" "): Command(REVEAL),
    ord("f"): Command(FLAG),
    ord("q"): Command(QUIT),
}

HELP_LINES = [
    " [h] Move Left   [l] Move Right",
    " [j] Move Down   [k] Move Up",
    " [f] Flag Mine   [q] Quit",
    " [space] Reveal",
]


# ============================================================================
# Dispatch
# ============================================================================

def map_key(key: int) -> Optional[Command]:
    """Look up the command bound to a key; None for timeouts and unbound keys."""
    return KEY_BINDINGS.get(key)


def apply_command(board: Board, command: Command) -> bool:
    """
    Run a command against the board.

    Args:
        board: Board to act on.
        command: Command to run.

    Returns:
        The board's result for the command (True if state changed).
    """
    if command.action == MOVE:
        return board.move(command.delta_row, command.delta_col)
    if command.action == REVEAL:
        return board.reveal()
    if command.action == FLAG:
        return board.flag()
    if command.action == QUIT:
        return board.quit()
    raise ValueError(f"Unknown command: {command.action}")

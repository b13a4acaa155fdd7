"""
Terminal front end for Minesweeper.

Provides key bindings, the curses renderer and the game loop.
"""
from .keys import Command, KEY_BINDINGS, apply_command, map_key
from .renderer import Renderer, field_rows, status_lines
from .app import play, run

__all__ = [
    "Command",
    "KEY_BINDINGS",
    "apply_command",
    "map_key",
    "Renderer",
    "field_rows",
    "status_lines",
    "play",
    "run",
]

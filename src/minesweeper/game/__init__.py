"""
Minesweeper board engine.

Provides the minefield, its cells and the game clock.
"""
from .cell import Cell, DisplayClass, Visibility
from .clock import GameClock
from .board import (
    Board,
    BoardConfig,
    GameState,
    MAX_DIMENSION,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
)

__all__ = [
    "Cell",
    "DisplayClass",
    "Visibility",
    "GameClock",
    "Board",
    "BoardConfig",
    "GameState",
    "MAX_DIMENSION",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
]

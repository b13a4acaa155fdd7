"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import List

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper.game import Board, BoardConfig, Cell, GameClock


# ============================================================================
# Helpers
# ============================================================================

class FakeTime:
    """Manually advanced time source for GameClock."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def scan_counts(board: Board) -> List[int]:
    """Count revealed and flagged cells by walking the whole grid."""
    revealed = flagged = 0
    for row in range(board.config.height):
        for col in range(board.config.width):
            cell = board.get_cell(row, col)
            revealed += cell.is_revealed
            flagged += cell.is_flagged
    return [revealed, flagged]


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()


@pytest.fixture
def grid_counts():
    """Grid-scanning counter helper."""
    return scan_counts


@pytest.fixture
def default_board() -> Board:
    """Create a seeded beginner board."""
    return Board(BoardConfig(8, 8, 10), rng=random.Random(1234))


@pytest.fixture
def two_mine_board(fake_time: FakeTime) -> Board:
    """
    3x3 board with mines in the right column's corners.

        . 1 *
        . 2 2
        . 1 *

    Revealing (2, 0) floods the left two columns and leaves (1, 2) as the
    only hidden safe cell.
    """
    return Board.from_mine_positions(
        BoardConfig(3, 3, 2),
        [(0, 2), (2, 2)],
        clock=GameClock(fake_time),
    )


@pytest.fixture
def wall_board() -> Board:
    """5x5 board with a full column of mines down the middle."""
    return Board.from_mine_positions(
        BoardConfig(5, 5, 5),
        [(row, 2) for row in range(5)],
    )


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(8, 8, 10)

"""
Board module for the Minesweeper engine.

Implements the minefield: mine placement, neighbor counts, the cursor,
flood-fill revealing, flag toggling and win/lose detection. Commands act on
the cursor cell; rendering code polls the read-only queries each frame.
"""
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell, DisplayClass
from .clock import GameClock


# ============================================================================
# Constants
# ============================================================================

MAX_DIMENSION = 127

Position = Tuple[int, int]


class GameState(Enum):
    """Outcome of the game, with the label shown to the player."""

    PLAYING = "Playing"
    WON = "Win"
    LOST = "Lose"
    ABORTED = "Aborted"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 8
    height: int = 8
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.width > MAX_DIMENSION or self.height > MAX_DIMENSION:
            raise ValueError(
                f"Board dimensions cannot exceed {MAX_DIMENSION}"
            )
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Cells that must be revealed to win."""
        return self.total_cells - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(8, 8, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

PRESETS = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the mine layout, the visibility of every cell, the cursor, the
    game outcome and the game clock. All player commands act on the cell
    under the cursor.

    Note:
        The first reveal of a game never hits a mine: when the cursor sits
        on a mine the whole board is re-laid until it does not. On very
        dense boards (e.g. one safe cell) this re-lays many times before
        succeeding, which is expected.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: random.Random = field(default_factory=random.Random, repr=False)
    clock: GameClock = field(default_factory=GameClock, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.PLAYING
    _cursor: Position = (0, 0)
    _revealed_count: int = 0
    _flagged_count: int = 0

    def __post_init__(self) -> None:
        """Lay out a fresh minefield after dataclass creation."""
        self._initialize()

    @classmethod
    def from_mine_positions(
        cls,
        config: BoardConfig,
        positions: Iterable[Position],
        **kwargs,
    ) -> "Board":
        """
        Build a board with mines at fixed positions.

        Args:
            config: Board configuration; ``num_mines`` must match the
                number of positions.
            positions: (row, col) of every mine.
            **kwargs: Forwarded to the constructor (``rng``, ``clock``).

        Raises:
            ValueError: If a position is out of bounds or repeated, or the
                count does not match the configuration.
        """
        board = cls(config, **kwargs)
        board._initialize(list(positions))
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _initialize(self, mine_positions: Optional[List[Position]] = None) -> None:
        """Clear both layers, lay mines, count neighbors and reset state."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]
        if mine_positions is None:
            self._place_random_mines()
        else:
            self._place_mines_at(mine_positions)
        self._calculate_neighbor_mines()

        self._game_state = GameState.PLAYING
        self._revealed_count = 0
        self._flagged_count = 0
        self.clock.arm()

    def _place_random_mines(self) -> None:
        """Sample coordinates until the configured number of mines is laid."""
        placed = 0
        while placed < self.config.num_mines:
            row = self.rng.randrange(self.config.height)
            col = self.rng.randrange(self.config.width)
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1

    def _place_mines_at(self, positions: List[Position]) -> None:
        """Lay mines at explicit positions."""
        if len(positions) != self.config.num_mines:
            raise ValueError(
                f"Expected {self.config.num_mines} mine positions, "
                f"got {len(positions)}"
            )
        for row, col in positions:
            cell = self.get_cell(row, col)
            if cell is None:
                raise ValueError(f"Mine position {(row, col)} is off the board")
            if cell.is_mine:
                raise ValueError(f"Duplicate mine position {(row, col)}")
            cell.is_mine = True

    def _calculate_neighbor_mines(self) -> None:
        """Store the neighbor mine count in every non-mine cell."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                cell = self._grid[row][col]
                if not cell.is_mine:
                    cell.neighbor_mines = self._count_neighbor_mines(row, col)

    def _count_neighbor_mines(self, row: int, col: int) -> int:
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get in-bounds neighboring positions in row-major order.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples, excluding the center.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self) -> bool:
        """
        Reveal the cell under the cursor.

        On the first reveal of a game the board is re-laid until the
        cursor cell is safe, and the clock restarts. A revealed zero cell
        floods outward through its neighbors.

        Returns:
            True if at least one cell was revealed, False otherwise.
        """
        if not self.is_playing:
            return False

        row, col = self._cursor
        while self._revealed_count == 0 and self._grid[row][col].is_mine:
            self._initialize()

        if self._revealed_count == 0:
            self.clock.arm()

        before = self._revealed_count
        self._flood_reveal(row, col)
        return self._revealed_count > before

    def _flood_reveal(self, row: int, col: int) -> None:
        """
        Reveal from (row, col), spreading through zero-count cells.

        Walks depth-first with an explicit stack of neighbor iterators so
        cells are visited in the same order as a recursive fill, without
        the recursion limit. A neighbor's revealed state is checked when
        the walk reaches it, not when its parent is expanded.
        """
        if not self._visit(row, col):
            return

        stack: List[Iterator[Position]] = [iter(self._get_neighbors(row, col))]
        while stack and self.is_playing:
            for neighbor_row, neighbor_col in stack[-1]:
                if self._grid[neighbor_row][neighbor_col].is_revealed:
                    continue
                if self._visit(neighbor_row, neighbor_col):
                    stack.append(
                        iter(self._get_neighbors(neighbor_row, neighbor_col))
                    )
                    break
            else:
                stack.pop()

    def _visit(self, row: int, col: int) -> bool:
        """
        Reveal one cell and settle the outcome.

        Returns:
            True if the fill should continue into this cell's neighbors.
        """
        if not self.is_playing:
            return False

        cell = self._grid[row][col]
        if cell.is_flagged:
            return False

        if cell.reveal():
            self._revealed_count += 1

        if cell.is_mine:
            self._end_game(GameState.LOST)
            return False

        if self._revealed_count >= self.config.safe_cells:
            self._end_game(GameState.WON)
            return False

        return cell.neighbor_mines == 0

    def _end_game(self, state: GameState) -> None:
        self._game_state = state
        self.clock.stop()

    def flag(self) -> bool:
        """
        Toggle the flag on the cell under the cursor.

        Revealed cells cannot be flagged. There is no limit on the number
        of flags.

        Returns:
            True if the flag was toggled, False otherwise.
        """
        if not self.is_playing:
            return False

        row, col = self._cursor
        cell = self._grid[row][col]
        if not cell.toggle_flag():
            return False

        self._flagged_count += 1 if cell.is_flagged else -1
        return True

    def move(self, delta_row: int, delta_col: int) -> bool:
        """
        Shift the cursor by the given offsets.

        Moves that would leave the board are refused, not clamped.

        Returns:
            True if the cursor moved.
        """
        if not self.is_playing:
            return False

        new_row = self._cursor[0] + delta_row
        new_col = self._cursor[1] + delta_col
        if not self._is_valid_position(new_row, new_col):
            return False

        self._cursor = (new_row, new_col)
        return True

    def quit(self) -> bool:
        """
        Abort a game in progress.

        A game that is already won or lost keeps its outcome.

        Returns:
            True if the game was aborted by this call.
        """
        if not self.is_playing:
            return False
        self._end_game(GameState.ABORTED)
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def status(self) -> str:
        """Human readable outcome: Playing, Win, Lose or Aborted."""
        return self._game_state.label

    @property
    def is_playing(self) -> bool:
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._game_state == GameState.LOST

    @property
    def is_aborted(self) -> bool:
        return self._game_state == GameState.ABORTED

    @property
    def is_done(self) -> bool:
        """Check whether the input loop should stop."""
        return not self.is_playing

    @property
    def cursor(self) -> Position:
        return self._cursor

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @property
    def revealed_count(self) -> int:
        return self._revealed_count

    @property
    def flagged_count(self) -> int:
        return self._flagged_count

    @property
    def elapsed_ms(self) -> int:
        """Milliseconds since the first reveal, 0 before it."""
        if self._revealed_count == 0:
            return 0
        return self.clock.elapsed_ms()

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def display_class(self, row: int, col: int) -> Optional[DisplayClass]:
        """Get the display class at position, or None if invalid."""
        cell = self.get_cell(row, col)
        if cell is None:
            return None
        return cell.display_class

    def get_mine_positions(self) -> Set[Position]:
        """
        Get every mine location.

        Only meant for drawing the board after a loss.
        """
        return {
            (row, col)
            for row in range(self.config.height)
            for col in range(self.config.width)
            if self._grid[row][col].is_mine
        }

    def get_wrong_flags(self) -> Set[Position]:
        """Get flagged positions that do not hold a mine."""
        return {
            (row, col)
            for row in range(self.config.height)
            for col in range(self.config.width)
            if self._grid[row][col].is_flagged
            and not self._grid[row][col].is_mine
        }

    def get_observation(self) -> np.ndarray:
        """
        Get the visible board as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with neighbor count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

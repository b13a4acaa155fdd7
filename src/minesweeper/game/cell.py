"""
Cell module for the Minesweeper engine.

A cell carries one value from each board layer: its mine-layer value
(mine or neighbor count) and its visibility-layer value
(hidden/revealed/flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class Visibility(Enum):
    """Player-facing state of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class DisplayClass(Enum):
    """What the renderer should draw for a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    NUMBER = auto()
    MINE = auto()


HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single square of the minefield.

    Attributes:
        is_mine: Whether this cell holds a mine.
        neighbor_mines: Mines among the up-to-8 adjacent cells (0-8).
            Only meaningful when ``is_mine`` is False.
        visibility: Current player-facing state.
    """

    is_mine: bool = False
    neighbor_mines: int = 0
    visibility: Visibility = Visibility.HIDDEN

    def reveal(self) -> bool:
        """
        Mark this cell revealed.

        Returns:
            True if the cell went from hidden to revealed, False if it was
            already revealed or is flagged.
        """
        if self.visibility != Visibility.HIDDEN:
            return False
        self.visibility = Visibility.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Cycle between hidden and flagged.

        Returns:
            True if the flag was toggled, False if the cell is revealed.
        """
        if self.visibility == Visibility.HIDDEN:
            self.visibility = Visibility.FLAGGED
            return True
        if self.visibility == Visibility.FLAGGED:
            self.visibility = Visibility.HIDDEN
            return True
        return False

    @property
    def is_hidden(self) -> bool:
        return self.visibility == Visibility.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.visibility == Visibility.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.visibility == Visibility.FLAGGED

    @property
    def display_class(self) -> DisplayClass:
        """Classify the cell for drawing."""
        if self.visibility == Visibility.FLAGGED:
            return DisplayClass.FLAGGED
        if self.visibility == Visibility.HIDDEN:
            return DisplayClass.HIDDEN
        if self.is_mine:
            return DisplayClass.MINE
        return DisplayClass.NUMBER

    def to_observation(self) -> int:
        """
        Encode the visible state of the cell as a small integer.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with its neighbor mine count
            9: Revealed mine
        """
        display = self.display_class
        if display == DisplayClass.HIDDEN:
            return HIDDEN_CODE
        if display == DisplayClass.FLAGGED:
            return FLAGGED_CODE
        if display == DisplayClass.MINE:
            return MINE_CODE
        return self.neighbor_mines

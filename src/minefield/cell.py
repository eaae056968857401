"""
Cell module for the minefield generator.

Represents individual cells on the generated board with their state
(hidden/revealed) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the minefield grid.

    A cell is either a mine, a hidden number or a revealed number. Until
    adjacency counts are computed, ``adjacent_mines`` is ``None``.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8), or None
            before the board has been populated.
        state: Current visual state (hidden or revealed).
    """

    is_mine: bool = False
    adjacent_mines: Optional[int] = None
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell changed state, False if it was already revealed.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_zero(self) -> bool:
        """Check if this is a safe cell with no adjacent mines."""
        return not self.is_mine and self.adjacent_mines == 0

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Hidden cell
            0-8: Revealed cell with adjacent mine count
        """
        if self.state == CellState.HIDDEN:
            return -1
        return self.adjacent_mines or 0

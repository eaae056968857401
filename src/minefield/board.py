"""
Board module for the minefield generator.

Implements the board grid with mine placement, adjacency counting,
and the opening reveal (single cell or zero-region flood-fill).
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Set, Tuple, Union

import numpy as np

from .cell import Cell


logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]
RandomSource = Callable[[], float]

# Returned by reveal_first when no cell was revealed.
NO_REVEAL: Coordinate = (-1, -1)


# ============================================================================
# Constants
# ============================================================================

class OutputMode(Enum):
    """Shapes the generated board can be returned in."""

    TEXT = "text"
    CODE_BLOCK = "code-block"
    RAW_GRID = "raw-grid"


@dataclass
class BoardConfig:
    """
    Configuration for a generated board.

    Missing or non-positive sizes fall back to the defaults instead of being
    rejected; density is checked by ``is_valid``.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
        mines: Total mines to place.
        emote: Label used for mine cells.
        reveal_first_cell: Reveal a random safe cell after generation.
        expand_zeros: Open the whole zero region around the first reveal.
        spaces: Pad spoiler tags and separate cells with spaces.
        output_mode: Shape of the value returned by the generator.
    """

    rows: int = 9
    columns: int = 9
    mines: int = 10
    emote: str = "boom"
    reveal_first_cell: bool = False
    expand_zeros: bool = True
    spaces: bool = True
    output_mode: Union[OutputMode, str] = OutputMode.TEXT

    def __post_init__(self) -> None:
        """Normalize configuration after initialization."""
        self.rows = self.rows if self.rows and self.rows > 0 else 9
        self.columns = self.columns if self.columns and self.columns > 0 else 9
        self.mines = self.mines if self.mines and self.mines > 0 else 10
        self.emote = self.emote or "boom"
        self.output_mode = OutputMode(self.output_mode or OutputMode.TEXT)

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.columns

    @property
    def is_valid(self) -> bool:
        """At least half of the board must stay free of mines."""
        return self.total_cells > self.mines * 2


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

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
    Generated minefield.

    Owns the grid of cells, the random source and the list of safe cells
    recorded while adjacency counts are computed.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: RandomSource = field(default=random.random, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _safe_cells: List[Coordinate] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create grid of placeholder cells."""
        self._grid = [
            [Cell() for _ in range(self.config.columns)]
            for _ in range(self.config.rows)
        ]
        self._safe_cells = []

    def _pick(self, size: int) -> int:
        """Draw a uniform index in [0, size) from the random source."""
        return int(self.rng() * size)

    def plant_mines(self) -> None:
        """
        Place mines by rejection sampling.

        A draw that lands on an existing mine is discarded and does not
        count towards the total.
        """
        planted = 0
        discarded = 0
        while planted < self.config.mines:
            row = self._pick(self.config.rows)
            col = self._pick(self.config.columns)
            cell = self._grid[row][col]
            if cell.is_mine:
                discarded += 1
                continue
            cell.is_mine = True
            planted += 1
        logger.debug(
            "Planted %d mines (%d draws discarded)", planted, discarded
        )

    def populate(self) -> None:
        """Calculate adjacent mine counts and record safe cells."""
        self._safe_cells = []
        for row in range(self.config.rows):
            for col in range(self.config.columns):
                cell = self._grid[row][col]
                if cell.is_mine:
                    continue
                cell.adjacent_mines = self.count_adjacent_mines(row, col)
                self._safe_cells.append((row, col))

    def count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Coordinate]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
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
        return 0 <= row < self.config.rows and 0 <= col < self.config.columns

    # ========================================================================
    # Reveal Actions (Mid-level)
    # ========================================================================

    def reveal_first(
        self, enabled: bool = True, expand_zeros: bool = True
    ) -> Coordinate:
        """
        Reveal a random safe cell, like the opening click of a game.

        With ``expand_zeros`` the pick is made among zero cells when any
        exist, and the zero region around it is opened.

        Args:
            enabled: When False nothing is revealed.
            expand_zeros: Prefer zero cells and flood-fill from them.

        Returns:
            The chosen (row, col), or NO_REVEAL.
        """
        if not enabled or not self._safe_cells:
            return NO_REVEAL

        candidates = self._safe_cells
        if expand_zeros:
            zeros = [
                (row, col) for row, col in self._safe_cells
                if self._grid[row][col].is_zero
            ]
            if zeros:
                candidates = zeros

        row, col = candidates[self._pick(len(candidates))]
        cell = self._grid[row][col]

        if expand_zeros and cell.is_zero:
            revealed = self.reveal_surroundings(row, col, recurse=True)
        else:
            revealed = int(cell.reveal())

        logger.debug(
            "First reveal at (%d, %d) opened %d cells", row, col, revealed
        )
        return row, col

    def reveal_surroundings(
        self, row: int, col: int, recurse: bool = True
    ) -> int:
        """
        Reveal a cell and its neighbors, cascading through zero cells.

        Mines are never revealed. Without ``recurse`` only the one-hop
        neighborhood is opened.

        Args:
            row: Row index to start from.
            col: Column index to start from.
            recurse: Continue from every revealed zero neighbor.

        Returns:
            Number of cells that changed from hidden to revealed.
        """
        if not self._is_valid_position(row, col) or self._grid[row][col].is_mine:
            return 0

        revealed = 0
        visited: Set[Coordinate] = set()
        stack = [(row, col)]

        while stack:
            center = stack.pop()
            if center in visited:
                continue
            visited.add(center)

            for pos in [center] + self.neighbors(*center):
                cell = self._grid[pos[0]][pos[1]]
                if cell.is_mine:
                    continue
                if cell.reveal():
                    revealed += 1
                if recurse and cell.is_zero and pos not in visited:
                    stack.append(pos)

        return revealed

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def safe_cells(self) -> Tuple[Coordinate, ...]:
        """Safe cells in row-major order, as recorded by populate()."""
        return tuple(self._safe_cells)

    @property
    def mine_count(self) -> int:
        """Number of mines on the board."""
        return sum(cell.is_mine for row in self._grid for cell in row)

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return sum(cell.is_revealed for row in self._grid for cell in row)

    @property
    def grid(self) -> List[List[Cell]]:
        """The rows of cells."""
        return self._grid

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def get_mine_counts(self) -> np.ndarray:
        """
        Get the solved board as a numpy array.

        Returns:
            2D int8 array where -1 = mine and 0-8 = adjacent count.
        """
        counts = np.zeros((self.config.rows, self.config.columns), dtype=np.int8)
        for row in range(self.config.rows):
            for col in range(self.config.columns):
                cell = self._grid[row][col]
                counts[row, col] = -1 if cell.is_mine else (cell.adjacent_mines or 0)
        return counts

    def get_observation(self) -> np.ndarray:
        """
        Get the visible board state as a numpy array.

        Returns:
            2D int8 array where -1 = hidden and 0-8 = revealed count.
        """
        obs = np.zeros((self.config.rows, self.config.columns), dtype=np.int8)
        for row in range(self.config.rows):
            for col in range(self.config.columns):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

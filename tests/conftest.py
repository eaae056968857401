"""
Pytest configuration and shared fixtures.
"""
import itertools
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines, planted and populated."""
    board = Board(BoardConfig(), random.Random(1234).random)
    board.plant_mines()
    board.populate()
    return board


@pytest.fixture
def empty_board() -> Board:
    """Create a populated 5x5 board with no mines for cascade testing."""
    board = Board(BoardConfig(5, 5))
    board.populate()
    return board


@pytest.fixture
def make_board() -> Callable[..., Board]:
    """Build a populated board with mines at the given coordinates."""

    def _make(
        rows: int, columns: int, mines: Iterable[Tuple[int, int]]
    ) -> Board:
        board = Board(BoardConfig(rows, columns))
        for row, col in mines:
            board.grid[row][col].is_mine = True
        board.populate()
        return board

    return _make


@pytest.fixture
def scripted_rng() -> Callable[[List[float]], Callable[[], float]]:
    """Random source that replays the given values in a loop."""

    def _make(values: List[float]) -> Callable[[], float]:
        values_iter = itertools.cycle(values)
        return lambda: next(values_iter)

    return _make


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden safe cell with no adjacent mines."""
    return Cell(adjacent_mines=0)


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
    return BoardConfig(9, 9, 10)

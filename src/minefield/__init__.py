"""
Minefield generator.

Builds random Minesweeper boards and renders them as spoiler-tagged text.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    OutputMode,
    NO_REVEAL,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .render import CellLabels, spoilerize, render
from .generator import BoardGenerator

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "OutputMode",
    "NO_REVEAL",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "CellLabels",
    "spoilerize",
    "render",
    "BoardGenerator",
]

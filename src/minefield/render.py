"""
Rendering for generated boards.

Turns a board into spoiler-tagged chat text, the same text fenced as a
code block, or the raw grid of per-cell labels.
"""
from dataclasses import dataclass
from typing import List, Tuple, Union

from .board import Board, BoardConfig, OutputMode
from .cell import Cell


NUMBER_WORDS = (
    "zero", "one", "two", "three", "four",
    "five", "six", "seven", "eight",
)

Matrix = List[List[str]]


def spoilerize(text: str, spaces: bool = True) -> str:
    """Wrap an emote name in a spoiler tag."""
    if spaces:
        return f"|| :{text}: ||"
    return f"||:{text}:||"


def unspoilerize(label: str) -> str:
    """Strip the spoiler bars from a label produced by spoilerize()."""
    return label[2:-2]


@dataclass(frozen=True)
class CellLabels:
    """Spoiler-tagged labels for mines and for each adjacency count."""

    mine: str
    numbers: Tuple[str, ...]

    @classmethod
    def build(cls, emote: str = "boom", spaces: bool = True) -> "CellLabels":
        """Create labels for the given mine emote and spacing."""
        return cls(
            mine=spoilerize(emote, spaces),
            numbers=tuple(spoilerize(word, spaces) for word in NUMBER_WORDS),
        )


def cell_label(cell: Cell, labels: CellLabels) -> str:
    """Label a single cell, dropping the spoiler once it is revealed."""
    if cell.is_mine:
        return labels.mine
    label = labels.numbers[cell.adjacent_mines or 0]
    if cell.is_revealed:
        return unspoilerize(label)
    return label


def to_matrix(board: Board, labels: CellLabels) -> Matrix:
    """Label every cell of the board, row by row."""
    return [[cell_label(cell, labels) for cell in row] for row in board.grid]


def to_text(matrix: Matrix, spaces: bool = True) -> str:
    """Join labels into rows and rows into lines."""
    separator = " " if spaces else ""
    return "\n".join(separator.join(row) for row in matrix)


def to_code_block(text: str) -> str:
    """Fence text as a code block."""
    return f"```{text}```"


def render(board: Board, config: BoardConfig) -> Union[str, Matrix]:
    """
    Render a board in the configured output mode.

    Args:
        board: Populated board.
        config: Supplies the emote, spacing and output mode.

    Returns:
        Text for TEXT and CODE_BLOCK, a list of label rows for RAW_GRID.
    """
    labels = CellLabels.build(config.emote, config.spaces)
    matrix = to_matrix(board, labels)

    if config.output_mode == OutputMode.RAW_GRID:
        return matrix

    text = to_text(matrix, config.spaces)
    if config.output_mode == OutputMode.CODE_BLOCK:
        return to_code_block(text)
    return text

"""
Board generator.

Runs the full pipeline for one board: validate the density, allocate the
grid, plant mines, count neighbors, optionally open a first cell, render.
"""
import logging
import random
from typing import List, Optional, Union

from .board import NO_REVEAL, Board, BoardConfig, Coordinate, RandomSource
from .render import render


logger = logging.getLogger(__name__)


class BoardGenerator:
    """
    Generates one static minefield per call to start().

    Each generator owns its board. The random source may be shared with
    other generators but must not be used by two of them at the same time.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        """
        Initialize the generator.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            rng: Callable returning uniform floats in [0, 1).
        """
        self.config = config or BoardConfig()
        self.rng = rng or random.random
        self.board: Optional[Board] = None
        self.revealed_cell: Coordinate = NO_REVEAL

    def start(self) -> Optional[Union[str, List[List[str]]]]:
        """
        Generate and render a board.

        Returns:
            The rendered board, or None when the configuration puts mines
            on half of the cells or more.
        """
        if not self.config.is_valid:
            logger.warning(
                "Rejected %dx%d board with %d mines: too dense",
                self.config.rows, self.config.columns, self.config.mines,
            )
            return None

        self.board = Board(self.config, self.rng)
        self.board.plant_mines()
        self.board.populate()
        self.revealed_cell = self.board.reveal_first(
            self.config.reveal_first_cell, self.config.expand_zeros
        )
        logger.debug(
            "Generated %dx%d board with %d mines",
            self.config.rows, self.config.columns, self.config.mines,
        )

        return render(self.board, self.config)

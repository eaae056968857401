"""
Unit tests for BoardGenerator.

Tests the density gate, output modes, determinism and the first reveal
through the full pipeline.
"""
import random

import pytest
from minefield import BoardConfig, BoardGenerator, NO_REVEAL, OutputMode


# ============================================================================
# Validation Tests
# ============================================================================

class TestDensityGate:
    """Test the failure sentinel."""

    def test_too_many_mines_returns_none(self) -> None:
        """Invalid configurations produce no board."""
        generator = BoardGenerator(BoardConfig(rows=2, columns=2, mines=200))
        assert generator.start() is None
        assert generator.board is None

    @pytest.mark.parametrize(
        "rows, columns, mines",
        [(4, 4, 7), (4, 4, 8), (3, 3, 4), (3, 3, 5), (5, 2, 4), (5, 2, 5)],
    )
    def test_none_iff_half_the_board_is_mined(
        self, rows: int, columns: int, mines: int
    ) -> None:
        """start() fails exactly when rows * columns <= mines * 2."""
        output = BoardGenerator(BoardConfig(rows, columns, mines)).start()
        assert (output is None) == (rows * columns <= mines * 2)


# ============================================================================
# Output Tests
# ============================================================================

class TestOutput:
    """Test rendered results of a full run."""

    def test_returns_text(self) -> None:
        """Text mode returns a string with one line per row."""
        output = BoardGenerator(BoardConfig(output_mode=OutputMode.TEXT)).start()
        assert isinstance(output, str)
        assert len(output.splitlines()) == 9

    def test_returns_code_block(self) -> None:
        """Code-block mode returns fenced text."""
        output = BoardGenerator(BoardConfig(output_mode="code-block")).start()
        assert output.startswith("```")

    def test_returns_raw_grid(self) -> None:
        """Raw-grid mode returns a list of rows."""
        output = BoardGenerator(BoardConfig(output_mode="raw-grid")).start()
        assert isinstance(output, list)
        assert isinstance(output[0], list)

    @pytest.mark.parametrize("seed", range(5))
    def test_raw_grid_has_exact_mine_count(self, seed: int) -> None:
        """Every board carries exactly the configured number of mines."""
        config = BoardConfig(8, 11, 20, emote="tada", output_mode="raw-grid")
        output = BoardGenerator(config, random.Random(seed).random).start()

        labels = [label for row in output for label in row]
        assert labels.count("|| :tada: ||") == 20
        assert len(labels) - labels.count("|| :tada: ||") == 8 * 11 - 20


# ============================================================================
# Determinism Tests
# ============================================================================

class TestDeterminism:
    """Test reproducibility under a seeded random source."""

    def test_same_seed_same_board(self) -> None:
        """Generators sharing a seed produce identical boards."""
        config = BoardConfig(10, 12, 25, reveal_first_cell=True)
        first = BoardGenerator(config, random.Random(99).random)
        second = BoardGenerator(config, random.Random(99).random)

        assert first.start() == second.start()
        assert first.revealed_cell == second.revealed_cell
        assert (first.board.get_mine_counts() == second.board.get_mine_counts()).all()

    def test_restart_builds_fresh_board(self) -> None:
        """Each start() builds a new board."""
        generator = BoardGenerator(BoardConfig(reveal_first_cell=True))
        generator.start()
        first_board = generator.board
        generator.start()
        assert generator.board is not first_board
        assert generator.board.mine_count == 10


# ============================================================================
# First Reveal Tests
# ============================================================================

class TestFirstReveal:
    """Test the reveal step of the pipeline."""

    def test_reveal_disabled_by_default(self) -> None:
        """No cell is revealed unless requested."""
        generator = BoardGenerator()
        output = generator.start()
        assert generator.revealed_cell == NO_REVEAL
        assert generator.board.revealed_count == 0
        assert all(line.count("||") == 18 for line in output.splitlines())

    @pytest.mark.parametrize("seed", range(5))
    def test_reveal_opens_safe_cell(self, seed: int) -> None:
        """The first reveal lands on a safe cell and never opens a mine."""
        generator = BoardGenerator(
            BoardConfig(reveal_first_cell=True), random.Random(seed).random
        )
        generator.start()

        row, col = generator.revealed_cell
        cell = generator.board.get_cell(row, col)
        assert cell.is_mine is False
        assert cell.is_revealed is True
        assert not any(
            c.is_mine and c.is_revealed for line in generator.board.grid for c in line
        )

    def test_reveal_without_expansion_opens_one_cell(self) -> None:
        """Disabling expansion opens exactly one cell."""
        config = BoardConfig(reveal_first_cell=True, expand_zeros=False)
        generator = BoardGenerator(config, random.Random(5).random)
        generator.start()
        assert generator.board.revealed_count == 1

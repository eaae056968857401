"""
Minefield - command line entry point.

Usage:
    minefield generate [--rows N] [--columns N] [--mines N] [--reveal-first]
    minefield generate --preset expert --output code-block --seed 42
"""
import argparse
import logging
import random
import sys
from dataclasses import replace
from typing import List, Optional

from .board import PRESETS, BoardConfig, OutputMode
from .generator import BoardGenerator


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Map command line flags onto a board configuration."""
    base = PRESETS[args.preset] if args.preset else BoardConfig()
    return replace(
        base,
        rows=args.rows or base.rows,
        columns=args.columns or base.columns,
        mines=args.mines or base.mines,
        emote=args.emote,
        reveal_first_cell=args.reveal_first,
        expand_zeros=not args.no_expand,
        spaces=not args.no_spaces,
        output_mode=OutputMode(args.output),
    )


def generate(args: argparse.Namespace) -> int:
    """Generate a board and print it."""
    config = build_config(args)
    rng = random.Random(args.seed).random if args.seed is not None else None
    generator = BoardGenerator(config, rng)

    result = generator.start()
    if result is None:
        print(
            f"Too many mines: {config.mines} mines need more than "
            f"{config.mines * 2} cells, board has {config.total_cells}",
            file=sys.stderr,
        )
        return 1

    if config.output_mode == OutputMode.RAW_GRID:
        for row in result:
            print(row)
    else:
        print(result)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Generate spoiler-tagged Minesweeper boards"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    gen_parser = subparsers.add_parser("generate", help="Generate a board")
    gen_parser.add_argument("--rows", type=int, default=None, help="Number of rows")
    gen_parser.add_argument(
        "--columns", type=int, default=None, help="Number of columns"
    )
    gen_parser.add_argument("--mines", type=int, default=None, help="Number of mines")
    gen_parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default=None,
        help="Difficulty preset (explicit sizes override it)",
    )
    gen_parser.add_argument(
        "--emote", default="boom", help="Emote name used for mines"
    )
    gen_parser.add_argument(
        "--reveal-first", action="store_true", help="Reveal a first safe cell"
    )
    gen_parser.add_argument(
        "--no-expand",
        action="store_true",
        help="Reveal only the first cell instead of its zero region",
    )
    gen_parser.add_argument(
        "--no-spaces", action="store_true", help="Do not pad cells with spaces"
    )
    gen_parser.add_argument(
        "--output",
        choices=[mode.value for mode in OutputMode],
        default=OutputMode.TEXT.value,
        help="Output format",
    )
    gen_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible boards"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        return generate(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())

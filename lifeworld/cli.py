"""
Command-line host for lifeworld.

Loads a board (from a file or the pattern library), evolves it and prints the
resulting board with its generation and live cell count.

    lifeworld --pattern glider --pad 3 --generations 4
    lifeworld --board board.txt --rule highlife --generations 10
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import WorldConfig
from .core.errors import LifeWorldError
from .core.rules import NAMED_RULES, resolve_rule
from .core.world import World
from .patterns.detector import detect_cycle
from .patterns.library import PATTERNS, get_pattern, place_pattern

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lifeworld", description="Life-like cellular automaton runner")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--board", type=Path, help="Board text file ('.' dead, '*' alive)")
    source.add_argument("--pattern", choices=sorted(PATTERNS), help="Start from a library pattern")
    parser.add_argument("--pad", type=int, default=2, help="Dead cells around a library pattern")
    parser.add_argument("--rule", default=None,
                        help=f"Rule string S/B or name ({', '.join(sorted(NAMED_RULES))})")
    parser.add_argument("--generations", type=int, default=1, help="Generations to evolve")
    parser.add_argument("--detect", action="store_true", help="Report still life / oscillator / extinction")
    parser.add_argument("--max-detect", type=int, default=1000, help="Generation limit for --detect")
    parser.add_argument("--log-level", default="WARNING", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Logging level")
    return parser


def load_board(args: argparse.Namespace) -> str:
    """Read the starting board text selected on the command line."""
    if args.board is not None:
        return args.board.read_text()

    pattern = get_pattern(args.pattern)
    stamp_rows = pattern.board.count('\n')
    stamp_cols = pattern.board.index('\n')
    return place_pattern(pattern.board,
                         stamp_rows + 2 * args.pad, stamp_cols + 2 * args.pad,
                         args.pad, args.pad)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command-line host; returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.generations < 0 or args.pad < 0 or args.max_detect < 0:
        parser.error("--generations, --pad and --max-detect must be non-negative")

    logging.basicConfig(level=args.log_level, format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        text = load_board(args)
        rule_string = resolve_rule(args.rule).rule_string if args.rule else None
        world = World(WorldConfig(log_generations=True)).init(text, rule_string)
        logger.info(f"Loaded {world!r}")

        if args.detect:
            result = detect_cycle(world, args.max_detect)

        world.evolve(args.generations)
    except (LifeWorldError, OSError) as e:
        logger.error(f"lifeworld failed: {e}")
        return 1

    print(world.to_string(), end="")
    print(f"generation: {world.get_generation()}  alive: {world.get_alive_count()}  "
          f"rule: {world.get_rules().rule_string}")
    if args.detect:
        print(f"behavior: {result.kind.value}  period: {result.period}  "
              f"cycle starts: {result.first_generation}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

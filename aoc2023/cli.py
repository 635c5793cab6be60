"""Command-line interface for running a day's solution."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from . import day01, day02, day03, day04, day05, day06, day07, day08, day09, day10
from .ranges import EmptyResultError
from .util import PuzzleFormatError, lines_from_text, read_lines

logger = logging.getLogger(__name__)

Solver = Callable[..., int]

SOLVERS: Dict[int, Solver] = {
    1: day01.solve,
    2: day02.solve,
    3: day03.solve,
    4: day04.solve,
    5: day05.solve,
    6: day06.solve,
    7: day07.solve,
    8: day08.solve,
    9: day09.solve,
    10: day10.solve,
}

SINGLE_PART_DAYS = frozenset({10})


@dataclass(slots=True)
class RunConfig:
    day: int
    part: int = 1
    input_path: Optional[str] = None
    verbose: bool = False


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_lines(input_path: Optional[str]) -> List[str]:
    if input_path:
        return read_lines(input_path)
    return lines_from_text(sys.stdin.read())


def run(config: RunConfig, lines: Sequence[str]) -> int:
    if config.day not in SOLVERS:
        raise ValueError(f"no solution for day {config.day}")
    if config.part != 1 and config.day in SINGLE_PART_DAYS:
        raise ValueError(f"day {config.day} has a single part")
    return SOLVERS[config.day](lines, part=config.part)


def _parse_args(argv: list[str] | None) -> RunConfig:
    parser = argparse.ArgumentParser(description="Run a daily puzzle solution")
    parser.add_argument("day", type=int, choices=sorted(SOLVERS), help="Puzzle day")
    parser.add_argument("--part", "-p", type=int, choices=(1, 2), default=1, help="Puzzle part")
    parser.add_argument("--input", "-i", help="Path to the puzzle input (reads stdin when omitted)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log parsing and solver steps")
    args = parser.parse_args(argv)
    if args.part != 1 and args.day in SINGLE_PART_DAYS:
        parser.error(f"day {args.day} has a single part")
    return RunConfig(day=args.day, part=args.part, input_path=args.input, verbose=args.verbose)


def main(argv: list[str] | None = None) -> int:
    config = _parse_args(argv)
    _configure_logging(config.verbose)

    try:
        lines = _load_lines(config.input_path)
        result = run(config, lines)
    except OSError as exc:
        print(f"Failed to read input: {exc}", file=sys.stderr)
        return 2
    except PuzzleFormatError as exc:
        print(f"Failed to parse input: {exc}", file=sys.stderr)
        return 2
    except LookupError as exc:
        print(f"Lookup failed: {exc}", file=sys.stderr)
        return 3
    except EmptyResultError as exc:
        print(f"No result: {exc}", file=sys.stderr)
        return 4

    logger.info("Day %d part %d: %d", config.day, config.part, result)
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Day 9: extrapolating OASIS sensor readings."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .util import PuzzleFormatError, parse_ints

logger = logging.getLogger(__name__)


def difference_rows(readings: Sequence[int]) -> List[List[int]]:
    """Repeated differences of `readings`, down to the first all-zero row."""
    if not readings:
        raise PuzzleFormatError("no readings to extrapolate")
    rows = [list(readings)]
    while any(rows[-1]):
        current = rows[-1]
        rows.append([b - a for a, b in zip(current, current[1:])])
    if logger.isEnabledFor(logging.DEBUG):
        for row in rows:
            logger.debug("%s", row)
    return rows


def next_value(readings: Sequence[int]) -> int:
    return sum(row[-1] for row in difference_rows(readings) if row)


def previous_value(readings: Sequence[int]) -> int:
    value = 0
    for row in reversed(difference_rows(readings)):
        if row:
            value = row[0] - value
    return value


def parse_readings(lines: Sequence[str]) -> List[List[int]]:
    return [parse_ints(line, line) for line in lines if line.strip()]


def solve(lines: Sequence[str], part: int = 1) -> int:
    extrapolate = next_value if part == 1 else previous_value
    return sum(extrapolate(readings) for readings in parse_readings(lines))

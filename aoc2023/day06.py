"""Day 6: toy boat races."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence

from .util import PuzzleFormatError, parse_ints

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Race:
    time: int
    distance: int

    def ways_to_break_record(self) -> int:
        """Count whole hold times `h` in `(0, time)` with `h * (time - h) > distance`."""
        discriminant = self.time * self.time - 4 * self.distance
        if discriminant <= 0:
            return 0
        # Start at or below the smaller root and walk up to the first winner.
        hold = max(0, (self.time - math.isqrt(discriminant)) // 2)
        while hold * (self.time - hold) <= self.distance:
            hold += 1
            if hold > self.time // 2:
                return 0
        return self.time - 2 * hold + 1


def _values(line: str, label: str, joined: bool) -> List[int]:
    _, _, text = line.partition(":")
    if joined:
        text = "".join(text.split())
    return parse_ints(text, f"{label} line")


def parse_races(lines: Sequence[str], joined: bool = False) -> List[Race]:
    """Parse `Time:` and `Distance:` columns; `joined` merges each line into one number."""
    times: List[int] = []
    distances: List[int] = []
    for line in lines:
        if not line.strip():
            continue
        if line.startswith("Time:"):
            times = _values(line, "Time", joined)
        elif line.startswith("Distance:"):
            distances = _values(line, "Distance", joined)
        else:
            raise PuzzleFormatError(f"invalid line {line!r}")

    if not times or len(times) != len(distances):
        raise PuzzleFormatError(f"invalid times ({times}) and distances ({distances})")
    races = [Race(time=time, distance=distance) for time, distance in zip(times, distances)]
    logger.debug("parsed races %s", races)
    return races


def solve(lines: Sequence[str], part: int = 1) -> int:
    races = parse_races(lines, joined=part != 1)
    return math.prod(race.ways_to_break_record() for race in races)

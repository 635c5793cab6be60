"""Day 1: calibration values hidden in lines of text."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterator, Mapping, Sequence

from .util import MinMax, PuzzleFormatError

logger = logging.getLogger(__name__)

_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")

DIGITS: Mapping[str, int] = MappingProxyType({str(n): n for n in range(1, 10)})
SPELLED_DIGITS: Mapping[str, int] = MappingProxyType(
    {**DIGITS, **{word: n for n, word in enumerate(_WORDS, start=1)}}
)


def _positions(line: str, token: str) -> Iterator[int]:
    # Overlapping matches count, e.g. "eightwo" holds both "eight" and "two".
    index = line.find(token)
    while index != -1:
        yield index
        index = line.find(token, index + 1)


def calibration_value(line: str, spelled: bool = True) -> int:
    tokens = SPELLED_DIGITS if spelled else DIGITS
    first = None
    last = None
    for token, digit in tokens.items():
        seen = MinMax.collect(_positions(line, token))
        if seen.min is not None and (first is None or seen.min < first[0]):
            first = (seen.min, digit)
        if seen.max is not None and (last is None or seen.max > last[0]):
            last = (seen.max, digit)

    if first is None or last is None:
        raise PuzzleFormatError(f"no digits found in {line!r}")
    value = first[1] * 10 + last[1]
    logger.debug("%s -> %d", line, value)
    return value


def solve(lines: Sequence[str], part: int = 1) -> int:
    return sum(calibration_value(line, spelled=part != 1) for line in lines if line.strip())

"""Helpers shared by the daily puzzle modules."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

logger = logging.getLogger(__name__)


class PuzzleFormatError(ValueError):
    """Raised when puzzle input cannot be parsed."""


def lines_from_text(raw_text: str) -> List[str]:
    """Split `raw_text` into lines, keeping blank separators between blocks."""
    lines = raw_text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise PuzzleFormatError("input is empty")
    for line in lines:
        logger.debug("%s", line)
    return lines


def read_lines(path: str | Path) -> List[str]:
    """Read `path` as puzzle input or raise `PuzzleFormatError` when it is empty."""
    raw_text = Path(path).read_text(encoding="utf-8")
    try:
        return lines_from_text(raw_text)
    except PuzzleFormatError as exc:
        raise PuzzleFormatError(f"no input in {path}") from exc


def parse_ints(text: str, context: str) -> List[int]:
    try:
        return [int(token) for token in text.split()]
    except ValueError as exc:
        raise PuzzleFormatError(f"expected integers in {context!r}") from exc


class Direction(Enum):
    UPPER = (0, -1)
    LOWER = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UPPER_LEFT = (-1, -1)
    UPPER_RIGHT = (1, -1)
    LOWER_LEFT = (-1, 1)
    LOWER_RIGHT = (1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))


# Probe order: below, above, then sideways.
_ORTHOGONAL = (Direction.LOWER, Direction.UPPER, Direction.RIGHT, Direction.LEFT)
_WITH_DIAGONAL = (
    Direction.LOWER,
    Direction.LOWER_RIGHT,
    Direction.LOWER_LEFT,
    Direction.UPPER,
    Direction.UPPER_RIGHT,
    Direction.UPPER_LEFT,
    Direction.RIGHT,
    Direction.LEFT,
)


@dataclass(frozen=True, slots=True)
class Neighbor:
    direction: Direction
    x: int
    y: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


def in_grid(grid: Sequence[Sequence[object]], x: int, y: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def grid_neighbors(
    grid: Sequence[Sequence[object]],
    x: int,
    y: int,
    include_diagonal: bool = False,
) -> List[Neighbor]:
    """Return the in-bounds neighbours of `(x, y)`.

    Rows may have different lengths; a neighbour only counts when its own row
    is long enough to contain it. `y` grows downwards.
    """
    directions = _WITH_DIAGONAL if include_diagonal else _ORTHOGONAL
    neighbors: List[Neighbor] = []
    for direction in directions:
        nx = x + direction.dx
        ny = y + direction.dy
        if in_grid(grid, nx, ny):
            neighbors.append(Neighbor(direction=direction, x=nx, y=ny))
    return neighbors


@dataclass(slots=True)
class MinMax:
    """Smallest and largest value seen; both `None` for an empty collection."""

    min: Optional[int] = None
    max: Optional[int] = None

    def add(self, value: int) -> None:
        if self.min is None or value < self.min:
            self.min = value
        if self.max is None or value > self.max:
            self.max = value

    @classmethod
    def collect(cls, values: Iterable[int]) -> MinMax:
        result = cls()
        for value in values:
            result.add(value)
        return result


def least_common_multiple(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // math.gcd(a, b)

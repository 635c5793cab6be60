"""Day 10: the pipe maze loop through the start tile."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Sequence, Tuple

from .util import Direction, PuzzleFormatError, grid_neighbors, in_grid

logger = logging.getLogger(__name__)

START = "S"
GROUND = "."

PIPES: Mapping[str, FrozenSet[Direction]] = MappingProxyType(
    {
        "|": frozenset({Direction.UPPER, Direction.LOWER}),
        "-": frozenset({Direction.LEFT, Direction.RIGHT}),
        "L": frozenset({Direction.UPPER, Direction.RIGHT}),
        "J": frozenset({Direction.UPPER, Direction.LEFT}),
        "7": frozenset({Direction.LOWER, Direction.LEFT}),
        "F": frozenset({Direction.LOWER, Direction.RIGHT}),
        GROUND: frozenset(),
    }
)


@dataclass(slots=True)
class PipeMap:
    grid: List[str]
    start: Tuple[int, int]

    def start_connections(self) -> List[Direction]:
        """Directions from the start tile into pipes that connect back to it."""
        x, y = self.start
        return [
            neighbor.direction
            for neighbor in grid_neighbors(self.grid, x, y)
            if neighbor.direction.opposite in PIPES.get(self.grid[neighbor.y][neighbor.x], ())
        ]

    def loop(self) -> List[Tuple[int, int]]:
        """Positions on the loop, in walking order, beginning at the start tile."""
        connections = self.start_connections()
        if len(connections) != 2:
            raise PuzzleFormatError(
                f"start tile connects to {len(connections)} pipes, expected 2"
            )

        path = [self.start]
        x, y = self.start
        heading = connections[0]
        while True:
            x, y = x + heading.dx, y + heading.dy
            if (x, y) == self.start:
                return path
            if not in_grid(self.grid, x, y):
                raise PuzzleFormatError(f"loop leaves the map at ({x}, {y})")
            exits = PIPES[self.grid[y][x]]
            if heading.opposite not in exits:
                raise PuzzleFormatError(f"loop is broken at ({x}, {y})")
            (heading,) = exits - {heading.opposite}
            path.append((x, y))

    def farthest_distance(self) -> int:
        length = len(self.loop())
        logger.debug("loop through %s has %d tiles", self.start, length)
        return length // 2


def parse_pipe_map(lines: Sequence[str]) -> PipeMap:
    grid = [line.rstrip() for line in lines]
    start = None
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == START:
                if start is not None:
                    raise PuzzleFormatError("two start positions found")
                start = (x, y)
            elif tile not in PIPES:
                raise PuzzleFormatError(f"unknown tile {tile!r} at ({x}, {y})")
    if start is None:
        raise PuzzleFormatError("no start position found")
    return PipeMap(grid=grid, start=start)


def solve(lines: Sequence[str], part: int = 1) -> int:
    return parse_pipe_map(lines).farthest_distance()

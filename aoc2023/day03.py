"""Day 3: part numbers and gear ratios in an engine schematic."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Set, Tuple

from .util import PuzzleFormatError, grid_neighbors

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SchematicNumber:
    value: int
    x: int
    y: int
    length: int

    def cells(self) -> List[Tuple[int, int]]:
        return [(self.x + offset, self.y) for offset in range(self.length)]


@dataclass(slots=True)
class Schematic:
    grid: List[str]
    numbers: List[SchematicNumber] = field(default_factory=list)

    def _is_symbol(self, x: int, y: int) -> bool:
        char = self.grid[y][x]
        return char != "." and not char.isdecimal()

    def part_numbers(self) -> List[SchematicNumber]:
        parts = []
        for number in self.numbers:
            if any(
                self._is_symbol(neighbor.x, neighbor.y)
                for x, y in number.cells()
                for neighbor in grid_neighbors(self.grid, x, y, include_diagonal=True)
            ):
                parts.append(number)
        return parts

    def gear_ratios(self) -> List[int]:
        """Ratios of every `*` touching exactly two part numbers."""
        by_cell: Dict[Tuple[int, int], int] = {}
        parts = self.part_numbers()
        for index, number in enumerate(parts):
            for cell in number.cells():
                by_cell[cell] = index

        ratios = []
        for y, row in enumerate(self.grid):
            for x, char in enumerate(row):
                if char != "*":
                    continue
                touching: Set[int] = {
                    by_cell[neighbor.position]
                    for neighbor in grid_neighbors(self.grid, x, y, include_diagonal=True)
                    if neighbor.position in by_cell
                }
                if len(touching) == 2:
                    first, second = (parts[index].value for index in touching)
                    logger.debug("gear at (%d, %d): %d * %d", x, y, first, second)
                    ratios.append(first * second)
        return ratios


def parse_schematic(lines: Sequence[str]) -> Schematic:
    grid = [line.rstrip("\n") for line in lines]
    if not any(grid):
        raise PuzzleFormatError("schematic is empty")

    schematic = Schematic(grid=grid)
    for y, row in enumerate(grid):
        x = 0
        while x < len(row):
            if not row[x].isdecimal():
                x += 1
                continue
            start = x
            while x < len(row) and row[x].isdecimal():
                x += 1
            digits = row[start:x]
            schematic.numbers.append(
                SchematicNumber(value=int(digits), x=start, y=y, length=len(digits))
            )
    logger.debug("found %d numbers", len(schematic.numbers))
    return schematic


def solve(lines: Sequence[str], part: int = 1) -> int:
    schematic = parse_schematic(lines)
    if part == 1:
        return sum(number.value for number in schematic.part_numbers())
    return sum(schematic.gear_ratios())

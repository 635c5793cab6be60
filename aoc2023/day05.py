"""Day 5: seed almanac, mapped through chained translation stages."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from .ranges import (
    TERMINAL_CATEGORY,
    Interval,
    ShiftRule,
    Stage,
    StageLookupError,
    build_stage_graph,
    run_chain,
)
from .util import PuzzleFormatError, parse_ints

logger = logging.getLogger(__name__)

SEED_CATEGORY = "seed"

_HEADER_RE = re.compile(r"^([a-z]+)-to-([a-z]+) map:$")


@dataclass(slots=True)
class Almanac:
    seeds: List[int]
    stages: Dict[str, Stage] = field(default_factory=dict)

    def seed_intervals(self, as_ranges: bool = False) -> List[Interval]:
        """Seeds as intervals: single values, or `(start, length)` pairs."""
        if not as_ranges:
            return [Interval(start=seed, length=1) for seed in self.seeds]
        if len(self.seeds) % 2:
            raise PuzzleFormatError("seed ranges must come in (start, length) pairs")
        if any(length <= 0 for length in self.seeds[1::2]):
            raise PuzzleFormatError("seed range lengths must be positive")
        pairs = zip(self.seeds[0::2], self.seeds[1::2])
        return [Interval(start=start, length=length) for start, length in pairs]

    def lowest_location(self, as_ranges: bool = False) -> int:
        return run_chain(self.seed_intervals(as_ranges), self.stages, SEED_CATEGORY)

    def map(self, value: int, category: str) -> Tuple[str, int]:
        stage = self.stages.get(category)
        if stage is None:
            raise StageLookupError(f"no stage registered for category {category!r}")
        mapped = stage.map_value(value)
        logger.debug("%s %d -> %s %d", category, value, stage.destination, mapped)
        return stage.destination, mapped

    def seed_to_location(self, seed: int) -> int:
        category, value = SEED_CATEGORY, seed
        while category != TERMINAL_CATEGORY:
            category, value = self.map(value, category)
        logger.debug("seed %d -> location %d", seed, value)
        return value


def parse_rule(line: str) -> ShiftRule:
    values = parse_ints(line, line)
    if len(values) != 3:
        raise PuzzleFormatError(f"expected 'dest source length', got {line!r}")
    if any(value < 0 for value in values):
        raise PuzzleFormatError(f"negative value in rule {line!r}")
    dest_start, source_start, length = values
    return ShiftRule(source_start=source_start, dest_start=dest_start, length=length)


def parse_stage_header(line: str) -> Tuple[str, str]:
    match = _HEADER_RE.match(line.strip())
    if match is None:
        raise PuzzleFormatError(f"invalid map header {line!r}")
    return match.group(1), match.group(2)


def _parse_seeds(line: str) -> List[int]:
    title, _, values = line.partition(":")
    if title.strip() != "seeds" or not values:
        raise PuzzleFormatError(f"invalid seed line {line!r}")
    seeds = parse_ints(values, line)
    if not seeds:
        raise PuzzleFormatError("no seeds listed")
    return seeds


def _parse_blocks(lines: Sequence[str]) -> List[List[str]]:
    blocks: List[List[str]] = []
    current: List[str] = []
    for line in lines:
        if line.strip():
            current.append(line)
        elif current:
            blocks.append(current)
            current = []
    if current:
        blocks.append(current)
    return blocks


def parse_almanac(lines: Sequence[str]) -> Almanac:
    seed_index = next((index for index, line in enumerate(lines) if line.strip()), None)
    if seed_index is None:
        raise PuzzleFormatError("almanac is empty")

    # The seed line stands alone; the next map header may follow it directly.
    seeds = _parse_seeds(lines[seed_index])

    stages = []
    for header, *rule_lines in _parse_blocks(lines[seed_index + 1 :]):
        source, destination = parse_stage_header(header)
        rules = tuple(parse_rule(line) for line in rule_lines)
        logger.debug("parsed %s-to-%s map with %d rules", source, destination, len(rules))
        stages.append(Stage(source=source, destination=destination, rules=rules))

    try:
        graph = build_stage_graph(stages)
    except ValueError as exc:
        raise PuzzleFormatError(str(exc)) from exc
    return Almanac(seeds=seeds, stages=graph)


def solve(lines: Sequence[str], part: int = 1) -> int:
    almanac = parse_almanac(lines)
    if part == 1:
        return almanac.lowest_location()
    return almanac.lowest_location(as_ranges=True)

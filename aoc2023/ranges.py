"""Interval range-mapping engine.

Intervals are pushed through a chain of stages. Each stage is an ordered set of
shift rules; an interval is split only where it crosses a rule boundary, so the
work done depends on the number of boundary crossings and never on how many
values an interval covers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

TERMINAL_CATEGORY = "location"


class StageLookupError(LookupError):
    """Raised when the chain reaches a category that has no stage."""


class EmptyResultError(ValueError):
    """Raised when a reduction is requested over an empty set of values."""


@dataclass(frozen=True, slots=True)
class Interval:
    """Half-open range `[start, start + length)`."""

    start: int
    length: int

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError(f"interval length must be positive, got {self.length}")

    @property
    def end(self) -> int:
        return self.start + self.length

    def shifted(self, offset: int) -> Interval:
        return Interval(start=self.start + offset, length=self.length)

    @classmethod
    def from_bounds(cls, start: int, end: int) -> Interval:
        return cls(start=start, length=end - start)


@dataclass(frozen=True, slots=True)
class ShiftRule:
    source_start: int
    dest_start: int
    length: int

    @property
    def source_end(self) -> int:
        return self.source_start + self.length

    @property
    def offset(self) -> int:
        return self.dest_start - self.source_start

    def map_value(self, value: int) -> Optional[int]:
        if self.source_start <= value < self.source_end:
            return value + self.offset
        return None


@dataclass(frozen=True, slots=True)
class Stage:
    source: str
    destination: str
    rules: Tuple[ShiftRule, ...] = ()

    def map_value(self, value: int) -> int:
        for rule in self.rules:
            mapped = rule.map_value(value)
            if mapped is not None:
                return mapped
        return value


StageGraph = Mapping[str, Stage]


def apply_rule(interval: Interval, rule: ShiftRule) -> Optional[List[Interval]]:
    """Split `interval` against `rule`.

    Returns `None` when the two do not overlap. Otherwise the first element is
    the overlapping piece shifted into the destination range, followed by the
    untransformed left and right remainders that are non-empty.
    """
    overlap_start = max(interval.start, rule.source_start)
    overlap_end = min(interval.end, rule.source_end)
    if overlap_start >= overlap_end:
        return None

    pieces = [Interval.from_bounds(overlap_start, overlap_end).shifted(rule.offset)]
    if interval.start < overlap_start:
        pieces.append(Interval.from_bounds(interval.start, overlap_start))
    if overlap_end < interval.end:
        pieces.append(Interval.from_bounds(overlap_end, interval.end))
    return pieces


def _map_through(interval: Interval, rules: Sequence[ShiftRule]) -> Iterator[Interval]:
    # Work list of (piece, index of the first rule still to try). Remainders are
    # pushed right-first so the left one is finished before the right one.
    pending: List[Tuple[Interval, int]] = [(interval, 0)]
    while pending:
        piece, first_rule = pending.pop()
        for index in range(first_rule, len(rules)):
            pieces = apply_rule(piece, rules[index])
            if pieces is None:
                continue
            mapped, *remainders = pieces
            yield mapped
            # Remainders are only offered to rules that have not been tried yet.
            pending.extend((remainder, index + 1) for remainder in reversed(remainders))
            break
        else:
            yield piece


def apply_stage(intervals: Iterable[Interval], stage: Stage) -> List[Interval]:
    mapped: List[Interval] = []
    for interval in intervals:
        mapped.extend(_map_through(interval, stage.rules))
    return mapped


def build_stage_graph(stages: Iterable[Stage]) -> Dict[str, Stage]:
    graph: Dict[str, Stage] = {}
    for stage in stages:
        if stage.source in graph:
            raise ValueError(f"duplicate stage for category {stage.source!r}")
        graph[stage.source] = stage
    return graph


def run_chain(
    initial_intervals: Iterable[Interval],
    stage_graph: StageGraph,
    start_category: str,
    terminal_category: str = TERMINAL_CATEGORY,
) -> int:
    """Map `initial_intervals` from `start_category` to the terminal category.

    Returns the smallest value reachable in the terminal category.
    """
    intervals = list(initial_intervals)
    category = start_category
    visited = set()
    while category != terminal_category:
        if category in visited:
            raise StageLookupError(f"stage chain loops back to category {category!r}")
        visited.add(category)
        stage = stage_graph.get(category)
        if stage is None:
            raise StageLookupError(f"no stage registered for category {category!r}")
        intervals = apply_stage(intervals, stage)
        logger.debug(
            "%s -> %s: %d intervals", stage.source, stage.destination, len(intervals)
        )
        category = stage.destination

    if not intervals:
        raise EmptyResultError(f"no minimum found in category {terminal_category!r}")
    return min(interval.start for interval in intervals)

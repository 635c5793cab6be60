from __future__ import annotations

import pytest

from aoc2023.day05 import parse_almanac, parse_rule, parse_stage_header, solve
from aoc2023.ranges import Interval, ShiftRule, StageLookupError, run_chain
from aoc2023.util import PuzzleFormatError


def _load_example(example):
    return parse_almanac(example("day05.txt"))


def test_parser_reads_example(example):
    almanac = _load_example(example)
    assert almanac.seeds == [79, 14, 55, 13]
    assert len(almanac.stages) == 7
    seed_to_soil = almanac.stages["seed"]
    assert seed_to_soil.destination == "soil"
    assert seed_to_soil.rules == (
        ShiftRule(source_start=98, dest_start=50, length=2),
        ShiftRule(source_start=50, dest_start=52, length=48),
    )


def test_single_value_mappings(example):
    almanac = _load_example(example)
    assert almanac.map(79, "seed") == ("soil", 81)
    assert almanac.map(81, "soil") == ("fertilizer", 81)
    assert almanac.map(81, "fertilizer") == ("water", 81)
    assert almanac.map(81, "water") == ("light", 74)
    assert almanac.map(74, "light") == ("temperature", 78)
    assert almanac.map(78, "temperature") == ("humidity", 78)
    assert almanac.map(78, "humidity") == ("location", 82)
    assert almanac.seed_to_location(79) == 82


def test_seed_interval_reaches_location_46(example):
    almanac = _load_example(example)
    assert run_chain([Interval(start=82, length=1)], almanac.stages, "seed") == 46


def test_interval_chain_agrees_with_single_values(example):
    almanac = _load_example(example)
    expected = min(almanac.seed_to_location(seed) for seed in range(55, 55 + 13))
    assert run_chain([Interval(start=55, length=13)], almanac.stages, "seed") == expected


def test_solve_example(example):
    lines = example("day05.txt")
    assert solve(lines, part=1) == 35
    assert solve(lines, part=2) == 46


def test_seed_intervals_as_pairs(example):
    almanac = _load_example(example)
    assert almanac.seed_intervals(as_ranges=True) == [Interval(79, 14), Interval(55, 13)]
    assert almanac.seed_intervals()[0] == Interval(79, 1)


def test_parse_rule_orders_fields_dest_source_length():
    assert parse_rule("50 98 2") == ShiftRule(source_start=98, dest_start=50, length=2)


@pytest.mark.parametrize("line", ["50 98", "50 98 2 1", "50 x 2", "50 -98 2", ""])
def test_parse_rule_rejects_malformed_lines(line):
    with pytest.raises(PuzzleFormatError):
        parse_rule(line)


def test_parse_stage_header():
    assert parse_stage_header("light-to-temperature map:") == ("light", "temperature")
    with pytest.raises(PuzzleFormatError):
        parse_stage_header("light to temperature")


def test_malformed_rule_aborts_whole_parse():
    lines = ["seeds: 1 2", "", "seed-to-location map:", "1 2 3", "4 5"]
    with pytest.raises(PuzzleFormatError):
        parse_almanac(lines)


def test_duplicate_stage_is_parse_failure():
    lines = ["seeds: 1", "", "seed-to-soil map:", "1 2 3", "", "seed-to-water map:", "1 2 3"]
    with pytest.raises(PuzzleFormatError):
        parse_almanac(lines)


def test_trailing_map_without_blank_line_is_kept():
    almanac = parse_almanac(["seeds: 1", "", "seed-to-location map:", "100 0 5"])
    assert almanac.lowest_location() == 101


def test_missing_stage_is_lookup_failure():
    almanac = parse_almanac(["seeds: 1", "", "seed-to-soil map:", "100 0 5"])
    with pytest.raises(StageLookupError):
        almanac.lowest_location()
    with pytest.raises(StageLookupError):
        almanac.seed_to_location(1)


def test_odd_seed_count_is_parse_failure_for_ranges():
    with pytest.raises(PuzzleFormatError):
        solve(["seeds: 1 2 3", "", "seed-to-location map:", "100 0 5"], part=2)


@pytest.mark.parametrize("seeds", ["seeds: 1 2 3", "seeds: 1 0"])
def test_seed_intervals_reject_bad_pairs(seeds):
    almanac = parse_almanac([seeds, "", "seed-to-location map:", "100 0 5"])
    assert len(almanac.seed_intervals()) == len(almanac.seeds)
    with pytest.raises(PuzzleFormatError):
        almanac.seed_intervals(as_ranges=True)
    with pytest.raises(PuzzleFormatError):
        almanac.lowest_location(as_ranges=True)


def test_map_header_directly_after_seed_line():
    almanac = parse_almanac(["seeds: 1", "seed-to-location map:", "100 0 5"])
    assert almanac.seeds == [1]
    assert almanac.lowest_location() == 101


def test_leading_blank_lines_before_seed_line():
    almanac = parse_almanac(["", "seeds: 3", "", "seed-to-location map:", "100 0 5"])
    assert almanac.lowest_location() == 103


def test_invalid_seed_line():
    with pytest.raises(PuzzleFormatError):
        parse_almanac(["plants: 1 2", "", "seed-to-location map:", "1 2 3"])

from __future__ import annotations

import pytest

from aoc2023.day10 import parse_pipe_map, solve
from aoc2023.util import Direction, PuzzleFormatError


def test_start_connections(example):
    pipe_map = parse_pipe_map(example("day10.txt"))
    assert pipe_map.start == (1, 1)
    assert sorted(pipe_map.start_connections(), key=lambda d: d.name) == [Direction.LOWER, Direction.RIGHT]


def test_loop_tiles(example):
    loop = parse_pipe_map(example("day10.txt")).loop()
    assert len(loop) == 8
    assert loop[0] == (1, 1)
    assert set(loop) == {(1, 1), (2, 1), (3, 1), (3, 2), (3, 3), (2, 3), (1, 3), (1, 2)}


def test_solve_examples(example):
    assert solve(example("day10.txt")) == 4
    assert solve(example("day10_complex.txt")) == 8


@pytest.mark.parametrize(
    "lines",
    [
        ["S-S"],
        ["..-"],
        ["S-X"],
    ],
)
def test_malformed_maps(lines):
    with pytest.raises(PuzzleFormatError):
        parse_pipe_map(lines)


def test_start_with_one_connection():
    pipe_map = parse_pipe_map(["S-7", "..."])
    with pytest.raises(PuzzleFormatError):
        pipe_map.loop()


def test_broken_loop():
    pipe_map = parse_pipe_map(["S-7", "|.-", "L-J"])
    with pytest.raises(PuzzleFormatError):
        pipe_map.loop()

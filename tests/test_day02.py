from __future__ import annotations

import pytest

from aoc2023.day02 import CubeSet, Game, parse_game, parse_reveal, solve
from aoc2023.util import PuzzleFormatError


def test_parse_reveal():
    assert parse_reveal("3 blue, 4 red") == CubeSet(red=4, green=0, blue=3)
    assert parse_reveal("1 red, 2 green, 6 blue") == CubeSet(red=1, green=2, blue=6)
    assert parse_reveal(" 2 green") == CubeSet(green=2)


def test_parse_game():
    game = parse_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
    assert game == Game(
        game_id=1,
        reveals=(
            CubeSet(red=4, blue=3),
            CubeSet(red=1, green=2, blue=6),
            CubeSet(green=2),
        ),
    )


@pytest.mark.parametrize(
    "line",
    [
        "Game 1: 3 purple",
        "Game x: 3 red",
        "Round 1: 3 red",
        "Game 1 3 red",
        "Game 1: many red",
    ],
)
def test_parse_game_rejects_malformed_lines(line):
    with pytest.raises(PuzzleFormatError):
        parse_game(line)


def test_minimum_bag_power():
    game = parse_game("Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red")
    assert game.minimum_bag() == CubeSet(red=20, green=13, blue=6)
    assert game.minimum_bag().power == 1560


def test_solve_example(example):
    lines = example("day02.txt")
    assert solve(lines, part=1) == 8
    assert solve(lines, part=2) == 2286


def test_custom_bag(example):
    lines = example("day02.txt")
    assert solve(lines, part=1, bag=CubeSet(red=20, green=13, blue=15)) == 15

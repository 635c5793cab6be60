"""Day 2: cube games and the bag contents they allow."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from .util import PuzzleFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CubeSet:
    red: int = 0
    green: int = 0
    blue: int = 0

    def fits_in(self, bag: CubeSet) -> bool:
        return self.red <= bag.red and self.green <= bag.green and self.blue <= bag.blue

    @property
    def power(self) -> int:
        return self.red * self.green * self.blue


DEFAULT_BAG = CubeSet(red=12, green=13, blue=14)


@dataclass(frozen=True, slots=True)
class Game:
    game_id: int
    reveals: tuple[CubeSet, ...]

    def is_possible(self, bag: CubeSet) -> bool:
        return all(reveal.fits_in(bag) for reveal in self.reveals)

    def minimum_bag(self) -> CubeSet:
        return CubeSet(
            red=max((reveal.red for reveal in self.reveals), default=0),
            green=max((reveal.green for reveal in self.reveals), default=0),
            blue=max((reveal.blue for reveal in self.reveals), default=0),
        )


def parse_reveal(text: str) -> CubeSet:
    counts = {"red": 0, "green": 0, "blue": 0}
    for entry in text.split(","):
        count, _, color = entry.strip().partition(" ")
        if color not in counts:
            raise PuzzleFormatError(f"invalid colour in {entry.strip()!r}")
        try:
            counts[color] = int(count)
        except ValueError as exc:
            raise PuzzleFormatError(f"invalid count in {entry.strip()!r}") from exc
    return CubeSet(**counts)


def parse_game(line: str) -> Game:
    title, sep, reveals_text = line.strip().partition(":")
    label, _, game_id = title.partition(" ")
    if not sep or label != "Game" or not game_id.isdecimal():
        raise PuzzleFormatError(f"invalid game line {line!r}")
    reveals = tuple(parse_reveal(part) for part in reveals_text.split(";"))
    game = Game(game_id=int(game_id), reveals=reveals)
    logger.debug("%s -> %s", line, game)
    return game


def parse_games(lines: Sequence[str]) -> List[Game]:
    return [parse_game(line) for line in lines if line.strip()]


def solve(lines: Sequence[str], part: int = 1, bag: CubeSet = DEFAULT_BAG) -> int:
    games = parse_games(lines)
    if part == 1:
        return sum(game.game_id for game in games if game.is_possible(bag))
    return sum(game.minimum_bag().power for game in games)

"""Day 4: scratchcards."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Sequence, Tuple

from .util import PuzzleFormatError, parse_ints

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Card:
    card_id: int
    winning_numbers: FrozenSet[int]
    numbers: Tuple[int, ...]
    matches: int = field(init=False)

    def __post_init__(self) -> None:
        matches = sum(1 for number in self.numbers if number in self.winning_numbers)
        object.__setattr__(self, "matches", matches)

    @property
    def points(self) -> int:
        return 1 << (self.matches - 1) if self.matches else 0


def parse_card(line: str) -> Card:
    title, sep, body = line.partition(":")
    winning_text, bar, numbers_text = body.partition("|")
    label, _, card_id = title.strip().partition(" ")
    if not sep or not bar or label != "Card" or not card_id.strip().isdecimal():
        raise PuzzleFormatError(f"invalid card line {line!r}")
    card = Card(
        card_id=int(card_id),
        winning_numbers=frozenset(parse_ints(winning_text, line)),
        numbers=tuple(parse_ints(numbers_text, line)),
    )
    logger.debug("%s -> %d matches", line, card.matches)
    return card


def parse_cards(lines: Sequence[str]) -> List[Card]:
    return [parse_card(line) for line in lines if line.strip()]


def total_cards(cards: Sequence[Card]) -> int:
    """Count cards once every winning card has copied the cards after it."""
    copies = [1] * len(cards)
    for index, card in enumerate(cards):
        for target in range(index + 1, min(index + 1 + card.matches, len(cards))):
            copies[target] += copies[index]
    return sum(copies)


def solve(lines: Sequence[str], part: int = 1) -> int:
    cards = parse_cards(lines)
    if part == 1:
        return sum(card.points for card in cards)
    return total_cards(cards)

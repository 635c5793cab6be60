"""Day 7: camel cards."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Sequence, Tuple

from .util import PuzzleFormatError

logger = logging.getLogger(__name__)

CARD_ORDER = "23456789TJQKA"
JOKER_CARD_ORDER = "J23456789TQKA"
JOKER = "J"
HAND_SIZE = 5


class HandType(IntEnum):
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    FULL_HOUSE = 5
    FOUR_OF_A_KIND = 6
    FIVE_OF_A_KIND = 7

    @classmethod
    def classify(cls, cards: str, jokers: bool = False) -> HandType:
        counter = Counter(cards)
        wild = counter.pop(JOKER, 0) if jokers else 0
        counts = sorted(counter.values(), reverse=True) + [0, 0]
        most, second = counts[0] + wild, counts[1]
        if most == 5:
            return cls.FIVE_OF_A_KIND
        if most == 4:
            return cls.FOUR_OF_A_KIND
        if most == 3:
            return cls.FULL_HOUSE if second == 2 else cls.THREE_OF_A_KIND
        if most == 2:
            return cls.TWO_PAIR if second == 2 else cls.PAIR
        return cls.HIGH_CARD


@dataclass(frozen=True, slots=True, order=True)
class Hand:
    hand_type: HandType
    ranks: Tuple[int, ...]
    cards: str = field(compare=False)

    @classmethod
    def parse(cls, text: str, jokers: bool = False) -> Hand:
        if len(text) != HAND_SIZE:
            raise PuzzleFormatError(f"invalid hand {text!r}")
        order = JOKER_CARD_ORDER if jokers else CARD_ORDER
        invalid = [card for card in text if card not in order]
        if invalid:
            raise PuzzleFormatError(f"invalid card {invalid[0]!r} in hand {text!r}")
        return cls(
            hand_type=HandType.classify(text, jokers=jokers),
            ranks=tuple(order.index(card) for card in text),
            cards=text,
        )


@dataclass(frozen=True, slots=True)
class Bid:
    hand: Hand
    amount: int


def parse_bid(line: str, jokers: bool = False) -> Bid:
    hand_text, _, amount = line.strip().partition(" ")
    hand = Hand.parse(hand_text, jokers=jokers)
    try:
        bid = Bid(hand=hand, amount=int(amount))
    except ValueError as exc:
        raise PuzzleFormatError(f"invalid bid in {line!r}") from exc
    logger.debug("%s -> %s", line, hand.hand_type.name)
    return bid


def total_winnings(bids: Sequence[Bid]) -> int:
    ordered = sorted(bids, key=lambda bid: bid.hand)
    return sum(rank * bid.amount for rank, bid in enumerate(ordered, start=1))


def solve(lines: Sequence[str], part: int = 1) -> int:
    bids: List[Bid] = [parse_bid(line, jokers=part != 1) for line in lines if line.strip()]
    return total_winnings(bids)

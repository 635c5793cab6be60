"""Day 8: walking the desert network, alone and as a ghost."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import reduce
from typing import Callable, Dict, Sequence, Tuple

from .ranges import EmptyResultError
from .util import PuzzleFormatError, least_common_multiple

logger = logging.getLogger(__name__)

START_NODE = "AAA"
END_NODE = "ZZZ"

_NODE_RE = re.compile(r"^(\w+) = \((\w+), (\w+)\)$")


class NodeLookupError(LookupError):
    """Raised when a walk reaches a node that is not in the network."""


@dataclass(slots=True)
class Network:
    directions: str
    nodes: Dict[str, Tuple[str, str]]

    def steps(self, start: str, is_end: Callable[[str], bool]) -> int:
        """Steps from `start` until `is_end` accepts the node just reached."""
        current = start
        count = 0
        seen = set()
        while True:
            position = count % len(self.directions)
            if (current, position) in seen:
                raise EmptyResultError(f"no end node reachable from {start!r}")
            seen.add((current, position))
            try:
                left, right = self.nodes[current]
            except KeyError as exc:
                raise NodeLookupError(f"no node named {current!r}") from exc
            direction = self.directions[position]
            following = left if direction == "L" else right
            logger.debug("%s + %s -> %s", current, direction, following)
            current = following
            count += 1
            if is_end(current):
                return count

    def ghost_steps(self) -> int:
        """Steps until every `..A` start stands on a `..Z` node at once."""
        starts = [node for node in self.nodes if node.endswith("A")]
        if not starts:
            raise EmptyResultError("no ghost start nodes")
        counts = []
        for start in starts:
            count = self.steps(start, lambda node: node.endswith("Z"))
            logger.debug("path from %s ends after %d steps", start, count)
            counts.append(count)
        return reduce(least_common_multiple, counts)


def parse_network(lines: Sequence[str]) -> Network:
    content = [line.strip() for line in lines if line.strip()]
    if not content:
        raise PuzzleFormatError("network is empty")

    directions, *node_lines = content
    if not directions or set(directions) - {"L", "R"}:
        raise PuzzleFormatError(f"invalid directions {directions!r}")

    nodes: Dict[str, Tuple[str, str]] = {}
    for line in node_lines:
        match = _NODE_RE.match(line)
        if match is None:
            raise PuzzleFormatError(f"invalid node line {line!r}")
        name, left, right = match.groups()
        nodes[name] = (left, right)
    return Network(directions=directions, nodes=nodes)


def solve(lines: Sequence[str], part: int = 1) -> int:
    network = parse_network(lines)
    if part == 1:
        return network.steps(START_NODE, lambda node: node == END_NODE)
    return network.ghost_steps()

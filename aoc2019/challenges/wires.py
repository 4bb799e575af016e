"""
Day 3 — crossed wires.

Each input line is one wire: a comma-separated list of motions such as
R8,U5,L5,D3. Both wires start at the origin; the answer is the Manhattan
distance from the origin to the closest point both wires visit.
"""

from __future__ import annotations
import enum
import re
from dataclasses import dataclass
from typing import Iterable, List, Set, Tuple

from ..errors import ChallengeFailure
from .base import Challenge

Pos = Tuple[int, int]
ORIGIN: Pos = (0, 0)

_DISTANCE = re.compile(r'[0-9]+')


class Direction(enum.Enum):
    U = (0, 1)
    R = (1, 0)
    D = (0, -1)
    L = (-1, 0)


@dataclass(frozen=True)
class Motion:
    direction: Direction
    distance: int

    @classmethod
    def parse(cls, text: str) -> "Motion":
        head, rest = text[:1], text[1:]
        try:
            direction = Direction[head]
        except KeyError:
            raise ChallengeFailure(
                f"Motion parse failed on string {text!r}: "
                f"{head!r} is not a valid direction") from None
        if not _DISTANCE.fullmatch(rest):
            raise ChallengeFailure(
                f"Motion parse failed on string {text!r}: "
                f"{rest!r} is not a distance")
        return cls(direction, int(rest))


def parse_wires(text: str) -> List[List[Motion]]:
    return [[Motion.parse(m) for m in line.split(',')]
            for line in text.splitlines() if line]


def positions(motions: Iterable[Motion]) -> Set[Pos]:
    """Every grid point a wire passes through, origin excluded."""
    x, y = ORIGIN
    visited = set()
    for motion in motions:
        dx, dy = motion.direction.value
        for _ in range(motion.distance):
            x += dx
            y += dy
            visited.add((x, y))
    return visited


def manhattan(a: Pos, b: Pos) -> int:
    return abs(b[0] - a[0]) + abs(b[1] - a[1])


def closest_intersection(text: str) -> int:
    wires = parse_wires(text)
    if len(wires) < 2:
        raise ChallengeFailure(f"Expected two wires, found {len(wires)}")
    crossings = positions(wires[0]) & positions(wires[1])
    crossings.discard(ORIGIN)
    if not crossings:
        raise ChallengeFailure("Wires never cross")
    return min(manhattan(p, ORIGIN) for p in crossings)


class CrossedWires(Challenge):
    NAME = "three"
    DAY = 3
    PARTS = {"one": "part_one"}
    INPUT_FILES = {"one": "1.txt"}

    def part_one(self) -> int:
        return closest_intersection(self.input("one"))

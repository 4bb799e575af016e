"""Day 1 — fuel for module masses."""

import re
from typing import Callable, Iterable

from ..errors import ChallengeFailure
from .base import Challenge

_MASS = re.compile(r'[0-9]+')


def fuel_requirement(mass: int) -> int:
    return max(mass // 3 - 2, 0)


def recursive_fuel_requirement(mass: int) -> int:
    """Fuel for the mass, plus fuel for that fuel, until the increment is 0."""
    total = 0
    adjustment = fuel_requirement(mass)
    while adjustment > 0:
        total += adjustment
        adjustment = fuel_requirement(adjustment)
    return total


def calculate_fuel(lines: Iterable[str], requirement: Callable[[int], int]) -> int:
    total = 0
    for line in lines:
        # plain ASCII digits only: no sign, padding or underscores
        if not _MASS.fullmatch(line):
            raise ChallengeFailure(f"Failed to parse line containing {line!r}")
        total += requirement(int(line))
    return total


class Fuel(Challenge):
    NAME = "one"
    DAY = 1
    PARTS = {"one": "part_one", "two": "part_two"}
    INPUT_FILES = {"one": "1.txt", "two": "2.txt"}

    def part_one(self) -> int:
        return calculate_fuel(self.input("one").splitlines(), fuel_requirement)

    def part_two(self) -> int:
        return calculate_fuel(self.input("two").splitlines(),
                              recursive_fuel_requirement)

"""Day 4 — count candidate passwords in a fixed range."""

from typing import Sequence

from .. import config
from .base import Challenge


def digits(n: int) -> Sequence[int]:
    return [int(c) for c in str(n)]


def has_adjacent_pair(ds: Sequence[int]) -> bool:
    return any(a == b for a, b in zip(ds, ds[1:]))


def ascending(ds: Sequence[int]) -> bool:
    """Digits never decrease left to right."""
    return all(a <= b for a, b in zip(ds, ds[1:]))


def is_valid(n: int) -> bool:
    ds = digits(n)
    return (len(ds) == config.PASSWORD_LENGTH
            and has_adjacent_pair(ds)
            and ascending(ds))


def count_valid(lo: int, hi: int) -> int:
    return sum(1 for n in range(lo, hi + 1) if is_valid(n))


class Passwords(Challenge):
    NAME = "four"
    DAY = 4
    PARTS = {"one": "part_one"}

    def part_one(self) -> int:
        lo, hi = config.PASSWORD_RANGE
        return count_valid(lo, hi)

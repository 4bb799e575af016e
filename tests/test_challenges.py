"""
Tests for the puzzle layer: registry, input files, and each day's solver.
"""

import pytest

from aoc2019.challenges import CHALLENGES, get_challenge
from aoc2019.challenges.fuel import (
    calculate_fuel, fuel_requirement, recursive_fuel_requirement,
)
from aoc2019.challenges.gravity_assist import find_inputs, run_with_inputs
from aoc2019.challenges.passwords import ascending, digits, has_adjacent_pair, is_valid
from aoc2019.challenges.wires import Direction, Motion, closest_intersection, positions
from aoc2019.errors import ChallengeFailure, MissingChallenge, MissingPart
from aoc2019.inputs import input_path, read_input
from aoc2019.intcode import OutOfBounds, State, load_program


def _write_input(tmp_path, day, filename, text):
    d = tmp_path / str(day)
    d.mkdir(parents=True, exist_ok=True)
    (d / filename).write_text(text, encoding="utf-8")


# ─── Registry ─────────────────────

class TestRegistry:
    def test_days_registered(self):
        assert set(CHALLENGES) == {"one", "two", "three", "four"}

    def test_unknown_day(self):
        with pytest.raises(MissingChallenge) as exc:
            get_challenge("twelve")
        assert exc.value.day == "twelve"

    def test_unknown_part(self):
        with pytest.raises(MissingPart) as exc:
            get_challenge("three").run("two")
        assert (exc.value.day, exc.value.part) == ("three", "two")


# ─── Input files ─────────────────────

class TestInputs:
    def test_input_path(self, tmp_path):
        assert input_path(2, "1.txt", tmp_path) == tmp_path / "2" / "1.txt"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ChallengeFailure) as exc:
            read_input(1, "one", "1.txt", tmp_path)
        assert "1.txt" in str(exc.value)

    def test_read(self, tmp_path):
        _write_input(tmp_path, 1, "1.txt", "12\n")
        assert read_input(1, "one", "1.txt", tmp_path) == "12\n"

    def test_undecodable_file(self, tmp_path):
        (tmp_path / "1").mkdir()
        (tmp_path / "1" / "1.txt").write_bytes(b"12\n\xff\xfe\n")
        with pytest.raises(ChallengeFailure) as exc:
            get_challenge("one", tmp_path).run("one")
        assert "1.txt" in str(exc.value)


# ─── Day 1: fuel ─────────────────────

class TestFuel:
    def test_fuel_requirement(self):
        assert fuel_requirement(12) == 2
        assert fuel_requirement(14) == 2
        assert fuel_requirement(1969) == 654
        assert fuel_requirement(100756) == 33583

    def test_small_mass_needs_no_fuel(self):
        assert fuel_requirement(2) == 0

    def test_recursive_fuel_requirement(self):
        assert recursive_fuel_requirement(14) == 2
        assert recursive_fuel_requirement(1969) == 966
        assert recursive_fuel_requirement(100756) == 50346

    def test_bad_line(self):
        with pytest.raises(ChallengeFailure):
            calculate_fuel(["12", "abc"], fuel_requirement)

    @pytest.mark.parametrize("line", ["-5", "+3", " 7 ", "1_000", "\u0663"])
    def test_only_plain_digits(self, line):
        with pytest.raises(ChallengeFailure):
            calculate_fuel([line], fuel_requirement)

    def test_parts(self, tmp_path):
        _write_input(tmp_path, 1, "1.txt", "12\n14\n1969\n100756\n")
        _write_input(tmp_path, 1, "2.txt", "14\n1969\n100756\n")
        day = get_challenge("one", tmp_path)
        assert day.run("one") == 2 + 2 + 654 + 33583
        assert day.run("two") == 2 + 966 + 50346


# ─── Day 2: gravity assist ─────────────────────

# mem[0] = mem[noun] + mem[verb]; cells 5..8 hold 10, 20, 30, 40
ADDER = "1,0,0,0,99,10,20,30,40"


class TestGravityAssist:
    def test_run_with_inputs_leaves_original(self):
        mem = load_program(ADDER)
        vm = run_with_inputs(mem, 5, 6)
        assert vm.state is State.HALTED
        assert vm.result == 30
        assert mem.read(1) == 0

    def test_find_inputs(self):
        mem = load_program(ADDER)
        assert find_inputs(mem, 70, search=range(9)) == (7, 8)

    def test_faulting_trials_are_skipped(self):
        mem = load_program(ADDER)
        # verbs 9..11 point past the end of memory and fault
        assert find_inputs(mem, 50, search=range(4, 12)) == (5, 8)

    def test_no_match(self):
        with pytest.raises(ChallengeFailure):
            find_inputs(load_program(ADDER), 12345, search=range(9))

    def test_part_one(self, tmp_path):
        program = "1,0,0,0,99" + ",0" * 7 + ",1000"
        _write_input(tmp_path, 2, "1.txt", program + "\n")
        # mem[12] = 1000 plus mem[2], which now holds the verb itself
        assert get_challenge("two", tmp_path).run("one") == 1002

    def test_part_one_fault_propagates(self, tmp_path):
        _write_input(tmp_path, 2, "1.txt", "1,0,0,0,99\n")
        with pytest.raises(OutOfBounds):
            get_challenge("two", tmp_path).run("one")

    def test_part_two(self, tmp_path, monkeypatch):
        from aoc2019 import config
        monkeypatch.setattr(config, "GRAVITY_ASSIST_TARGET", 70)
        _write_input(tmp_path, 2, "1.txt", ADDER + "\n")
        assert get_challenge("two", tmp_path).run("two") == 708


# ─── Day 3: crossed wires ─────────────────────

class TestWires:
    @pytest.mark.parametrize("text, expected", [
        ("R8,U5,L5,D3\nU7,R6,D4,L4", 6),
        ("R75,D30,R83,U83,L12,D49,R71,U7,L72\n"
         "U62,R66,U55,R34,D71,R55,D58,R83", 159),
        ("R98,U47,R26,D63,R33,U87,L62,D20,R33,U53,R51\n"
         "U98,R91,D20,R16,D67,R40,U7,R15,U6,R7", 135),
    ])
    def test_closest_intersection(self, text, expected):
        assert closest_intersection(text) == expected

    def test_mixed_sign_distance(self):
        # crossing at (3, -3): distance 6, not |3 + -3| = 0
        assert closest_intersection("R3,D6\nD3,R6") == 6

    def test_motion_parse(self):
        assert Motion.parse("U10") == Motion(Direction.U, 10)

    def test_positions(self):
        assert positions([Motion(Direction.R, 2)]) == {(1, 0), (2, 0)}

    def test_bad_direction(self):
        with pytest.raises(ChallengeFailure):
            Motion.parse("X5")

    def test_bad_distance(self):
        with pytest.raises(ChallengeFailure):
            Motion.parse("R")

    def test_non_ascii_distance(self):
        with pytest.raises(ChallengeFailure):
            Motion.parse("R\u00b2")

    def test_single_wire(self):
        with pytest.raises(ChallengeFailure):
            closest_intersection("R8,U5")

    def test_no_crossing(self):
        with pytest.raises(ChallengeFailure):
            closest_intersection("R5\nL5")


# ─── Day 4: passwords ─────────────────────

class TestPasswords:
    def test_is_valid(self):
        assert is_valid(111111)
        assert not is_valid(223450)
        assert not is_valid(123789)

    def test_digits(self):
        assert digits(1000) == [1, 0, 0, 0]
        assert digits(0) == [0]
        assert digits(123789) == [1, 2, 3, 7, 8, 9]

    def test_ascending(self):
        assert ascending([1, 2, 3, 3])
        assert not ascending([1, 2, 3, 2])

    def test_adjacent_pair(self):
        assert has_adjacent_pair([1, 2, 2, 3, 4])
        assert not has_adjacent_pair([1, 2, 3, 4])

    def test_part_one_small_range(self, monkeypatch):
        from aoc2019 import config
        monkeypatch.setattr(config, "PASSWORD_RANGE", (111110, 111125))
        # 111111..111119 and 111122..111125
        assert get_challenge("four").run("one") == 9 + 4

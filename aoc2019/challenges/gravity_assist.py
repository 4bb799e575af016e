"""
Day 2 — gravity assist program, run on the intcode VM.

Part one restores the "1202 program alarm" state (noun 12, verb 2) and
reports address 0. Part two searches noun/verb pairs for the run whose
address 0 equals the target output and reports 100 * noun + verb.
"""

import logging
from typing import Iterable, Tuple

from .. import config
from ..errors import ChallengeFailure
from ..intcode import (
    IntcodeVM, Memory, State, load_program, NOUN_ADDRESS, VERB_ADDRESS,
)
from .base import Challenge

log = logging.getLogger(__name__)


def run_with_inputs(memory: Memory, noun: int, verb: int) -> IntcodeVM:
    """Run a copy of memory with noun/verb patched in. The original is untouched."""
    trial = memory.copy()
    trial.write(NOUN_ADDRESS, noun)
    trial.write(VERB_ADDRESS, verb)
    vm = IntcodeVM(trial)
    vm.run()
    return vm


def find_inputs(memory: Memory, target: int,
                search: Iterable[int] = config.GRAVITY_ASSIST_SEARCH) -> Tuple[int, int]:
    """Return the first (noun, verb) whose run leaves target at address 0.

    A trial that faults is not a match; the search moves on to the next pair.
    """
    candidates = list(search)
    for noun in candidates:
        for verb in candidates:
            vm = run_with_inputs(memory, noun, verb)
            if vm.state is State.FAULTED:
                log.debug("noun=%d verb=%d faulted: %s", noun, verb, vm.fault)
                continue
            if vm.result == target:
                log.info("Found noun=%d verb=%d", noun, verb)
                return noun, verb
    raise ChallengeFailure(f"No noun/verb pair produces {target}")


class GravityAssist(Challenge):
    NAME = "two"
    DAY = 2
    PARTS = {"one": "part_one", "two": "part_two"}
    INPUT_FILES = {"one": "1.txt", "two": "1.txt"}

    def part_one(self) -> int:
        memory = load_program(self.input("one"))
        vm = run_with_inputs(memory, config.GRAVITY_ASSIST_NOUN,
                             config.GRAVITY_ASSIST_VERB)
        if vm.fault is not None:
            raise vm.fault
        return vm.result

    def part_two(self) -> int:
        memory = load_program(self.input("two"))
        noun, verb = find_inputs(memory, config.GRAVITY_ASSIST_TARGET)
        return 100 * noun + verb

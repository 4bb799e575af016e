"""
Intcode VM — Executor

Owns the instruction pointer and drives the decode/execute cycle against a
Memory until the program halts or faults.

Execution model:
  1. Decode the instruction at the pointer
  2. STOP          → HALTED
  3. ADD / MUL     → read both sources, compute, write dst
  4. Advance the pointer by the instruction width
  5. Any decode, read, write or overflow error → FAULTED

States:
  RUNNING:  more steps can be taken
  HALTED:   STOP decoded; memory holds the final result (address 0)
  FAULTED:  an IntcodeError stopped the run; see IntcodeVM.fault

HALTED and FAULTED are terminal. There is no built-in step limit: a program
that never reaches STOP and never leaves memory runs forever unless the
caller passes max_steps to run().
"""

import logging
from enum import Enum
from typing import Optional

from .decoder import Instruction, Opcode, decode
from .errors import IntcodeError
from .memory import Memory, WORD_MAX

log = logging.getLogger(__name__)

NOUN_ADDRESS = 1
VERB_ADDRESS = 2
RESULT_ADDRESS = 0


class State(Enum):
    RUNNING = 'RUNNING'
    HALTED = 'HALTED'
    FAULTED = 'FAULTED'


class ArithmeticOverflow(IntcodeError):
    """Raised when an ADD or MUL result does not fit in a 64-bit word."""
    def __init__(self, opcode: Opcode, left: int, right: int, position: int):
        self.opcode = opcode
        self.left = left
        self.right = right
        self.position = position
        super().__init__(
            f"{opcode.name} of {left} and {right} at position {position} "
            f"overflows a 64-bit word")


class IntcodeVM:
    """Intcode virtual machine for one run over one Memory.

    Usage:
        vm = IntcodeVM(load_program("1,0,0,0,99"))
        state = vm.run()          # State.HALTED
        vm.result                 # 2
    """

    def __init__(self, memory: Memory):
        self.memory = memory
        self.pointer = 0
        self.state = State.RUNNING
        self.fault: Optional[IntcodeError] = None
        self.steps = 0

    # ══════════════════════════════════════════════
    # Execution
    # ══════════════════════════════════════════════

    def step(self) -> State:
        """Execute one instruction and return the resulting state."""
        if self.state is not State.RUNNING:
            return self.state

        pc = self.pointer
        try:
            instr, next_pointer = decode(self.memory, pc)
            log.debug("%04d: %s", pc, instr)
            if instr.opcode == Opcode.STOP:
                self.state = State.HALTED
                log.debug("Halted at %d after %d steps", pc, self.steps)
                return self.state
            self._apply(instr, pc)
        except IntcodeError as e:
            self.fault = e
            self.state = State.FAULTED
            log.debug("Faulted at %d after %d steps: %s", pc, self.steps, e)
            return self.state

        self.pointer = next_pointer
        self.steps += 1
        return self.state

    def run(self, max_steps: Optional[int] = None) -> State:
        """Step until HALTED or FAULTED.

        Args:
            max_steps: cap on the number of transitions taken by this call.
                When reached, returns with the VM still RUNNING.
        """
        taken = 0
        while self.state is State.RUNNING:
            if max_steps is not None and taken >= max_steps:
                log.debug("Step cap %d reached at pointer %d", max_steps, self.pointer)
                break
            self.step()
            taken += 1
        return self.state

    def _apply(self, instr: Instruction, pc: int):
        left = self.memory.read(instr.src1)
        right = self.memory.read(instr.src2)
        if instr.opcode == Opcode.ADD:
            value = left + right
        else:
            value = left * right
        if value > WORD_MAX:
            raise ArithmeticOverflow(instr.opcode, left, right, pc)
        self.memory.write(instr.dst, value)

    # ══════════════════════════════════════════════
    # Results
    # ══════════════════════════════════════════════

    @property
    def result(self) -> int:
        """Value at address 0 once the program has halted."""
        if self.state is not State.HALTED:
            raise RuntimeError(f"No result: VM is {self.state.value}")
        return self.memory.read(RESULT_ADDRESS)


def execute(memory: Memory) -> Memory:
    """Run memory to completion and return it, raising the fault if any."""
    vm = IntcodeVM(memory)
    vm.run()
    if vm.fault is not None:
        raise vm.fault
    return vm.memory

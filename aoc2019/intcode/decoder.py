"""
Intcode VM — Opcode Decoder

Maps the opcode cell at the instruction pointer to (mnemonic, width) and
pulls the operand addresses that follow it.

Instruction layout:
  ADD  1, src1, src2, dst    mem[dst] = mem[src1] + mem[src2]    width 4
  MUL  2, src1, src2, dst    mem[dst] = mem[src1] * mem[src2]    width 4
  STOP 99                    halt                                width 1

Operands are addresses, never immediate values. Decoding is pure: it only
reads memory, so decoding the same pointer twice gives the same result.
"""

from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import IntcodeError
from .memory import Memory, OutOfBounds


# ──────────────────────────────────────────────
# Opcode table
# ──────────────────────────────────────────────

class Opcode(enum.IntEnum):
    ADD = 1
    MUL = 2
    STOP = 99


# Format: opcode -> (mnemonic, width in cells)
OPCODES = {
    Opcode.ADD:  ('ADD',  4),
    Opcode.MUL:  ('MUL',  4),
    Opcode.STOP: ('STOP', 1),
}


class UnknownOpcode(IntcodeError):
    """Raised when the cell at the instruction pointer is not a known opcode."""
    def __init__(self, value: int, position: int):
        self.value = value
        self.position = position
        super().__init__(f"Unknown opcode {value} at position {position}")


# ──────────────────────────────────────────────
# Decoded instruction
# ──────────────────────────────────────────────

@dataclass(frozen=True)
class Instruction:
    opcode: Opcode
    src1: Optional[int] = None
    src2: Optional[int] = None
    dst: Optional[int] = None

    @property
    def mnemonic(self) -> str:
        return OPCODES[self.opcode][0]

    @property
    def width(self) -> int:
        return OPCODES[self.opcode][1]

    def __str__(self):
        if self.opcode == Opcode.STOP:
            return self.mnemonic
        return f"{self.mnemonic:4s} [{self.src1}] [{self.src2}] -> [{self.dst}]"


STOP = Instruction(Opcode.STOP)


def decode(memory: Memory, pointer: int) -> Tuple[Instruction, int]:
    """Decode the instruction at pointer.

    Returns: (instruction, next_pointer), next_pointer = pointer + width.

    Raises UnknownOpcode for a tag outside the table, and OutOfBounds when
    the pointer or any operand cell lies past the end of memory.
    """
    value = memory.read(pointer)
    try:
        opcode = Opcode(value)
    except ValueError:
        raise UnknownOpcode(value, pointer) from None

    width = OPCODES[opcode][1]
    if opcode == Opcode.STOP:
        return STOP, pointer + width

    src1, src2, dst = memory.read_range(pointer + 1, pointer + width - 1)
    return Instruction(opcode, src1, src2, dst), pointer + width


def disassemble(memory: Memory, start: int = 0) -> List[str]:
    """Linear-sweep listing of memory from start.

    Cells that do not decode (unknown opcode, truncated operands) are listed
    as DATA and the sweep resumes at the next cell.
    """
    lines = []
    pointer = start
    while pointer < len(memory):
        try:
            instr, next_pointer = decode(memory, pointer)
        except (UnknownOpcode, OutOfBounds):
            lines.append(f"{pointer:04d}: DATA {memory.read(pointer)}")
            pointer += 1
            continue
        lines.append(f"{pointer:04d}: {instr}")
        pointer = next_pointer
    return lines

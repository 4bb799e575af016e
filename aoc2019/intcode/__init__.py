"""
Intcode — a minimal stored-program virtual machine.

    ┌──────────────┐    ┌──────────┐    ┌──────────┐    ┌──────────┐
    │ Program text │───>│  Loader  │───>│  Memory  │<──>│ Executor │
    │ "1,0,0,0,99" │    │ (parse)  │    │ (words)  │    │ (VM loop)│
    └──────────────┘    └──────────┘    └──────────┘    └────┬─────┘
                                              ^              │
                                              └── Decoder <───┘

Instruction set: ADD (1), MUL (2), STOP (99). Operands are addresses.
"""

from typing import Optional

from .errors import IntcodeError
from .memory import Memory, OutOfBounds, WORD_BITS, WORD_MAX
from .loader import ProgramParseError, load_program
from .decoder import Instruction, Opcode, UnknownOpcode, decode, disassemble
from .executor import (
    ArithmeticOverflow, IntcodeVM, State, execute,
    NOUN_ADDRESS, VERB_ADDRESS, RESULT_ADDRESS,
)


def run_program(text: str, noun: Optional[int] = None,
                verb: Optional[int] = None) -> Memory:
    """Load program text, apply the noun/verb overrides, run to completion.

    Args:
        text: program text (comma-separated integers, one or more lines).
        noun: value written to address 1 before the run, if given.
        verb: value written to address 2 before the run, if given.

    Returns:
        The final memory. Raises the IntcodeError that stopped the run.
    """
    memory = load_program(text)
    if noun is not None:
        memory.write(NOUN_ADDRESS, noun)
    if verb is not None:
        memory.write(VERB_ADDRESS, verb)
    return execute(memory)

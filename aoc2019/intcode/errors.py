"""
Intcode VM — error base class.

Every failure the VM core can report derives from IntcodeError, so callers
that only want "did the program run?" can catch one type. Each concrete kind
lives next to the component that raises it:

    ProgramParseError   loader.py    bad token in program text
    OutOfBounds         memory.py    read/write past the end of memory
    UnknownOpcode       decoder.py   opcode tag outside {1, 2, 99}
    ArithmeticOverflow  executor.py  result does not fit in a 64-bit word

All of them keep their details as attributes (line, column, address, ...)
so the CLI can branch on kind instead of parsing message text.
"""


class IntcodeError(Exception):
    """Base class for all intcode VM failures."""
    pass

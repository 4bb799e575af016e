"""
Intcode VM — Program Loader

Parses program text into a Memory. The format is:

    1,9,10,3,2,3,11,0
    99,30,40,50

Each line is a comma-separated list of unsigned decimal integers. Lines are
concatenated in order into one flat memory, so the example above loads as a
single 12-cell program. No whitespace is allowed around tokens.

The first token that is not a plain run of ASCII digits, or that does not fit
in a 64-bit word, stops the load with a ProgramParseError pointing at its
line and column (both 1-based, column = first character of the token).
"""

from __future__ import annotations
import logging
import re
from typing import List

from .errors import IntcodeError
from .memory import Memory, WORD_MAX

log = logging.getLogger(__name__)

_DIGITS = re.compile(r'[0-9]+')


class ProgramParseError(IntcodeError):
    def __init__(self, line: int, column: int, token: str):
        self.line = line
        self.column = column
        self.token = token
        super().__init__(
            f"Program parse error at L{line}:{column}: "
            f"{token!r} is not an unsigned integer")


def split_lines(text: str) -> List[str]:
    """Split on '\\n', dropping one trailing newline and any '\\r' line ends."""
    if not text:
        return []
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def load_program(text: str) -> Memory:
    """Parse program text into a fresh Memory.

    Empty text yields an empty Memory; running it faults on the first decode.
    """
    words: List[int] = []
    for line_no, line in enumerate(split_lines(text), start=1):
        column = 1
        for token in line.split(','):
            if not _DIGITS.fullmatch(token):
                raise ProgramParseError(line_no, column, token)
            value = int(token)
            if value > WORD_MAX:
                raise ProgramParseError(line_no, column, token)
            words.append(value)
            column += len(token) + 1

    log.debug("Loaded program: %d words", len(words))
    return Memory(words)

"""
Intcode VM — Flat Word Memory

Memory is a fixed-length, zero-indexed list of unsigned 64-bit words.
The length is set once by the loader and never changes: writes past the
end fail instead of growing the store, and reads past the end fail instead
of returning a default.

Address checks:
  read(addr)              addr must be in [0, len)
  write(addr, value)      same, and value must fit in a word
  read_range(start, end)  inclusive; every index in [start, end] must be valid
"""

from typing import Iterable, List, Optional

from .errors import IntcodeError


WORD_BITS = 64
WORD_MAX = (1 << WORD_BITS) - 1


class OutOfBounds(IntcodeError):
    """Raised when an address (or any address of a range) is past the end."""
    def __init__(self, start: int, end: Optional[int] = None, length: int = 0):
        self.start = start
        self.end = end
        self.length = length
        if end is None:
            where = f"address {start}"
        else:
            where = f"address range {start}..{end}"
        super().__init__(f"{where} is outside memory of length {length}")

    @property
    def address(self) -> int:
        return self.start


class Memory:
    """Bounds-checked word store for one VM run."""

    def __init__(self, words: Iterable[int] = ()):
        self._cells: List[int] = []
        for value in words:
            _check_word(value)
            self._cells.append(value)

    # --- Core read/write ---

    def read(self, address: int) -> int:
        self._check_address(address)
        return self._cells[address]

    def write(self, address: int, value: int):
        """Store value at address. Never extends memory."""
        self._check_address(address)
        _check_word(value)
        self._cells[address] = value

    def read_range(self, start: int, end: int) -> List[int]:
        """Fetch cells start..end inclusive in one bounds check.

        Used by the decoder to pull all operands of an instruction at once,
        so a truncated instruction reports the full range it needed.
        """
        if start < 0 or end < start or end >= len(self._cells):
            raise OutOfBounds(start, end, len(self._cells))
        return self._cells[start:end + 1]

    def _check_address(self, address: int):
        if address < 0 or address >= len(self._cells):
            raise OutOfBounds(address, length=len(self._cells))

    # --- Snapshots ---

    def snapshot(self) -> List[int]:
        """Copy of the current cell values."""
        return list(self._cells)

    def copy(self) -> "Memory":
        """Independent Memory with the same contents (for repeated runs)."""
        clone = Memory()
        clone._cells = list(self._cells)
        return clone

    # --- Debug output ---

    def dump(self, width: int = 8) -> str:
        """Address-prefixed rows of cell values, `width` cells per row."""
        lines = []
        for offset in range(0, len(self._cells), width):
            row = self._cells[offset:offset + width]
            lines.append(f"{offset:04d}  " + ','.join(str(v) for v in row))
        return '\n'.join(lines)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    def __eq__(self, other) -> bool:
        if isinstance(other, Memory):
            return self._cells == other._cells
        if isinstance(other, list):
            return self._cells == other
        return NotImplemented

    def __repr__(self):
        if len(self._cells) > 12:
            head = ','.join(str(v) for v in self._cells[:12])
            return f"Memory([{head},...] len={len(self._cells)})"
        return f"Memory({self._cells!r})"


def _check_word(value: int):
    if not 0 <= value <= WORD_MAX:
        raise ValueError(f"{value} does not fit in a {WORD_BITS}-bit word")

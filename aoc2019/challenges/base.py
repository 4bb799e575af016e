"""
Challenge base class.

A challenge is one puzzle day. Subclasses declare which parts they solve and
which input file each part reads:

    class Fuel(Challenge):
        NAME = "one"
        DAY = 1
        PARTS = {"one": "part_one", "two": "part_two"}
        INPUT_FILES = {"one": "1.txt", "two": "2.txt"}

run(part) looks the part up, calls the named method, and returns its answer.
"""

from pathlib import Path
from typing import Dict, Optional

from ..errors import MissingPart
from ..inputs import read_input


class Challenge:
    NAME = ""
    DAY = 0
    PARTS: Dict[str, str] = {}
    INPUT_FILES: Dict[str, str] = {}

    def __init__(self, inputs_dir: Optional[Path] = None):
        self.inputs_dir = inputs_dir

    def run(self, part: str) -> int:
        method = self.PARTS.get(part)
        if method is None:
            raise MissingPart(self.NAME, part)
        return getattr(self, method)()

    def input(self, part: str) -> str:
        """Text of the input file for part."""
        return read_input(self.DAY, part, self.INPUT_FILES[part], self.inputs_dir)

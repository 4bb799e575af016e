"""
Puzzle solvers, registered by day name.

    CHALLENGES["two"](inputs_dir).run("one")
"""

from pathlib import Path
from typing import Dict, Optional, Type

from ..errors import MissingChallenge
from .base import Challenge
from .fuel import Fuel
from .gravity_assist import GravityAssist
from .wires import CrossedWires
from .passwords import Passwords

CHALLENGES: Dict[str, Type[Challenge]] = {
    cls.NAME: cls for cls in (Fuel, GravityAssist, CrossedWires, Passwords)
}


def get_challenge(day: str, inputs_dir: Optional[Path] = None) -> Challenge:
    cls = CHALLENGES.get(day)
    if cls is None:
        raise MissingChallenge(day)
    return cls(inputs_dir)

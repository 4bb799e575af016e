"""Puzzle input file helpers."""

import logging
from pathlib import Path
from typing import Optional, Union

from . import config
from .errors import ChallengeFailure

log = logging.getLogger(__name__)


def input_path(day: Union[int, str], filename: str,
               inputs_dir: Optional[Path] = None) -> Path:
    """Resolve <inputs_dir>/<day>/<filename>."""
    base = Path(inputs_dir) if inputs_dir is not None else config.INPUTS_DIR
    return base / str(day) / filename


def read_input(day: Union[int, str], part: str, filename: str,
               inputs_dir: Optional[Path] = None) -> str:
    """Return the text of an input file, or raise ChallengeFailure."""
    path = input_path(day, filename, inputs_dir)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ChallengeFailure(
            f"Failed to read input file {filename} for part {part} "
            f"of challenge {day}: {e}") from e
    log.info("Read %s (%d bytes)", path, len(text))
    return text

"""
aoc2019 — Runtime Configuration
===============================

Defaults for the CLI and the puzzle solvers. The CLI overrides the paths
and log levels from its flags; everything else is fixed puzzle data.
"""

import logging
from pathlib import Path


# =============================================================================
#  PATHS
# =============================================================================
# Puzzle inputs live at <INPUTS_DIR>/<day number>/<file>, e.g. inputs/2/1.txt
INPUTS_DIR = Path("inputs")

# None = console logging only. Set (or pass --log-dir) to also write log files.
LOG_DIR = None


# =============================================================================
#  LOGGING
# =============================================================================
LOG_NAME = "aoc2019"
LOG_LEVEL = logging.DEBUG          # logger level; handlers filter further
CONSOLE_LEVEL = logging.WARNING    # -v → INFO, -vv → DEBUG, -q → ERROR


# =============================================================================
#  DAY 2 — GRAVITY ASSIST
# =============================================================================
# "1202 program alarm" state restored before part one runs
GRAVITY_ASSIST_NOUN = 12
GRAVITY_ASSIST_VERB = 2

# Part two searches noun/verb pairs for this output
GRAVITY_ASSIST_TARGET = 19690720
GRAVITY_ASSIST_SEARCH = range(0, 100)


# =============================================================================
#  DAY 4 — PASSWORDS
# =============================================================================
PASSWORD_RANGE = (134792, 675810)   # inclusive
PASSWORD_LENGTH = 6

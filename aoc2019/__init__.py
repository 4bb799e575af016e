"""
aoc2019 — Advent of Code 2019 puzzle solvers
============================================

Architecture:
    ┌──────────┐    ┌────────────┐    ┌─────────────────────────────┐
    │  aoc.py  │───>│ challenges │───>│ fuel / wires / passwords    │
    │  (CLI)   │    │ (registry) │    │ gravity_assist ──> intcode  │
    └──────────┘    └────────────┘    └─────────────────────────────┘

    - intcode/:     stored-program VM (loader, memory, decoder, executor)
    - challenges/:  one Challenge subclass per day, looked up by name
    - inputs.py:    reads inputs/<day>/<file>
    - log.py:       rich console + optional file logging
    - config.py:    paths, log levels, puzzle constants
"""

__version__ = "0.2.0"

from .errors import ChallengeError, ChallengeFailure, MissingChallenge, MissingPart
from .challenges import CHALLENGES, Challenge, get_challenge
from .intcode import IntcodeError, IntcodeVM, load_program, run_program

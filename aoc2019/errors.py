"""
Challenge-level errors.

These cover the puzzle layer (dispatch, input files, input data). VM errors
are a separate family rooted at aoc2019.intcode.IntcodeError.
"""


class ChallengeError(Exception):
    """Base class for puzzle-layer failures."""
    pass


class MissingChallenge(ChallengeError):
    def __init__(self, day: str):
        self.day = day
        super().__init__(f"No challenge for day {day} has been registered")


class MissingPart(ChallengeError):
    def __init__(self, day: str, part: str):
        self.day = day
        self.part = part
        super().__init__(f"Part {part} of challenge {day} is not implemented")


class ChallengeFailure(ChallengeError):
    """Bad or unreadable puzzle input."""
    pass

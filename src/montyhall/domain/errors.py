"""Exceptions raised by the game rules and the input capability.

``MontyHallError`` subclasses are expected failures: the service layer
turns them into a failed ServiceResult carrying ``code``.
``InternalInvariantViolation`` is a defect and is never converted.
"""

from __future__ import annotations


class MontyHallError(Exception):
    """Base class for expected game failures."""

    code = "MONTYHALL_ERROR"


class InvalidConfiguration(MontyHallError):
    """The game cannot be played with the requested configuration."""

    code = "INVALID_CONFIGURATION"


class TooManyInvalidInputs(MontyHallError):
    """The contestant exhausted the retry budget for a prompt."""

    code = "TOO_MANY_INVALID_INPUTS"

    def __init__(self, attempts: int, prompt: str = "", *, input_closed: bool = False) -> None:
        if input_closed:
            message = f"Input ended after {attempts} invalid attempts"
        else:
            message = f"Too many invalid inputs ({attempts} attempts)"
        super().__init__(message)
        self.attempts = attempts
        self.prompt = prompt
        self.input_closed = input_closed


class InternalInvariantViolation(AssertionError):
    """The host opened the door hiding the prize."""

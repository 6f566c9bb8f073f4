"""Bounded-retry integer prompts.

The round engine never touches stdin directly; it asks a ChoiceReader
for a validated integer. ``BoundedChoiceReader`` re-prompts on bad lines
and gives up with TooManyInvalidInputs once the attempt budget is spent.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

import click

from montyhall.domain.errors import TooManyInvalidInputs
from montyhall.domain.types import MAX_INPUT_ATTEMPTS

logger = logging.getLogger(__name__)

Validator = Callable[[int], str | None]

NOT_AN_INTEGER = "Sorry, that wasn't valid.  Please enter an integer."
GIVING_UP = "Too many errors reading the user guess.  Exiting."


class ChoiceReader(Protocol):
    """Capability: ask the contestant for an integer accepted by *validator*."""

    def read_validated_choice(self, prompt: str, validator: Validator) -> int: ...


def door_in_range(door_count: int) -> Validator:
    """Accept 1-based door numbers from 1 to *door_count*."""

    def validate(value: int) -> str | None:
        if value < 1:
            return f"That guess ({value}) is too low!  Try again."
        if value > door_count:
            return f"That guess ({value}) is too high!  Try again."
        return None

    return validate


def one_of(first: int, second: int) -> Validator:
    """Accept exactly *first* or *second*, not any other valid door."""

    def validate(value: int) -> str | None:
        if value in (first, second):
            return None
        return f"Please pick either {first} or {second}.  Try again."

    return validate


class BoundedChoiceReader:
    """ChoiceReader over a line source with a fixed attempt budget.

    Args:
        read_line: Shows the prompt and returns one raw line of input.
        echo: Prints a rejection message.
        max_attempts: Lines to try before raising TooManyInvalidInputs.
    """

    def __init__(
        self,
        read_line: Callable[[str], str],
        echo: Callable[[str], None],
        *,
        max_attempts: int = MAX_INPUT_ATTEMPTS,
    ) -> None:
        self._read_line = read_line
        self._echo = echo
        self.max_attempts = max_attempts

    def read_validated_choice(self, prompt: str, validator: Validator) -> int:
        attempts = 0
        while attempts < self.max_attempts:
            try:
                raw = self._read_line(prompt)
            except (EOFError, click.Abort):
                logger.debug("Input closed after %d attempts", attempts)
                self._echo(GIVING_UP)
                raise TooManyInvalidInputs(attempts, prompt, input_closed=True) from None
            attempts += 1
            try:
                value = int(raw.strip())
            except ValueError:
                self._echo(NOT_AN_INTEGER)
                continue
            problem = validator(value)
            if problem is None:
                return value
            self._echo(problem)
        self._echo(GIVING_UP)
        raise TooManyInvalidInputs(attempts, prompt)


def click_choice_reader(
    max_attempts: int = MAX_INPUT_ATTEMPTS, *, err: bool = False
) -> BoundedChoiceReader:
    """A BoundedChoiceReader reading from the terminal via click.

    With *err* set, prompts and rejections go to stderr so stdout only
    carries the final result.
    """

    def read_line(prompt: str) -> str:
        return click.prompt(prompt, default="", show_default=False, prompt_suffix="\n", err=err)

    def echo(message: str) -> None:
        click.echo(message, err=err)

    return BoundedChoiceReader(read_line, echo, max_attempts=max_attempts)

"""RoundEngine — plays exactly one Monty Hall round.

The engine owns no I/O. Randomness comes from an injected
``random.Random``, contestant input from a ChoiceReader, and the
play-by-play goes to a narrator callable (a no-op by default).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import structlog

from montyhall.domain import doors
from montyhall.domain.errors import InvalidConfiguration
from montyhall.domain.models import GameRound, RoundOutcome
from montyhall.domain.types import DoorRole
from montyhall.output import narration
from montyhall.services.prompts import door_in_range, one_of

if TYPE_CHECKING:
    import random

    from montyhall.services.prompts import ChoiceReader

log = structlog.get_logger(__name__)

Narrator = Callable[[str], None]


def _silent(_line: str) -> None:
    return None


class RoundEngine:
    """Runs single rounds and reports whether switching would have won.

    Usage::

        engine = RoundEngine(random.Random(7))
        should_have_switched = engine.play_one_round(3, simulate=True)
    """

    def __init__(
        self,
        rng: random.Random,
        reader: ChoiceReader | None = None,
        narrator: Narrator | None = None,
    ) -> None:
        self.rng = rng
        self.reader = reader
        self.narrate = narrator or _silent

    # --- Steps ---

    def choose_prize_door(self, door_count: int) -> int:
        return doors.choose_prize_door(door_count, self.rng)

    def obtain_initial_guess(self, door_count: int, simulate: bool) -> int:
        """Zero-based first pick, drawn at random or asked for."""
        if simulate:
            guess = self.rng.randrange(door_count)
            self.narrate(narration.simulated_guess(guess))
            return guess
        reader = self._require_reader()
        choice = reader.read_validated_choice(
            narration.guess_prompt(door_count), door_in_range(door_count)
        )
        return choice - 1

    def choose_door_to_keep_shut(self, door_count: int, prize_door: int, initial_guess: int) -> int:
        return doors.choose_door_to_keep_shut(door_count, prize_door, initial_guess, self.rng)

    def enumerate_opened_doors(
        self,
        door_count: int,
        initial_guess: int,
        kept_shut_door: int,
        prize_door: int | None = None,
    ) -> list[tuple[int, DoorRole]]:
        return doors.enumerate_opened_doors(door_count, initial_guess, kept_shut_door, prize_door)

    def resolve_final_guess(self, initial_guess: int, kept_shut_door: int, simulate: bool) -> int:
        """Zero-based final pick.

        Simulated contestants always stay, so simulated batches measure
        how often staying loses.
        """
        if simulate:
            return initial_guess
        reader = self._require_reader()
        choice = reader.read_validated_choice(
            narration.switch_prompt(initial_guess, kept_shut_door),
            one_of(initial_guess + 1, kept_shut_door + 1),
        )
        return choice - 1

    def determine_outcome(
        self, prize_door: int, initial_guess: int, final_guess: int
    ) -> RoundOutcome:
        return doors.determine_outcome(prize_door, initial_guess, final_guess)

    # --- Full round ---

    def play_round(self, door_count: int, simulate: bool) -> GameRound:
        """Play one round start to finish and return its record.

        Raises:
            InvalidConfiguration: fewer than two doors, or an interactive
                round without a reader.
            TooManyInvalidInputs: the contestant ran out of attempts.
        """
        doors.validate_door_count(door_count)
        prize_door = self.choose_prize_door(door_count)
        self.narrate(narration.WELCOME)

        initial_guess = self.obtain_initial_guess(door_count, simulate)
        kept_shut_door = self.choose_door_to_keep_shut(door_count, prize_door, initial_guess)
        for door, role in self.enumerate_opened_doors(
            door_count, initial_guess, kept_shut_door, prize_door
        ):
            self.narrate(narration.door_line(door, role))

        final_guess = self.resolve_final_guess(initial_guess, kept_shut_door, simulate)
        outcome = self.determine_outcome(prize_door, initial_guess, final_guess)
        for line in narration.reveal_lines(
            final_guess, won=outcome.won, switched=final_guess != initial_guess
        ):
            self.narrate(line)

        game = GameRound(
            door_count=door_count,
            prize_door=prize_door,
            initial_guess=initial_guess,
            kept_shut_door=kept_shut_door,
            final_guess=final_guess,
        )
        log.debug(
            "round.complete",
            door_count=door_count,
            simulated=simulate,
            won=outcome.won,
            should_have_switched=outcome.should_have_switched,
        )
        return game

    def play_one_round(self, door_count: int, simulate: bool) -> bool:
        """Play one round; True when switching would have won it."""
        return self.play_round(door_count, simulate).should_have_switched

    def _require_reader(self) -> ChoiceReader:
        if self.reader is None:
            raise InvalidConfiguration("Interactive rounds need an input source")
        return self.reader

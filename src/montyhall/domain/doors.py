"""Door rules: prize placement, the host's reveal, and the outcome.

Every function that needs randomness takes an explicit ``random.Random``
so callers control seeding. Only ``choose_door_to_keep_shut`` has a
conditional draw: when the guess is wrong the host has no choice at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from montyhall.domain.errors import InternalInvariantViolation, InvalidConfiguration
from montyhall.domain.models import RoundOutcome
from montyhall.domain.types import MIN_DOORS, DoorRole

if TYPE_CHECKING:
    import random


def validate_door_count(door_count: int) -> None:
    """Raise InvalidConfiguration when fewer than two doors are requested."""
    if door_count < MIN_DOORS:
        msg = f"The game needs at least {MIN_DOORS} doors (got {door_count})"
        raise InvalidConfiguration(msg)


def choose_prize_door(door_count: int, rng: random.Random) -> int:
    """Place the prize behind a uniformly random door."""
    validate_door_count(door_count)
    return rng.randrange(door_count)


def choose_door_to_keep_shut(
    door_count: int,
    prize_door: int,
    initial_guess: int,
    rng: random.Random,
) -> int:
    """Pick the one door, besides the guess, that the host leaves closed.

    A wrong guess forces the host to keep the prize door shut. A correct
    guess lets him pick uniformly among the other ``door_count - 1``
    doors: draw from ``[0, door_count - 1)`` and shift draws at or above
    the prize door up by one, so e.g. with 10 doors and the prize at 2 the
    range ``0..8`` maps onto ``0, 1, 3, .., 9``.
    """
    if initial_guess != prize_door:
        return prize_door
    door = rng.randrange(door_count - 1)
    if door >= prize_door:
        door += 1
    return door


def enumerate_opened_doors(
    door_count: int,
    initial_guess: int,
    kept_shut_door: int,
    prize_door: int | None = None,
) -> list[tuple[int, DoorRole]]:
    """Classify every door after the host's reveal, in door order.

    When *prize_door* is given, an opened door hiding the prize raises
    InternalInvariantViolation.
    """
    doors: list[tuple[int, DoorRole]] = []
    for door in range(door_count):
        if door == initial_guess:
            role = DoorRole.CHOSEN
        elif door == kept_shut_door:
            role = DoorRole.KEPT_SHUT
        else:
            role = DoorRole.OPENED
            if door == prize_door:
                msg = f"Host opened door {door + 1}, which hides the prize"
                raise InternalInvariantViolation(msg)
        doors.append((door, role))
    return doors


def determine_outcome(prize_door: int, initial_guess: int, final_guess: int) -> RoundOutcome:
    """Score a round.

    ``should_have_switched`` looks only at the initial guess: it is true
    exactly when staying would have lost, whatever the contestant did.
    """
    return RoundOutcome(
        won=final_guess == prize_door,
        should_have_switched=initial_guess != prize_door,
    )

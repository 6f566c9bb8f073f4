"""Play-by-play messages printed while a round is in progress.

Door numbers in messages are 1-based; arguments are zero-based indices.
"""

from __future__ import annotations

from montyhall.domain.types import DoorRole

WELCOME = "Welcome to the Monty Hall Game!"


def simulated_guess(door: int) -> str:
    return f"The simulation chooses door {door + 1}"


def door_line(door: int, role: DoorRole) -> str:
    """Describe what the host does with one door during the reveal."""
    number = door + 1
    if role is DoorRole.CHOSEN:
        return f"Monty Hall does not open door {number} since that's the door the user chose."
    if role is DoorRole.KEPT_SHUT:
        return f"Monty Hall keeps door {number} closed."
    return f"Monty Hall opens door {number}. There is nothing behind it."


def guess_prompt(door_count: int) -> str:
    return f"Please pick a door from 1 to {door_count}"


def switch_prompt(initial_guess: int, kept_shut_door: int) -> str:
    return (
        f"Would you like to stick to door {initial_guess + 1} "
        f"or would you like to switch to door {kept_shut_door + 1}?"
    )


def reveal_lines(final_guess: int, *, won: bool, switched: bool) -> list[str]:
    """Open the contestant's final door and judge the decision."""
    lines = [f"Monty Hall opens door {final_guess + 1}."]
    if won and switched:
        lines.append("Congratulations, you won the prize! Good thing you switched doors!")
    elif won:
        lines.append("Congratulations, you won the prize! Good thing you didn't switch doors!")
    elif switched:
        lines.append("Sorry, you didn't win the prize! Guess you shouldn't have switched doors!")
    else:
        lines.append("Sorry, you didn't win the prize! Guess you should have switched doors!")
    return lines


def progress_lines(games_played: int, switch_would_have_won: int) -> list[str]:
    return [
        f"Played {games_played} games",
        f"Should have switched {switch_would_have_won} times",
    ]

"""Door roles and game-wide constants."""

from __future__ import annotations

from enum import StrEnum

MIN_DOORS = 2
MAX_INPUT_ATTEMPTS = 10


class DoorRole(StrEnum):
    """What happens to a door once the host has made his reveal."""

    CHOSEN = "chosen"
    KEPT_SHUT = "kept_shut"
    OPENED = "opened"

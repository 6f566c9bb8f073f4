"""StatisticsAggregator — runs many rounds and counts when switching wins."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import structlog

from montyhall.domain.doors import validate_door_count
from montyhall.domain.models import TrialStatistics

if TYPE_CHECKING:
    from montyhall.services.round import RoundEngine

log = structlog.get_logger(__name__)

ProgressCallback = Callable[[TrialStatistics], None]


class StatisticsAggregator:
    """Drives a RoundEngine for a fixed number of rounds.

    Rounds run strictly one after another: interactive rounds share a
    single input stream. ``on_progress`` sees the running totals after
    every round.

    ``self.stats`` keeps the totals of the latest call, so a caller can
    still report the rounds completed before an input failure.
    """

    def __init__(self, engine: RoundEngine, on_progress: ProgressCallback | None = None) -> None:
        self.engine = engine
        self.on_progress = on_progress
        self.stats = TrialStatistics()

    def play_many_rounds(self, door_count: int, num_rounds: int, simulate: bool) -> TrialStatistics:
        """Play *num_rounds* rounds and return the totals.

        Zero or negative *num_rounds* plays nothing and returns empty totals.

        TooManyInvalidInputs from a round propagates and ends the batch;
        ``self.stats`` still holds the totals gathered up to that point.
        """
        validate_door_count(door_count)

        self.stats = stats = TrialStatistics()
        for _ in range(num_rounds):
            stats.record(self.engine.play_one_round(door_count, simulate))
            if self.on_progress is not None:
                self.on_progress(stats)

        log.debug(
            "trials.complete",
            door_count=door_count,
            games_played=stats.games_played,
            switch_would_have_won=stats.switch_would_have_won,
        )
        return stats

"""GameService — ServiceResult facade over the engine and the aggregator.

Expected failures (MontyHallError) become ``ok=False`` results carrying
the error code. InternalInvariantViolation is left to propagate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from montyhall.domain.errors import MontyHallError, TooManyInvalidInputs
from montyhall.services.result import ServiceError, ServiceResult
from montyhall.services.statistics import StatisticsAggregator

if TYPE_CHECKING:
    from montyhall.domain.models import GameRound, TrialStatistics
    from montyhall.services.round import RoundEngine
    from montyhall.services.statistics import ProgressCallback

log = structlog.get_logger(__name__)


def _round_data(game: GameRound) -> dict[str, Any]:
    """Round fields as the 1-based door numbers the contestant saw."""
    return {
        "door_count": game.door_count,
        "prize_door": game.prize_door + 1,
        "initial_guess": game.initial_guess + 1,
        "kept_shut_door": game.kept_shut_door + 1,
        "final_guess": game.final_guess + 1,
        "switched": game.switched,
        "won": game.won,
        "should_have_switched": game.should_have_switched,
    }


def _stats_data(stats: TrialStatistics) -> dict[str, Any]:
    return {
        "games_played": stats.games_played,
        "switch_would_have_won": stats.switch_would_have_won,
        "stay_would_have_won": stats.stay_would_have_won,
        "switch_rate": round(stats.switch_rate, 4),
        "stay_rate": round(stats.stay_rate, 4),
    }


def _failure(op: str, exc: MontyHallError, detail: dict[str, Any] | None = None) -> ServiceResult:
    log.info("game.failed", op=op, code=exc.code, error=str(exc))
    detail = dict(detail or {})
    if isinstance(exc, TooManyInvalidInputs):
        detail["attempts"] = exc.attempts
        detail["input_closed"] = exc.input_closed
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=str(exc), detail=detail),
    )


class GameService:
    """Entry point used by the CLI commands."""

    def __init__(self, engine: RoundEngine) -> None:
        self._engine = engine

    def play(self, door_count: int, *, simulate: bool = False) -> ServiceResult:
        """Play a single round."""
        op = "play_round"
        try:
            game = self._engine.play_round(door_count, simulate)
        except MontyHallError as exc:
            return _failure(op, exc)
        data = _round_data(game)
        data["simulated"] = simulate
        return ServiceResult(ok=True, op=op, data=data)

    def play_many(
        self,
        door_count: int,
        num_rounds: int,
        *,
        simulate: bool = True,
        on_progress: ProgressCallback | None = None,
    ) -> ServiceResult:
        """Play a batch of rounds and report how often switching would have won."""
        op = "play_many"
        aggregator = StatisticsAggregator(self._engine, on_progress=on_progress)
        try:
            stats = aggregator.play_many_rounds(door_count, num_rounds, simulate)
        except MontyHallError as exc:
            return _failure(op, exc, _stats_data(aggregator.stats))

        data: dict[str, Any] = {"door_count": door_count, **_stats_data(stats)}
        data["expected_switch_rate"] = round((door_count - 1) / door_count, 4)
        data["simulated"] = simulate
        return ServiceResult(ok=True, op=op, data=data)

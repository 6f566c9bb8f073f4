"""Round and statistics models.

Door fields hold zero-based indices. Conversion to the 1-based door
numbers the contestant sees happens at the prompt and output layers.

INVARIANT: the kept-shut door is never the initial guess, and it is the
prize door unless the initial guess already was the prize door.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator

from montyhall.domain.types import MIN_DOORS


class RoundOutcome(BaseModel):
    """Result of comparing the guesses against the prize door."""

    model_config = {"frozen": True}

    won: bool
    should_have_switched: bool


class GameRound(BaseModel):
    """One completed round. Built fresh per trial, never reused."""

    model_config = {"frozen": True}

    door_count: int = Field(ge=MIN_DOORS)
    prize_door: int = Field(ge=0)
    initial_guess: int = Field(ge=0)
    kept_shut_door: int = Field(ge=0)
    final_guess: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_doors(self) -> Self:
        for name in ("prize_door", "initial_guess", "kept_shut_door", "final_guess"):
            if getattr(self, name) >= self.door_count:
                msg = f"{name} must be below door_count ({self.door_count})"
                raise ValueError(msg)
        if self.kept_shut_door == self.initial_guess:
            raise ValueError("kept_shut_door must differ from initial_guess")
        if self.kept_shut_door != self.prize_door and self.initial_guess != self.prize_door:
            raise ValueError("kept_shut_door must be the prize door when the guess is wrong")
        if self.final_guess not in (self.initial_guess, self.kept_shut_door):
            raise ValueError("final_guess must be the initial guess or the kept-shut door")
        return self

    @property
    def switched(self) -> bool:
        return self.final_guess != self.initial_guess

    @property
    def won(self) -> bool:
        return self.final_guess == self.prize_door

    @property
    def should_have_switched(self) -> bool:
        return self.initial_guess != self.prize_door


class TrialStatistics(BaseModel):
    """Running totals for a batch of rounds.

    Attributes:
        games_played: Completed rounds.
        switch_would_have_won: Rounds where the initial guess missed the
            prize, so switching to the kept-shut door would have won.
    """

    games_played: int = Field(default=0, ge=0)
    switch_would_have_won: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_counts(self) -> Self:
        if self.switch_would_have_won > self.games_played:
            raise ValueError("switch_would_have_won cannot exceed games_played")
        return self

    def record(self, should_have_switched: bool) -> None:
        """Fold one completed round into the totals."""
        self.games_played += 1
        if should_have_switched:
            self.switch_would_have_won += 1

    @property
    def stay_would_have_won(self) -> int:
        return self.games_played - self.switch_would_have_won

    @property
    def switch_rate(self) -> float:
        if not self.games_played:
            return 0.0
        return self.switch_would_have_won / self.games_played

    @property
    def stay_rate(self) -> float:
        if not self.games_played:
            return 0.0
        return self.stay_would_have_won / self.games_played

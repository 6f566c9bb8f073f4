"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, montyhall.toml only holds
overrides. An empty file plays the classic three-door game.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from montyhall.domain.types import MAX_INPUT_ATTEMPTS, MIN_DOORS


class GameConfig(BaseModel):
    """[game] section."""

    model_config = {"frozen": True}

    doors: int = Field(default=3, ge=MIN_DOORS)
    max_attempts: int = Field(default=MAX_INPUT_ATTEMPTS, ge=1)
    seed: int | None = None


class SimulateConfig(BaseModel):
    """[simulate] section."""

    model_config = {"frozen": True}

    rounds: int = Field(default=100, ge=1)
    show_rounds: bool = False


"""Tests for the configuration section models."""

import pytest
from pydantic import ValidationError

from montyhall.config.models import GameConfig, SimulateConfig


class TestDefaults:
    def test_game(self) -> None:
        cfg = GameConfig()
        assert cfg.doors == 3
        assert cfg.max_attempts == 10
        assert cfg.seed is None

    def test_simulate(self) -> None:
        cfg = SimulateConfig()
        assert cfg.rounds == 100
        assert cfg.show_rounds is False


class TestValidation:
    @pytest.mark.parametrize(
        ("model", "field", "value"),
        [
            (GameConfig, "doors", 1),
            (GameConfig, "max_attempts", 0),
            (SimulateConfig, "rounds", 0),
        ],
    )
    def test_lower_bounds(self, model: type, field: str, value: int) -> None:
        with pytest.raises(ValidationError):
            model(**{field: value})

    def test_frozen(self) -> None:
        cfg = GameConfig()
        with pytest.raises(ValidationError):
            cfg.doors = 5  # type: ignore[misc]

"""Shared pytest fixtures and test helpers for montyhall tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from montyhall.services.prompts import BoundedChoiceReader


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run each test from an empty directory with no MONTYHALL_* overrides.

    Also restores the package logger, since the CLI reconfigures it with a
    handler bound to the runner's stderr.
    """
    for var in ("MONTYHALL_CONFIG", "MONTYHALL_SEED", "MONTYHALL_GAME__DOORS"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    package_logger = logging.getLogger("montyhall")
    handlers = package_logger.handlers[:]
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class ScriptedInput:
    """Canned input lines for BoundedChoiceReader; EOF once exhausted."""

    def __init__(self, *lines: str) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.messages: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def reader(self, max_attempts: int = 10) -> BoundedChoiceReader:
        return BoundedChoiceReader(self.read_line, self.messages.append, max_attempts=max_attempts)


class FixedRandom:
    """Stand-in for random.Random that replays queued randrange results."""

    def __init__(self, *values: int) -> None:
        self._values = list(values)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        value = self._values.pop(0)
        assert 0 <= value < stop
        return value


@pytest.fixture
def scripted() -> Callable[..., ScriptedInput]:
    return ScriptedInput


@pytest.fixture
def fixed_rng() -> Callable[..., FixedRandom]:
    return FixedRandom

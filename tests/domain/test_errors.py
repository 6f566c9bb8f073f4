"""Tests for the domain exceptions."""

from montyhall.domain.errors import (
    InternalInvariantViolation,
    InvalidConfiguration,
    MontyHallError,
    TooManyInvalidInputs,
)


class TestTooManyInvalidInputs:
    def test_budget_exhausted(self) -> None:
        exc = TooManyInvalidInputs(10, "Pick")
        assert str(exc) == "Too many invalid inputs (10 attempts)"
        assert exc.attempts == 10
        assert exc.prompt == "Pick"
        assert exc.input_closed is False

    def test_input_closed_keeps_real_count(self) -> None:
        exc = TooManyInvalidInputs(3, input_closed=True)
        assert str(exc) == "Input ended after 3 invalid attempts"
        assert exc.attempts == 3


def test_codes() -> None:
    assert issubclass(TooManyInvalidInputs, MontyHallError)
    assert TooManyInvalidInputs.code == "TOO_MANY_INVALID_INPUTS"
    assert InvalidConfiguration.code == "INVALID_CONFIGURATION"
    assert issubclass(InternalInvariantViolation, AssertionError)
    assert not issubclass(InternalInvariantViolation, MontyHallError)

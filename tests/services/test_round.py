"""Tests for RoundEngine — single-round composition."""

from __future__ import annotations

import random

import pytest

from montyhall.domain.errors import InvalidConfiguration, TooManyInvalidInputs
from montyhall.domain.types import DoorRole
from montyhall.output.narration import WELCOME
from montyhall.services.round import RoundEngine


class TestSimulatedRound:
    def test_always_stays(self) -> None:
        engine = RoundEngine(random.Random(11))
        for _ in range(200):
            game = engine.play_round(3, simulate=True)
            assert game.final_guess == game.initial_guess
            assert game.switched is False
            assert game.should_have_switched == (game.initial_guess != game.prize_door)

    def test_play_one_round_returns_should_have_switched(self, fixed_rng) -> None:
        # prize at 0, simulated guess 2: wrong guess, no reveal draw.
        engine = RoundEngine(fixed_rng(0, 2))
        assert engine.play_one_round(3, simulate=True) is True

    def test_correct_guess_draws_kept_door(self, fixed_rng) -> None:
        rng = fixed_rng(1, 1, 1)
        game = RoundEngine(rng).play_round(3, simulate=True)
        assert (game.prize_door, game.initial_guess, game.kept_shut_door) == (1, 1, 2)
        assert game.should_have_switched is False
        assert rng.calls == [3, 3, 2]

    def test_two_doors(self) -> None:
        engine = RoundEngine(random.Random(8))
        for _ in range(50):
            game = engine.play_round(2, simulate=True)
            assert {game.initial_guess, game.kept_shut_door} == {0, 1}

    def test_one_door_rejected(self) -> None:
        with pytest.raises(InvalidConfiguration):
            RoundEngine(random.Random(0)).play_round(1, simulate=True)

    def test_narration(self, fixed_rng) -> None:
        lines: list[str] = []
        engine = RoundEngine(fixed_rng(0, 2), narrator=lines.append)
        engine.play_round(3, simulate=True)
        assert lines == [
            WELCOME,
            "The simulation chooses door 3",
            "Monty Hall keeps door 1 closed.",
            "Monty Hall opens door 2. There is nothing behind it.",
            "Monty Hall does not open door 3 since that's the door the user chose.",
            "Monty Hall opens door 3.",
            "Sorry, you didn't win the prize! Guess you should have switched doors!",
        ]


class TestInteractiveRound:
    def test_switch_to_prize(self, fixed_rng, scripted) -> None:
        inp = scripted("1", "3")
        engine = RoundEngine(fixed_rng(2), reader=inp.reader())
        game = engine.play_round(3, simulate=False)
        assert game.initial_guess == 0
        assert game.kept_shut_door == 2
        assert game.final_guess == 2
        assert game.won is True
        assert game.switched is True
        assert inp.prompts == [
            "Please pick a door from 1 to 3",
            "Would you like to stick to door 1 or would you like to switch to door 3?",
        ]

    def test_stay_on_prize(self, fixed_rng, scripted) -> None:
        lines: list[str] = []
        inp = scripted("2", "2")
        engine = RoundEngine(fixed_rng(1, 0), reader=inp.reader(), narrator=lines.append)
        game = engine.play_round(3, simulate=False)
        assert game.kept_shut_door == 0
        assert game.won is True
        assert lines[-1].endswith("Good thing you didn't switch doors!")

    def test_switch_answer_must_be_offered_door(self, fixed_rng, scripted) -> None:
        inp = scripted("1", "2", "1")
        engine = RoundEngine(fixed_rng(2), reader=inp.reader())
        game = engine.play_round(3, simulate=False)
        assert game.final_guess == 0
        assert inp.messages == ["Please pick either 1 or 3.  Try again."]

    def test_exhausted_guess_aborts_round(self, fixed_rng, scripted) -> None:
        inp = scripted(*(["0"] * 10))
        engine = RoundEngine(fixed_rng(0), reader=inp.reader())
        with pytest.raises(TooManyInvalidInputs):
            engine.play_round(3, simulate=False)

    def test_exhausted_switch_aborts_round(self, fixed_rng, scripted) -> None:
        inp = scripted("1", *(["2"] * 10))
        engine = RoundEngine(fixed_rng(2), reader=inp.reader())
        with pytest.raises(TooManyInvalidInputs):
            engine.play_round(3, simulate=False)

    def test_no_reader(self) -> None:
        engine = RoundEngine(random.Random(0))
        with pytest.raises(InvalidConfiguration, match="input source"):
            engine.play_round(3, simulate=False)


class TestSteps:
    def test_obtain_initial_guess_converts_to_index(self, scripted) -> None:
        engine = RoundEngine(random.Random(0), reader=scripted("5").reader())
        assert engine.obtain_initial_guess(5, simulate=False) == 4

    def test_resolve_final_guess_simulated_stays(self) -> None:
        engine = RoundEngine(random.Random(0))
        assert engine.resolve_final_guess(2, 0, simulate=True) == 2

    def test_enumerate_opened_doors(self) -> None:
        engine = RoundEngine(random.Random(0))
        roles = dict(engine.enumerate_opened_doors(3, 0, 2))
        assert roles == {0: DoorRole.CHOSEN, 1: DoorRole.OPENED, 2: DoorRole.KEPT_SHUT}

    def test_determine_outcome(self) -> None:
        outcome = RoundEngine(random.Random(0)).determine_outcome(1, 0, 1)
        assert outcome.won is True
        assert outcome.should_have_switched is True

"""Command: play a single round."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from montyhall.commands._base import MontyCommand

if TYPE_CHECKING:
    from montyhall.commands._context import AppContext


@click.command(
    cls=MontyCommand,
    examples="""\
  montyhall play
  montyhall play --doors 100
  montyhall play --simulate
  montyhall --seed 7 --json play --simulate""",
)
@click.option("--doors", type=int, default=None, help="Number of doors (default from config: 3).")
@click.option("--simulate", is_flag=True, help="Pick at random and always stay, no prompts.")
@click.pass_obj
def play(app: AppContext, doors: int | None, simulate: bool) -> None:
    """Play one round of the Monty Hall game."""
    from montyhall.services.game import GameService

    door_count = doors if doors is not None else app.settings.game.doors
    svc = GameService(app.build_engine())
    app.emit(svc.play(door_count, simulate=simulate))

"""Command: play many rounds and count how often switching would have won."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from montyhall.commands._base import MontyCommand
from montyhall.output.narration import progress_lines

if TYPE_CHECKING:
    from montyhall.commands._context import AppContext
    from montyhall.domain.models import TrialStatistics


@click.command(
    cls=MontyCommand,
    examples="""\
  montyhall simulate
  montyhall simulate --rounds 10000
  montyhall simulate --doors 100 --rounds 100
  montyhall simulate --interactive --rounds 10
  montyhall simulate --rounds 5 --show-rounds""",
)
@click.option("--doors", type=int, default=None, help="Number of doors (default from config: 3).")
@click.option(
    "--rounds",
    type=click.IntRange(min=1),
    default=None,
    help="Rounds to play (default from config: 100).",
)
@click.option("--interactive", is_flag=True, help="Ask for every guess instead of simulating.")
@click.option(
    "--show-rounds/--hide-rounds",
    default=None,
    help="Print the play-by-play and running totals after each round.",
)
@click.pass_obj
def simulate(
    app: AppContext,
    doors: int | None,
    rounds: int | None,
    interactive: bool,
    show_rounds: bool | None,
) -> None:
    """Play many rounds and report how often switching would have won.

    Simulated contestants always stay with their first pick.
    """
    from montyhall.services.game import GameService

    door_count = doors if doors is not None else app.settings.game.doors
    num_rounds = rounds if rounds is not None else app.settings.simulate.rounds
    if show_rounds is None:
        show_rounds = interactive or app.settings.simulate.show_rounds
    show_rounds = show_rounds and app.narrating

    def report_progress(stats: TrialStatistics) -> None:
        for line in progress_lines(stats.games_played, stats.switch_would_have_won):
            app.echo(line)

    svc = GameService(app.build_engine(narrate=show_rounds))
    app.emit(
        svc.play_many(
            door_count,
            num_rounds,
            simulate=not interactive,
            on_progress=report_progress if show_rounds else None,
        )
    )

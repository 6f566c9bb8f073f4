"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Builds the round engine from settings and owns
result emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

import click

from montyhall.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from montyhall.config.settings import MontySettings
    from montyhall.services.result import ServiceResult
    from montyhall.services.round import RoundEngine


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: MontySettings) -> None:
        self.settings = settings

        from montyhall.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def narrating(self) -> bool:
        """Whether play-by-play lines should be printed."""
        return not (self.settings.quiet or self.settings.json_output)

    def echo(self, line: str) -> None:
        click.echo(line)

    def build_engine(self, *, narrate: bool = True) -> RoundEngine:
        """RoundEngine seeded from settings and reading from the terminal."""
        from montyhall.services.prompts import click_choice_reader
        from montyhall.services.round import RoundEngine

        reader = click_choice_reader(
            self.settings.game.max_attempts,
            err=self.settings.json_output,
        )
        narrator = self.echo if narrate and self.narrating else None
        return RoundEngine(random.Random(self.settings.effective_seed), reader, narrator)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally. Warnings go to
          stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        if self.settings.effective_seed is not None:
            meta = {**(result.meta or {}), "seed": self.settings.effective_seed}
            result = result.model_copy(update={"meta": meta})
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

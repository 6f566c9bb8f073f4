"""Root CLI group for montyhall with global flags and command registration."""

from __future__ import annotations

import click

from montyhall import __version__
from montyhall.commands import register_commands
from montyhall.commands._base import MontyGroup
from montyhall.commands._context import AppContext
from montyhall.config.settings import MontySettings


@click.group(
    cls=MontyGroup,
    invoke_without_command=True,
    examples="""\
  montyhall
  montyhall --seed 42 play --simulate
  montyhall -c ./montyhall.toml simulate""",
)
@click.version_option(version=__version__, prog_name="montyhall")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--seed", type=int, default=None, help="Seed the random number generator.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    seed: int | None,
) -> None:
    """montyhall — play and simulate the Monty Hall game.

    Without a command, plays one interactive round.
    """
    settings = MontySettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
        seed=seed,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from montyhall.commands.play import play

        ctx.invoke(play)


register_commands(cli)

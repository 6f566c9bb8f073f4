"""Subcommand modules for montyhall.

register_commands() defers imports so ``montyhall --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from montyhall.commands.play import play
    from montyhall.commands.simulate import simulate

    cli.add_command(play)
    cli.add_command(simulate)

"""Click base classes that take an ``examples=`` text.

The text is not kept on the command; it only feeds an eager
``--examples`` flag, so ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples and exit.",
    )


class MontyCommand(click.Command):
    """Command accepting ``examples=``; without it there is no ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if examples:
            self.params.append(_examples_option(examples))


class MontyGroup(MontyCommand, click.Group):
    """Root group. ``@group.command()`` builds MontyCommands."""

    command_class = MontyCommand

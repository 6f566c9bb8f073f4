"""Rich Console factory and theme for montyhall output.

Consoles render into a StringIO buffer so renderers keep the
``format_result() -> str`` contract. Rich disables color codes on
non-TTY output (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MONTY_THEME = Theme(
    {
        "monty.ok": "bold green",
        "monty.error": "bold red",
        "monty.op": "bold cyan",
        "monty.key": "dim",
        "monty.door": "bold blue",
        "monty.won": "green",
        "monty.lost": "red",
        "monty.rate": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=MONTY_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

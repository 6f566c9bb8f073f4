"""Output mode dispatch.

The CLI renders a ServiceResult for humans (Rich) or machines (--json).
``--quiet`` reduces human output to a single line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from montyhall.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from montyhall.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags taken from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)

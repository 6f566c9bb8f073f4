"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from montyhall.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from montyhall.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render a one-line summary for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    d = result.data
    if result.op == "play_round":
        return "won" if d.get("won") else "lost"
    if result.op == "play_many":
        return f"{d.get('switch_would_have_won')}/{d.get('games_played')}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="monty.ok")
    op = Text(f"  {result.op}", style="monty.op")
    console.print(Text.assemble(label, op))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="monty.key")
    if key.endswith("_door") or key.endswith("_guess"):
        v = Text(str(value), style="monty.door")
    elif key.endswith("_rate"):
        v = Text(f"{value:.2%}" if isinstance(value, float) else str(value), style="monty.rate")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="monty.error")
    op = Text(f"  {result.op}", style="monty.op")
    console.print(label, op, Text(" — "), msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Game renderers ────────────────────────────────────────────────────


def _render_round(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render play_round: the doors involved and the verdict."""
    d = result.data
    _status_line(console, result)
    for key in ("door_count", "prize_door", "initial_guess", "kept_shut_door", "final_guess"):
        if key in d:
            _field(console, key, d[key])
    verdict = Text("won", style="monty.won") if d.get("won") else Text("lost", style="monty.lost")
    console.print(Text.assemble(Text("  result: ", style="monty.key"), verdict))
    _field(console, "switched", d.get("switched"))
    _field(console, "should_have_switched", d.get("should_have_switched"))
    if verbose:
        _render_meta(console, result)


def _render_stats(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render play_many as a stay-vs-switch table."""
    d = result.data
    _status_line(console, result)
    _field(console, "door_count", d.get("door_count"))
    _field(console, "games_played", d.get("games_played"))
    console.print()

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Strategy")
    table.add_column("Would have won", justify="right")
    table.add_column("Rate", style="monty.rate", justify="right")
    table.add_row(
        "stay",
        str(d.get("stay_would_have_won", 0)),
        f"{d.get('stay_rate', 0.0):.2%}",
    )
    table.add_row(
        "switch",
        str(d.get("switch_would_have_won", 0)),
        f"{d.get('switch_rate', 0.0):.2%}",
    )
    console.print(table)

    if "expected_switch_rate" in d:
        _field(console, "expected_switch_rate", d["expected_switch_rate"])
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "play_round": _render_round,
    "play_many": _render_stats,
}

"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from tcknctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from tcknctl.services.result import ServiceResult

Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    ``generate`` yields the bare identifier so it can be piped;
    ``validate`` yields ``true`` or ``false``.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "generate":
        return str(result.data.get("tckn", ""))
    if result.op == "validate":
        return _bool_word(result.data.get("valid", False))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _bool_word(value: Any) -> str:
    return "true" if value else "false"


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    if isinstance(value, (dict, list)):
        value = _json.dumps(value, separators=(",", ":"))
    console.print(Text(f"  {key}: ", style="tckn.key"), Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}", markup=False)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tckn.error")
    op = Text(f"  {result.op}", style="tckn.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── TCKN renderers ────────────────────────────────────────────────────


def _render_tckn_line(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """``TCKN: <value> => validate: <true|false>``."""
    valid = bool(result.data.get("valid"))
    console.print(
        Text("TCKN: "),
        Text(str(result.data.get("tckn", "")), style="tckn.value"),
        Text(" => validate: "),
        Text(_bool_word(valid), style="tckn.valid" if valid else "tckn.invalid"),
        sep="",
    )
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    console.print(Text("OK", style="tckn.ok"), Text(f"  {result.op}", style="tckn.op"), sep="")
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "generate": _render_tckn_line,
    "validate": _render_tckn_line,
}

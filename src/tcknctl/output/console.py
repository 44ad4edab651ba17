"""Rich Console factory and theme for tcknctl output.

Consoles render into a StringIO buffer so renderers can return plain
strings.  Outside a terminal (tests, pipes) Rich emits no color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TCKN_THEME = Theme(
    {
        "tckn.ok": "bold green",
        "tckn.error": "bold red",
        "tckn.op": "bold cyan",
        "tckn.key": "dim",
        "tckn.value": "bold blue",
        "tckn.valid": "green",
        "tckn.invalid": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=TCKN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

"""Rich Console factory and theme.

Consoles render into a StringIO buffer so formatters can keep returning
plain strings. Rich drops color codes on its own outside a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GUARD_THEME = Theme(
    {
        "guard.ok": "bold green",
        "guard.error": "bold red",
        "guard.warning": "bold yellow",
        "guard.op": "bold cyan",
        "guard.key": "dim",
        "guard.code": "bold blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=GUARD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

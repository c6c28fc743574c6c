"""Rich Console factory and theme for pushwire output.

Consoles render into a StringIO buffer so formatters can return strings.
In non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PUSHWIRE_THEME = Theme(
    {
        "pw.ok": "bold green",
        "pw.error": "bold red",
        "pw.warning": "bold yellow",
        "pw.op": "bold cyan",
        "pw.key": "dim",
        "pw.path": "magenta",
        "pw.code": "bold red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=PUSHWIRE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

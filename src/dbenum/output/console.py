"""Rich Console factory and theme for dbenum output.

Consoles render into a StringIO buffer so formatters keep returning
plain strings. In non-TTY environments (tests, pipes) Rich drops color.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DBENUM_THEME = Theme(
    {
        "dbe.ok": "bold green",
        "dbe.error": "bold red",
        "dbe.warning": "bold yellow",
        "dbe.op": "bold cyan",
        "dbe.key": "dim",
        "dbe.path": "dim",
        "dbe.name": "bold blue",
        "dbe.code": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=DBENUM_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

"""Rich Console factory and theme for orgdir output.

Consoles render into a StringIO buffer so renderers return strings.
In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ORGDIR_THEME = Theme(
    {
        "org.ok": "bold green",
        "org.error": "bold red",
        "org.warning": "bold yellow",
        "org.op": "bold cyan",
        "org.key": "dim",
        "org.id": "bold blue",
        "org.name": "bold",
        "org.code": "magenta",
        "org.salary": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=ORGDIR_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()

"""Rich Console factory and theme for untd status lines.

Consoles render into a StringIO buffer so callers decide which stream
the text goes to.  In non-TTY environments (tests, pipes) Rich disables
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

UNTD_THEME = Theme(
    {
        "untd.ok": "bold green",
        "untd.error": "bold red",
        "untd.warning": "bold yellow",
    }
)


def create_console() -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=UNTD_THEME,
        highlight=False,
        soft_wrap=True,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def styled_line(message: str, style: str) -> str:
    """Render *message* with a theme style, without markup parsing."""
    console = create_console()
    console.print(Text(message, style=style), end="")
    return get_output(console)

"""Rich Console factory and theme for nsidctl output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. Outside a terminal (tests, pipes) Rich drops the
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

NSID_THEME = Theme(
    {
        "nsid.ok": "bold green",
        "nsid.error": "bold red",
        "nsid.warning": "bold yellow",
        "nsid.op": "bold cyan",
        "nsid.key": "dim",
        "nsid.tld": "bold magenta",
        "nsid.segment": "blue",
        "nsid.name": "bold green",
        "nsid.fragment": "yellow",
        "nsid.kind.full": "cyan",
        "nsid.kind.relative": "yellow",
    }
)

_KIND_STYLES: dict[str, str] = {
    "full": "nsid.kind.full",
    "relative": "nsid.kind.relative",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=NSID_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a reference kind."""
    return _KIND_STYLES.get(kind, "")

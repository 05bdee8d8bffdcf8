"""Rich Console factory and theme for studentctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

STUDENT_THEME = Theme(
    {
        "st.ok": "bold green",
        "st.error": "bold red",
        "st.warning": "bold yellow",
        "st.op": "bold cyan",
        "st.key": "dim",
        "st.id": "bold blue",
        "st.name": "bold",
        "st.email": "cyan",
        "st.gpa.high": "green",
        "st.gpa.mid": "",
        "st.gpa.low": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=STUDENT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 140,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_gpa(gpa: float) -> str:
    """Return the Rich style name for a GPA band."""
    if gpa >= 3.5:
        return "st.gpa.high"
    if gpa < 2.0:
        return "st.gpa.low"
    return "st.gpa.mid"

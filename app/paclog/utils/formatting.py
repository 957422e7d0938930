"""Rich console instances and message helpers."""

import sys

from rich.console import Console
from rich.markup import escape

from paclog.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Use truecolor on interactive terminals and plain text when output is piped."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")

"""Rendering of log entries for the terminal."""

from rich.text import Text

from paclog.models.entry import LogEntry
from paclog.utils.formatting import console


def format_entry(entry: LogEntry) -> Text:
    """Build a styled line for one entry.

    The line reads ``<timestamp> <action> <package> <version>`` with
    the package name highlighted.

    Args:
        entry: Entry to render.

    Returns:
        Rich Text ready for printing.
    """
    return Text.assemble(
        (entry.timestamp, "timestamp"),
        " ",
        (entry.action.value, f"action.{entry.action.value}"),
        " ",
        (entry.package, "package"),
        " ",
        (entry.version, "version"),
    )


def print_entries(entries: list[LogEntry]) -> None:
    """Print entries in the given order, one per line."""
    for entry in entries:
        console.print(format_entry(entry), soft_wrap=True, highlight=False)

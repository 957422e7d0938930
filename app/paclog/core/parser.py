"""Pacman log parsing and filtering.

ALPM writes one line per package transaction::

    [2024-03-01T10:15:02+0100] [ALPM] upgraded linux (6.7.6-1 -> 6.7.9-1)

The marker must directly follow the bracketed timestamp that opens the
line; after it come the action keyword, the package name and the version
text.
"""

import logging
from pathlib import Path

from paclog.models.entry import LogAction, LogEntry

logger = logging.getLogger(__name__)

ALPM_MARKER = " [ALPM] "


class LogFileError(Exception):
    """Raised when the pacman log cannot be read."""


class LogParseError(Exception):
    """Raised when an ALPM transaction line is missing fields."""

    def __init__(self, line: str) -> None:
        super().__init__(f"invalid line {line}")
        self.line = line


def read_log(path: Path) -> str:
    """Read the whole pacman log.

    Args:
        path: Location of the log file.

    Returns:
        File contents. Undecodable bytes are replaced.

    Raises:
        LogFileError: If the file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as e:
        raise LogFileError(f"Log file not found: {path}") from e
    except PermissionError as e:
        raise LogFileError(f"Permission denied reading log file: {path}") from e
    except OSError as e:
        raise LogFileError(f"Failed to read log file {path}: {e}") from e


def _is_timestamp(text: str) -> bool:
    """Check that text is a single bracketed timestamp such as '[2024-03-01T10:15:02+0100]'."""
    inner = text[1:-1]
    return (
        len(text) > 2
        and text[0] == "["
        and text[-1] == "]"
        and "[" not in inner
        and "]" not in inner
    )


def parse_line(line: str, action: LogAction) -> LogEntry | None:
    """Parse a log line if it records the given action.

    Args:
        line: A single line from the log, without trailing newline.
        action: Transaction type to look for.

    Returns:
        LogEntry on match, None for lines about anything else.

    Raises:
        LogParseError: If the line has the marker and keyword but lacks
            a package name or version.
    """
    timestamp, marker, remaining = line.partition(ALPM_MARKER)
    if not marker or not _is_timestamp(timestamp):
        return None

    parts = remaining.split(" ", 2)
    if parts[0] != action.value:
        return None
    if len(parts) < 3 or not parts[1] or not parts[2]:
        raise LogParseError(line)

    return LogEntry(timestamp=timestamp, action=action, package=parts[1], version=parts[2])


def filter_entries(
    text: str,
    action: LogAction,
    max_entries: int | None = None,
    explicit: set[str] | None = None,
    *,
    strict: bool = True,
) -> list[LogEntry]:
    """Select the most recent entries of one action type.

    Lines are scanned newest-first and scanning stops as soon as
    ``max_entries`` matches are found, so older entries are the ones cut.

    Args:
        text: Full log contents.
        action: Transaction type to select.
        max_entries: Maximum number of entries to return (None = unlimited).
        explicit: If given, only report packages in this set, each at most
            once (its most recent occurrence). The set itself is not modified.
        strict: Raise on malformed lines instead of skipping them.

    Returns:
        Matching entries ordered oldest to newest.

    Raises:
        ValueError: If max_entries is negative.
        LogParseError: If strict and a matching line is malformed.
    """
    if max_entries is not None and max_entries < 0:
        msg = f"max_entries must be non-negative, got {max_entries}"
        raise ValueError(msg)

    entries: list[LogEntry] = []
    if max_entries == 0:
        return entries

    remaining = set(explicit) if explicit is not None else None

    # Only "\n" ends a line; scriptlet output may carry other separators.
    for raw_line in reversed(text.split("\n")):
        line = raw_line.removesuffix("\r")
        try:
            entry = parse_line(line, action)
        except LogParseError:
            if strict:
                raise
            logger.debug("Skipping malformed log line: %r", line[:200])
            continue

        if entry is None:
            continue

        if remaining is not None:
            if entry.package not in remaining:
                continue
            remaining.remove(entry.package)

        entries.append(entry)
        if max_entries is not None and len(entries) >= max_entries:
            break

    entries.reverse()
    logger.debug("Selected %d %s entries", len(entries), action.value)
    return entries

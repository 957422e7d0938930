"""Log entry models for pacman log parsing.

This module defines the data structures for representing
package transactions recorded by ALPM in the pacman log.
"""

from dataclasses import dataclass
from enum import Enum


class LogAction(str, Enum):
    """Package transaction recorded in the log.

    The value is the keyword ALPM writes right after its marker,
    e.g. ``[ALPM] installed foo (1.0-1)``.
    """

    INSTALLED = "installed"
    UPGRADED = "upgraded"
    REMOVED = "removed"


@dataclass(frozen=True, slots=True)
class LogEntry:
    """A single package transaction parsed from the pacman log.

    Attributes:
        timestamp: Raw timestamp prefix, brackets included
            (e.g. '[2024-03-01T10:15:02+0100]').
        action: Transaction type.
        package: Package name (e.g. 'firefox').
        version: Version text as logged (e.g. '(1.0-1 -> 1.1-1)').
    """

    timestamp: str
    action: LogAction
    package: str
    version: str

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.package:
            msg = "Package name cannot be empty"
            raise ValueError(msg)
        if not self.version:
            msg = "Package version cannot be empty"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"{self.timestamp} {self.action.value} {self.package} {self.version}"

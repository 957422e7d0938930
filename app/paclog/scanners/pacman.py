"""Pacman package query.

Asks pacman which packages were explicitly installed, as opposed
to pulled in as dependencies.
"""

import logging
import subprocess
from collections.abc import Sequence

from paclog.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)


class PacmanScanner:
    """Queries pacman for the set of explicitly installed packages.

    Example:
        >>> scanner = PacmanScanner()
        >>> if scanner.is_available():
        ...     "base" in scanner.explicit_packages()
    """

    DEFAULT_COMMAND: tuple[str, ...] = ("pacman", "-Qqe")

    def __init__(self, command: Sequence[str] = DEFAULT_COMMAND) -> None:
        """Initialize the scanner.

        Args:
            command: Query command printing one package name per line.
        """
        if not command:
            msg = "Query command cannot be empty"
            raise ValueError(msg)
        self._command = list(command)

    @property
    def command(self) -> list[str]:
        """The query command that will be executed."""
        return list(self._command)

    def is_available(self) -> bool:
        """Check if the query executable is on PATH."""
        return command_exists(self._command[0])

    def explicit_packages(self) -> set[str]:
        """Get names of explicitly installed packages.

        Returns:
            Set of package names.

        Raises:
            RuntimeError: If the query tool is missing or fails.
        """
        if not self.is_available():
            msg = f"{self._command[0]} is not available on this system"
            raise RuntimeError(msg)

        try:
            result = run_command(self._command)
        except (subprocess.TimeoutExpired, OSError) as e:
            msg = f"{self._command[0]} could not be run: {e}"
            raise RuntimeError(msg) from e

        if not result.success:
            msg = f"{' '.join(self._command)} failed: {result.stderr.strip() or 'unknown error'}"
            raise RuntimeError(msg)

        packages = {line.strip() for line in result.stdout.splitlines() if line.strip()}
        logger.debug("Found %d explicitly installed packages", len(packages))
        return packages

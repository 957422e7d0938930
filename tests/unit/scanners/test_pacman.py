"""Unit tests for PacmanScanner."""

import subprocess
from unittest.mock import patch

import pytest
from paclog.scanners.pacman import PacmanScanner
from paclog.utils.shell import CommandResult


class TestPacmanScanner:
    """Tests for PacmanScanner class."""

    @pytest.fixture
    def scanner(self) -> PacmanScanner:
        """Create PacmanScanner instance."""
        return PacmanScanner()

    def test_default_command(self, scanner: PacmanScanner) -> None:
        """Scanner queries pacman -Qqe by default."""
        assert scanner.command == ["pacman", "-Qqe"]

    def test_empty_command_rejected(self) -> None:
        """An empty query command is invalid."""
        with pytest.raises(ValueError, match="cannot be empty"):
            PacmanScanner([])

    def test_is_available(self, scanner: PacmanScanner) -> None:
        """is_available checks for the query executable."""
        with patch("paclog.scanners.pacman.command_exists") as mock_exists:
            mock_exists.return_value = True
            assert scanner.is_available() is True
            mock_exists.assert_called_once_with("pacman")

    def test_is_available_missing(self, scanner: PacmanScanner) -> None:
        """is_available returns False when pacman is missing."""
        with patch("paclog.scanners.pacman.command_exists", return_value=False):
            assert scanner.is_available() is False

    def test_explicit_packages(self, scanner: PacmanScanner, mock_pacman_qqe_output: str) -> None:
        """explicit_packages parses one name per line."""
        with (
            patch("paclog.scanners.pacman.command_exists", return_value=True),
            patch("paclog.scanners.pacman.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(
                stdout=mock_pacman_qqe_output, stderr="", returncode=0
            )

            packages = scanner.explicit_packages()

        assert packages == {"base", "firefox", "linux", "neovim"}
        mock_run.assert_called_once_with(["pacman", "-Qqe"])

    def test_explicit_packages_skips_blank_lines(self, scanner: PacmanScanner) -> None:
        """Blank lines and surrounding whitespace are ignored."""
        with (
            patch("paclog.scanners.pacman.command_exists", return_value=True),
            patch("paclog.scanners.pacman.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(
                stdout="\n  vim  \n\nbase\n", stderr="", returncode=0
            )

            assert scanner.explicit_packages() == {"vim", "base"}

    def test_custom_command(self) -> None:
        """A configured command is executed as given."""
        scanner = PacmanScanner(["paru", "-Qqe"])

        with (
            patch("paclog.scanners.pacman.command_exists", return_value=True) as mock_exists,
            patch("paclog.scanners.pacman.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(stdout="yay\n", stderr="", returncode=0)

            assert scanner.explicit_packages() == {"yay"}

        mock_exists.assert_called_once_with("paru")
        mock_run.assert_called_once_with(["paru", "-Qqe"])

    def test_raises_when_unavailable(self, scanner: PacmanScanner) -> None:
        """explicit_packages raises RuntimeError when pacman is missing."""
        with (
            patch("paclog.scanners.pacman.command_exists", return_value=False),
            pytest.raises(RuntimeError, match="not available"),
        ):
            scanner.explicit_packages()

    def test_raises_on_failure(self, scanner: PacmanScanner) -> None:
        """explicit_packages raises RuntimeError on non-zero exit."""
        with (
            patch("paclog.scanners.pacman.command_exists", return_value=True),
            patch("paclog.scanners.pacman.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(
                stdout="", stderr="error: database not found", returncode=1
            )

            with pytest.raises(RuntimeError, match="database not found"):
                scanner.explicit_packages()

    def test_raises_on_timeout(self, scanner: PacmanScanner) -> None:
        """A hanging query is reported as RuntimeError."""
        with (
            patch("paclog.scanners.pacman.command_exists", return_value=True),
            patch("paclog.scanners.pacman.run_command") as mock_run,
        ):
            mock_run.side_effect = subprocess.TimeoutExpired(cmd="pacman", timeout=30)

            with pytest.raises(RuntimeError, match="could not be run"):
                scanner.explicit_packages()

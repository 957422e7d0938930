"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def sample_log() -> str:
    """Sample pacman log covering every transaction type."""
    return """[2024-01-10T09:00:00+0100] [PACMAN] Running 'pacman -S firefox'
[2024-01-10T09:00:01+0100] [ALPM] transaction started
[2024-01-10T09:00:02+0100] [ALPM] installed nss (3.96-1)
[2024-01-10T09:00:03+0100] [ALPM] installed firefox (121.0-1)
[2024-01-10T09:00:04+0100] [ALPM] transaction completed
[2024-01-12T18:30:00+0100] [ALPM] installed neovim (0.9.5-1)
[2024-01-15T08:00:00+0100] [ALPM] upgraded firefox (121.0-1 -> 121.0.1-1)
[2024-01-15T08:00:01+0100] [ALPM] upgraded nss (3.96-1 -> 3.96.1-1)
[2024-01-20T12:00:00+0100] [ALPM] removed neovim (0.9.5-1)
[2024-01-21T12:00:00+0100] [ALPM] installed neovim (0.9.5-2)
[2024-01-22T07:45:00+0100] [ALPM-SCRIPTLET] ==> Updating module dependencies
[2024-01-22T07:45:01+0100] [ALPM] upgraded linux (6.7.0-1 -> 6.7.1-1)
"""


@pytest.fixture
def sample_log_file(tmp_path: Path, sample_log: str) -> Path:
    """Sample pacman log written to a temporary file."""
    log_file = tmp_path / "pacman.log"
    log_file.write_text(sample_log)
    return log_file


@pytest.fixture
def mock_pacman_qqe_output() -> str:
    """Sample `pacman -Qqe` output for testing."""
    return """base
firefox
linux
neovim
"""


@pytest.fixture
def malformed_log() -> str:
    """Log with a truncated installed line between valid ones."""
    return """[2024-02-01T10:00:00+0100] [ALPM] installed curl (8.5.0-1)
[2024-02-01T10:00:01+0100] [ALPM] installed
[2024-02-01T10:00:02+0100] [ALPM] installed wget (1.21.4-1)
"""

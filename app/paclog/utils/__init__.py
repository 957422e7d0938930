"""Utility modules for paclog.

This module exports commonly used utility functions.
"""

from paclog.utils.formatting import console, err_console, print_error
from paclog.utils.shell import CommandResult, command_exists, run_command, run_interactive

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "print_error",
    "run_command",
    "run_interactive",
]

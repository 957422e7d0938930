"""Data models for paclog.

This module exports the core data structures used throughout the application.
"""

from paclog.models.entry import LogAction, LogEntry

__all__ = ["LogAction", "LogEntry"]

"""CLI package for paclog.

This package contains the Typer application.
"""

from paclog.cli.main import app

__all__ = ["app"]

"""Main CLI application entry point.

Defines the Typer application: a single command that filters the
pacman log by category or opens it unfiltered in a viewer.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from paclog import __version__
from paclog.cli.display import print_entries
from paclog.cli.types import FilterChoice
from paclog.core.config import ConfigError, PaclogConfig, load_config
from paclog.core.parser import LogFileError, LogParseError, filter_entries, read_log
from paclog.core.viewer import ViewerError, show_log
from paclog.scanners.pacman import PacmanScanner
from paclog.utils.formatting import err_console, print_error

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="paclog",
    help="A tool to filter the pacman log.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"paclog version {__version__}")
        raise typer.Exit()


def _configure_logging() -> None:
    """Send debug logging to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


@app.command()
def main(
    filter_choice: Annotated[
        FilterChoice,
        typer.Argument(
            metavar="FILTER",
            help="Entries to show: a|all, i|installed, e|explicitly, u|upgraded, "
            "r|removed|uninstalled.",
            case_sensitive=False,
        ),
    ] = FilterChoice.ALL,
    max_entries: Annotated[
        int | None,
        typer.Option(
            "-n",
            min=0,
            help="Maximum number of most recent entries to output.",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            "-f",
            help="Read this log instead of the configured one.",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: ~/.config/paclog/config.toml).",
        ),
    ] = None,
    lenient: Annotated[
        bool,
        typer.Option(
            "--lenient",
            help="Skip malformed log lines instead of failing.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug output on stderr.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Filter the pacman log.

    With no filter the whole log is opened in the first available viewer
    (nvim, vim, bat, cat). Otherwise matching entries are printed oldest
    first, package names highlighted.

    Examples:
        paclog                  # Browse the full log
        paclog installed        # Every installed package
        paclog e -n 10          # Last 10 explicitly installed packages
        paclog upgraded -n 20   # Last 20 upgrades
        paclog r                # Removed packages
    """
    if verbose:
        _configure_logging()

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    path = log_file or config.log_file
    action = filter_choice.action

    if action is None:
        if max_entries is not None:
            logger.debug("-n has no effect when browsing the full log")
        _show_full_log(path, config)
        return

    limit = max_entries if max_entries is not None else config.default_limit
    strict = config.strict and not lenient

    try:
        explicit: set[str] | None = None
        if filter_choice.is_explicit:
            explicit = PacmanScanner(config.query_command).explicit_packages()
        entries = filter_entries(read_log(path), action, limit, explicit, strict=strict)
    except (RuntimeError, LogFileError, LogParseError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_entries(entries)


def _show_full_log(path: Path, config: PaclogConfig) -> None:
    """Open the log in a viewer, exiting with an error if none works.

    Args:
        path: Log file to open.
        config: Loaded configuration providing the viewer list.
    """
    try:
        viewer = show_log(path, config.viewers)
    except ViewerError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    logger.debug("Displayed %s with %s", path, viewer)


if __name__ == "__main__":
    app()

"""Open the unfiltered pacman log in an external viewer."""

import logging
from collections.abc import Sequence
from pathlib import Path

from paclog.utils.shell import run_interactive

logger = logging.getLogger(__name__)

DEFAULT_VIEWERS: tuple[str, ...] = ("nvim", "vim", "bat", "cat")


class ViewerError(Exception):
    """Raised when no viewer could display the log."""


def show_log(path: Path, viewers: Sequence[str] = DEFAULT_VIEWERS) -> str:
    """Display the log with the first viewer that can be started.

    Viewers that are not installed are skipped. The first one that
    starts decides the outcome; a failing viewer is not followed by
    the next candidate.

    Args:
        path: Log file to open.
        viewers: Programs to try, in order.

    Returns:
        Name of the viewer that displayed the log.

    Raises:
        ViewerError: If the started viewer failed or none could be started.
    """
    for viewer in viewers:
        try:
            code = run_interactive([viewer, str(path)])
        except OSError as e:
            logger.debug("Viewer %s could not be started: %s", viewer, e)
            continue

        if code == 0:
            return viewer
        if code < 0:
            raise ViewerError(f"Process {viewer} terminated by signal")
        raise ViewerError(f"Process {viewer} exited with status code: {code}")

    raise ViewerError(f"None of {list(viewers)} worked.")

"""User configuration for paclog.

Settings are read from ~/.config/paclog/config.toml. Every key is
optional; a missing file means all defaults apply.

Example::

    log_file = "/var/log/pacman.log"
    viewers = ["less", "cat"]
    query_command = ["pacman", "-Qqe"]
    strict = false
    default_limit = 50
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from paclog.core.paths import DEFAULT_LOG_FILE, get_config_path

logger = logging.getLogger(__name__)


class PaclogConfig(BaseModel):
    """Validated paclog settings.

    Attributes:
        log_file: Location of the pacman log.
        viewers: Programs tried in order to display the unfiltered log.
        query_command: Command listing explicitly installed packages, one per line.
        strict: Fail on malformed ALPM lines instead of skipping them.
        default_limit: Entry cap used when -n is not given (None = unlimited).
    """

    model_config = ConfigDict(extra="forbid")

    log_file: Annotated[
        Path,
        Field(description="Path to the pacman log"),
    ] = DEFAULT_LOG_FILE
    viewers: Annotated[
        list[str],
        Field(description="Viewers tried in order for the unfiltered log"),
    ] = ["nvim", "vim", "bat", "cat"]
    query_command: Annotated[
        list[str],
        Field(min_length=1, description="Command printing explicit package names"),
    ] = ["pacman", "-Qqe"]
    strict: Annotated[
        bool,
        Field(description="Treat malformed ALPM lines as errors"),
    ] = True
    default_limit: Annotated[
        int | None,
        Field(ge=0, description="Default maximum number of entries"),
    ] = None


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly given config file does not exist."""


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid TOML."""


def load_config(path: Path | None = None) -> PaclogConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path,
            which may be absent.

    Returns:
        Validated PaclogConfig object. Defaults if the default file does not exist.

    Raises:
        ConfigNotFoundError: If an explicit path does not exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if path is not None:
            raise ConfigNotFoundError(f"Config file not found: {config_path}")
        logger.debug("No config file at %s, using defaults", config_path)
        return PaclogConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        config = PaclogConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config

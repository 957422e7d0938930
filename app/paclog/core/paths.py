"""Path management for paclog.

Configuration lives in the XDG config directory:
- Config: ~/.config/paclog/config.toml
- Theme:  ~/.config/paclog/theme.toml
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "paclog"

# Where pacman writes its transaction log
DEFAULT_LOG_FILE = Path("/var/log/pacman.log")


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/paclog/ (or XDG_CONFIG_HOME/paclog/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the default config file path.

    Returns:
        Path to ~/.config/paclog/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/paclog/theme.toml.
    """
    return get_config_dir() / "theme.toml"

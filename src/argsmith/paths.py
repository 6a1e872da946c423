"""Config path helpers for argsmith."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir

CONFIG_DIR_ENV = "ARGSMITH_CONFIG_DIR"
CONFIG_FILE_NAME = "config.toml"


def get_config_dir() -> Path:
    """Get the config directory, honouring the ARGSMITH_CONFIG_DIR override."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return Path(user_config_dir("argsmith"))


def get_config_path() -> Path:
    """Get the path to config.toml."""
    return get_config_dir() / CONFIG_FILE_NAME

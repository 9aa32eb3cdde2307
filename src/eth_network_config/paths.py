"""Path management utilities for eth-network-config library."""

import os
from pathlib import Path
from typing import Optional, Union

from .constants import CONFIG_PATH_ENV, DEFAULT_CONFIG_FILENAME


def get_default_config_path() -> Path:
    """
    Get default configuration document path.

    Returns:
        $NETWORK_CONFIG_PATH if set, otherwise ./networks.json
    """
    override = os.environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override).absolute()
    return Path.cwd() / DEFAULT_CONFIG_FILENAME


def get_config_path(config_path: Optional[Union[Path, str]] = None) -> Path:
    """
    Resolve the configuration document path.

    Args:
        config_path: Explicit path (defaults to get_default_config_path())

    Returns:
        Absolute path to the configuration document
    """
    if config_path is None:
        return get_default_config_path()
    return Path(config_path).absolute()

"""Loading network configuration documents from files and text."""

import logging
from pathlib import Path
from typing import Union

from .decoding import decode
from .exceptions import ConfigurationNotFoundError, InvalidConfigurationError
from .types import Configuration
from .validator import validate_or_raise

logger = logging.getLogger(__name__)


def parse_configuration(data: Union[str, bytes, bytearray]) -> Configuration:
    """
    Decode and validate a configuration document.

    Args:
        data: JSON document as text or UTF-8 bytes

    Returns:
        Validated Configuration

    Raises:
        InvalidConfigurationError: If data is not valid JSON or fails validation
    """
    try:
        raw = decode(data)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, UnicodeDecodeError and integer literals past the
        # interpreter digit limit are all ValueErrors; deep nesting recurses
        raise InvalidConfigurationError(f"Network configuration is not valid JSON: {e}") from e

    return validate_or_raise(raw)


def load_configuration(file_path: Union[Path, str]) -> Configuration:
    """
    Read, decode and validate a configuration document from disk.

    Args:
        file_path: Path to the JSON document

    Returns:
        Validated Configuration

    Raises:
        ConfigurationNotFoundError: If the file does not exist
        InvalidConfigurationError: If the file is not valid JSON or fails validation
    """
    path = Path(file_path)
    if not path.exists():
        raise ConfigurationNotFoundError(f"Network configuration not found at {path}")

    data = path.read_bytes()
    try:
        configuration = parse_configuration(data)
    except InvalidConfigurationError:
        logger.error("Rejected network configuration %s", path)
        raise

    logger.info(
        "Loaded network configuration %s (version %s, %d networks)",
        path,
        configuration.version,
        len(configuration.networks),
    )
    return configuration

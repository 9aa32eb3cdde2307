"""Custom exception classes for eth-network-config library."""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .types import ValidationError


class NetworkConfigError(Exception):
    """Base exception for network configuration errors."""

    pass


class ConfigurationNotFoundError(NetworkConfigError, FileNotFoundError):
    """Raised when the network configuration file is not found."""

    pass


class InvalidConfigurationError(NetworkConfigError, ValueError):
    """
    Raised when a configuration document cannot be decoded or fails validation.

    Attributes:
        errors: Every structural and invariant error found in the document.
                Empty when the document was not valid JSON at all.
    """

    def __init__(self, message: str, errors: Optional[List["ValidationError"]] = None):
        super().__init__(message)
        self.errors: List["ValidationError"] = list(errors or [])


class ReservedKeyConflictError(NetworkConfigError, ValueError):
    """Raised when an extension map uses the name of a standard field."""

    pass


class NetworkNotFoundError(NetworkConfigError, ValueError):
    """Raised when requested chain ID is not in the configuration."""

    pass


class ContractNotFoundError(NetworkConfigError, ValueError):
    """Raised when requested contract is not deployed on a network."""

    pass


class ExplorerNotFoundError(NetworkConfigError, ValueError):
    """Raised when requested block explorer is not configured for a network."""

    pass

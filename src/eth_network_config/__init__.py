"""
eth-network-config: validate and load dapp network configuration documents
"""

from importlib.metadata import PackageNotFoundError, version

from .decoding import decode
from .encoding import dumps, encode
from .exceptions import (
    ConfigurationNotFoundError,
    ContractNotFoundError,
    ExplorerNotFoundError,
    InvalidConfigurationError,
    NetworkConfigError,
    NetworkNotFoundError,
    ReservedKeyConflictError,
)
from .loader import load_configuration, parse_configuration
from .manager import NetworkConfigManager
from .types import (
    Configuration,
    ContractConfig,
    ErrorKind,
    ExplorerConfig,
    NativeCurrencyConfig,
    NetworkConfig,
    RelationsConfig,
    RpcConfig,
    ValidationError,
    ValidationResult,
)
from .validator import validate, validate_or_raise

try:
    __version__ = version("eth-network-config")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "NetworkConfigManager",
    "validate",
    "validate_or_raise",
    "decode",
    "encode",
    "dumps",
    "parse_configuration",
    "load_configuration",
    "Configuration",
    "NetworkConfig",
    "NativeCurrencyConfig",
    "RelationsConfig",
    "RpcConfig",
    "ExplorerConfig",
    "ContractConfig",
    "ErrorKind",
    "ValidationError",
    "ValidationResult",
    "NetworkConfigError",
    "ConfigurationNotFoundError",
    "InvalidConfigurationError",
    "ReservedKeyConflictError",
    "NetworkNotFoundError",
    "ContractNotFoundError",
    "ExplorerNotFoundError",
]

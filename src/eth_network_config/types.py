"""Data types and dataclasses for eth-network-config library."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, FrozenSet, List, Mapping, Optional

from .constants import ROOT_PATH
from .exceptions import ReservedKeyConflictError
from .schema import ValueKind, fields, standard_keys


class _SchemaObject:
    """
    Mixin for schema value objects.

    Checks that extension maps leave standard fields alone and turns the
    extension map and every mapping field into read-only views. Instances
    compare by value but are not hashable.
    """

    schema_type: ClassVar[str]
    extensions: Mapping[str, Any]

    def __post_init__(self) -> None:
        reserved = standard_keys(self.schema_type) & set(self.extensions)
        if reserved:
            raise ReservedKeyConflictError(
                f"{self.schema_type} extensions redefine standard fields: "
                f"{', '.join(sorted(reserved))}"
            )

        # frozen=True only blocks attribute assignment, not dict mutation
        object.__setattr__(self, "extensions", MappingProxyType(dict(self.extensions)))
        for spec in fields(self.schema_type):
            value = getattr(self, spec.attribute)
            if spec.kind is ValueKind.MAPPING and value is not None:
                object.__setattr__(self, spec.attribute, MappingProxyType(dict(value)))

        if hasattr(self, "null_keys"):
            object.__setattr__(self, "null_keys", frozenset(self.null_keys))


@dataclass(frozen=True)
class NativeCurrencyConfig(_SchemaObject):
    """Native token metadata of a network."""

    schema_type: ClassVar[str] = "NativeCurrencyConfig"

    name: str
    symbol: str
    decimals: int
    extensions: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RelationsConfig(_SchemaObject):
    """Lineage of a network (which mainnet / parent chain it belongs to)."""

    schema_type: ClassVar[str] = "RelationsConfig"

    mainnet_chain_id: Optional[int]
    parent_chain_id: Optional[int]
    extensions: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RpcConfig(_SchemaObject):
    """One RPC endpoint of a network."""

    schema_type: ClassVar[str] = "RpcConfig"

    url: str
    extensions: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ExplorerConfig(_SchemaObject):
    """Block explorer root URL and relative link templates."""

    schema_type: ClassVar[str] = "ExplorerConfig"

    root: str
    block: Optional[str] = None  # e.g. "/block/:block"
    address: Optional[str] = None  # e.g. "/address/:address"
    tx: Optional[str] = None  # e.g. "/tx/:tx"
    nft: Optional[str] = None  # e.g. "/nft/:address/:token"
    extensions: Mapping[str, Any] = field(default_factory=dict)
    null_keys: FrozenSet[str] = frozenset()  # Optional keys given as explicit null


@dataclass(frozen=True)
class ContractConfig(_SchemaObject):
    """Deployment of one contract on one network."""

    schema_type: ClassVar[str] = "ContractConfig"

    address: str  # Checksummed address, kept as given
    block_created: int
    abi_url: Optional[str] = None  # Absolute, or relative to Configuration.abi_root
    extensions: Mapping[str, Any] = field(default_factory=dict)
    null_keys: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class NetworkConfig(_SchemaObject):
    """Configuration of one chain."""

    schema_type: ClassVar[str] = "NetworkConfig"

    name: str
    testnet: bool
    native_currency: NativeCurrencyConfig
    relations: RelationsConfig
    rpcs: Mapping[str, Optional[RpcConfig]]
    contracts: Mapping[str, Optional[ContractConfig]]
    explorers: Optional[Mapping[str, Optional[ExplorerConfig]]] = None
    extensions: Mapping[str, Any] = field(default_factory=dict)
    null_keys: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class Configuration(_SchemaObject):
    """A complete network configuration document."""

    schema_type: ClassVar[str] = "Configuration"

    version: str  # Semver of the document, e.g. "1.2.0"
    timestamp: str  # ISO-8601
    summary: str
    abi_root: Optional[str]
    networks: Mapping[str, NetworkConfig]  # Keyed by decimal chain ID string
    description: Optional[str] = None
    extensions: Mapping[str, Any] = field(default_factory=dict)


class ErrorKind(Enum):
    """
    Validation error kinds.

    Value strings are the names reported to callers.
    """

    TYPE_MISMATCH = "TypeMismatch"
    MISSING_FIELD = "MissingField"
    INVARIANT_VIOLATION = "InvariantViolation"
    RESERVED_KEY_CONFLICT = "ReservedKeyConflict"


@dataclass(frozen=True)
class ValidationError:
    """One problem found in a configuration document."""

    kind: ErrorKind
    path: str  # Dotted JSON path, e.g. "networks.1.contracts.Registry.blockCreated"
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value} at {self.path or ROOT_PATH}: {self.message}"


@dataclass
class ValidationResult:
    """Outcome of validate(): a Configuration or the full list of errors."""

    configuration: Optional[Configuration] = None
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.configuration is not None and not self.errors

    def errors_of(self, kind: ErrorKind) -> List[ValidationError]:
        """Return the errors of one kind, in the order they were found."""
        return [e for e in self.errors if e.kind is kind]

    def paths(self) -> List[str]:
        return [e.path for e in self.errors]

"""Schema model for network configuration documents."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


class ValueKind(Enum):
    """
    JSON value kinds a standard field may hold.

    - STRING: any JSON string
    - URL: JSON string holding an absolute URL (scheme and host)
    - BOOLEAN: JSON true/false
    - UNSIGNED_INTEGER: JSON integer >= 0 (never a string, float or boolean)
    - OBJECT: nested schema object, see FieldSpec.item_type
    - MAPPING: object of free-form keys to nested schema objects or null
    """

    STRING = "string"
    URL = "url"
    BOOLEAN = "boolean"
    UNSIGNED_INTEGER = "unsigned-integer"
    OBJECT = "object"
    MAPPING = "mapping"


@dataclass(frozen=True)
class FieldSpec:
    """Declaration of one standard field of a schema object."""

    key: str  # JSON property name, e.g. "blockCreated"
    attribute: str  # Python attribute name, e.g. "block_created"
    kind: ValueKind
    required: bool = True
    nullable: bool = False
    item_type: Optional[str] = None  # Schema type name for OBJECT / MAPPING
    nullable_items: bool = False  # MAPPING entries may be null ("known absent")
    chain_id_keys: bool = False  # MAPPING keys must be decimal chain IDs


def _field(
    key: str,
    attribute: str,
    kind: ValueKind,
    required: bool = True,
    nullable: bool = False,
    item_type: Optional[str] = None,
    nullable_items: bool = False,
    chain_id_keys: bool = False,
) -> FieldSpec:
    return FieldSpec(
        key, attribute, kind, required, nullable, item_type, nullable_items, chain_id_keys
    )


SCHEMA: Dict[str, Tuple[FieldSpec, ...]] = {
    "Configuration": (
        _field("version", "version", ValueKind.STRING),
        _field("timestamp", "timestamp", ValueKind.STRING),
        _field("summary", "summary", ValueKind.STRING),
        _field("description", "description", ValueKind.STRING, required=False),
        _field("abiRoot", "abi_root", ValueKind.STRING, nullable=True),
        _field("networks", "networks", ValueKind.MAPPING, item_type="NetworkConfig", chain_id_keys=True),
    ),
    "NetworkConfig": (
        _field("name", "name", ValueKind.STRING),
        _field("testnet", "testnet", ValueKind.BOOLEAN),
        _field("nativeCurrency", "native_currency", ValueKind.OBJECT, item_type="NativeCurrencyConfig"),
        _field("relations", "relations", ValueKind.OBJECT, item_type="RelationsConfig"),
        _field("rpcs", "rpcs", ValueKind.MAPPING, item_type="RpcConfig", nullable_items=True),
        _field(
            "explorers", "explorers", ValueKind.MAPPING,
            required=False, nullable=True, item_type="ExplorerConfig", nullable_items=True,
        ),
        _field("contracts", "contracts", ValueKind.MAPPING, item_type="ContractConfig", nullable_items=True),
    ),
    "NativeCurrencyConfig": (
        _field("name", "name", ValueKind.STRING),
        _field("symbol", "symbol", ValueKind.STRING),
        _field("decimals", "decimals", ValueKind.UNSIGNED_INTEGER),
    ),
    "RelationsConfig": (
        _field("mainnetChainId", "mainnet_chain_id", ValueKind.UNSIGNED_INTEGER, nullable=True),
        _field("parentChainId", "parent_chain_id", ValueKind.UNSIGNED_INTEGER, nullable=True),
    ),
    "RpcConfig": (
        _field("url", "url", ValueKind.URL),
    ),
    "ExplorerConfig": (
        _field("root", "root", ValueKind.URL),
        _field("block", "block", ValueKind.STRING, required=False, nullable=True),
        _field("address", "address", ValueKind.STRING, required=False, nullable=True),
        _field("tx", "tx", ValueKind.STRING, required=False, nullable=True),
        _field("nft", "nft", ValueKind.STRING, required=False, nullable=True),
    ),
    "ContractConfig": (
        _field("address", "address", ValueKind.STRING),
        _field("abiUrl", "abi_url", ValueKind.STRING, required=False, nullable=True),
        _field("blockCreated", "block_created", ValueKind.UNSIGNED_INTEGER),
    ),
}

_INDEX: Dict[str, Dict[str, FieldSpec]] = {
    type_name: {spec.key: spec for spec in specs} for type_name, specs in SCHEMA.items()
}

_STANDARD_KEYS: Dict[str, FrozenSet[str]] = {
    type_name: frozenset(index) for type_name, index in _INDEX.items()
}


def field_spec(type_name: str, key: str) -> Optional[FieldSpec]:
    """
    Look up the declaration of a standard field.

    Args:
        type_name: Schema type name (e.g. "ContractConfig")
        key: JSON property name

    Returns:
        FieldSpec for a standard field, None if key is an extension property

    Raises:
        KeyError: If type_name is not a schema type
    """
    return _INDEX[type_name].get(key)


def fields(type_name: str) -> Tuple[FieldSpec, ...]:
    """Return every standard field of a schema type, in document order."""
    return SCHEMA[type_name]


def standard_keys(type_name: str) -> FrozenSet[str]:
    """Return the JSON property names reserved by a schema type."""
    return _STANDARD_KEYS[type_name]

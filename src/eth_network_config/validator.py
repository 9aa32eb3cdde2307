"""Validation of decoded network configuration documents."""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from .constants import EXPLORER_PLACEHOLDERS, ROOT_PATH
from .decoding import plain, repeated_keys
from .exceptions import InvalidConfigurationError
from .schema import FieldSpec, ValueKind, field_spec, fields
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

logger = logging.getLogger(__name__)

# Schema type name -> dataclass built from its validated fields
_BUILDERS = {
    "Configuration": Configuration,
    "NetworkConfig": NetworkConfig,
    "NativeCurrencyConfig": NativeCurrencyConfig,
    "RelationsConfig": RelationsConfig,
    "RpcConfig": RpcConfig,
    "ExplorerConfig": ExplorerConfig,
    "ContractConfig": ContractConfig,
}


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _describe(value: Any) -> str:
    """Name the JSON kind of a decoded value for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return f"string {value!r}"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _is_absolute_url(value: str) -> bool:
    try:
        parsed = urlparse(value)
    except ValueError:
        # e.g. "http://[broken" (unbalanced IPv6 brackets)
        return False
    return bool(parsed.scheme and parsed.netloc)


def _is_chain_id(key: str) -> bool:
    # Canonical decimal form only: "1", "11155111"; not "01", "+1" or "0x1"
    return key.isascii() and key.isdigit() and (key == "0" or not key.startswith("0"))


class _Walker:
    """Single-use walker collecting every error of one document."""

    def __init__(self) -> None:
        self.errors: List[ValidationError] = []

    def fail(self, kind: ErrorKind, path: str, message: str) -> None:
        self.errors.append(ValidationError(kind, path, message))

    def check_object(self, raw: Any, type_name: str, path: str) -> Optional[Any]:
        """Validate one schema object and build its dataclass, or return None."""
        if not isinstance(raw, dict):
            self.fail(
                ErrorKind.TYPE_MISMATCH,
                path,
                f"expected {type_name} object, got {_describe(raw)}",
            )
            return None

        before = len(self.errors)

        # A standard field written twice is an extension overriding it
        conflicts = set()
        for key in repeated_keys(raw):
            if field_spec(type_name, key) is not None:
                conflicts.add(key)
                self.fail(
                    ErrorKind.RESERVED_KEY_CONFLICT,
                    _join(path, key),
                    f"standard field '{key}' is redefined by a repeated key",
                )
            else:
                logger.warning(
                    "Extension key %r repeated at %s; keeping the last value",
                    key,
                    path or ROOT_PATH,
                )

        values: Dict[str, Any] = {}
        null_keys = set()
        for spec in fields(type_name):
            field_path = _join(path, spec.key)
            if spec.key not in raw:
                if spec.required:
                    self.fail(
                        ErrorKind.MISSING_FIELD,
                        field_path,
                        f"required field '{spec.key}' is missing",
                    )
                else:
                    values[spec.attribute] = None
                continue
            if spec.key in conflicts:
                continue
            if raw[spec.key] is None and not spec.required:
                null_keys.add(spec.key)
            values[spec.attribute] = self.check_value(raw[spec.key], spec, field_path)

        extensions = {
            key: plain(value)
            for key, value in raw.items()
            if field_spec(type_name, key) is None
        }

        if len(self.errors) > before:
            return None
        if null_keys:
            # Optional keys present as null; encode() writes them back
            values["null_keys"] = frozenset(null_keys)
        return _BUILDERS[type_name](**values, extensions=extensions)

    def check_value(self, value: Any, spec: FieldSpec, path: str) -> Any:
        if value is None:
            if not spec.nullable:
                self.fail(ErrorKind.TYPE_MISMATCH, path, f"'{spec.key}' must not be null")
            return None

        kind = spec.kind
        if kind is ValueKind.STRING:
            if not isinstance(value, str):
                self.fail(ErrorKind.TYPE_MISMATCH, path, f"expected string, got {_describe(value)}")
                return None
            return value

        if kind is ValueKind.URL:
            if not isinstance(value, str):
                self.fail(ErrorKind.TYPE_MISMATCH, path, f"expected URL string, got {_describe(value)}")
                return None
            if not _is_absolute_url(value):
                self.fail(ErrorKind.TYPE_MISMATCH, path, f"expected absolute URL, got {value!r}")
                return None
            return value

        if kind is ValueKind.BOOLEAN:
            if not isinstance(value, bool):
                self.fail(ErrorKind.TYPE_MISMATCH, path, f"expected boolean, got {_describe(value)}")
                return None
            return value

        if kind is ValueKind.UNSIGNED_INTEGER:
            # bool is an int subclass; hex strings are not numbers
            if isinstance(value, bool) or not isinstance(value, int):
                self.fail(ErrorKind.TYPE_MISMATCH, path, f"expected integer, got {_describe(value)}")
                return None
            if value < 0:
                self.fail(ErrorKind.TYPE_MISMATCH, path, f"expected non-negative integer, got {value}")
                return None
            return value

        if kind is ValueKind.OBJECT:
            return self.check_object(value, spec.item_type, path)

        return self.check_mapping(value, spec, path)

    def check_mapping(self, raw: Any, spec: FieldSpec, path: str) -> Optional[Dict[str, Any]]:
        if not isinstance(raw, dict):
            self.fail(
                ErrorKind.TYPE_MISMATCH,
                path,
                f"expected object of {spec.item_type} entries, got {_describe(raw)}",
            )
            return None

        for key in repeated_keys(raw):
            self.fail(
                ErrorKind.INVARIANT_VIOLATION,
                _join(path, key),
                f"key '{key}' appears more than once in '{spec.key}'",
            )

        entries: Dict[str, Any] = {}
        for key, item in raw.items():
            item_path = _join(path, key)
            if spec.chain_id_keys and not _is_chain_id(key):
                self.fail(
                    ErrorKind.TYPE_MISMATCH,
                    item_path,
                    f"expected decimal chain ID key, got {key!r}",
                )
                continue
            if item is None:
                if not spec.nullable_items:
                    self.fail(ErrorKind.TYPE_MISMATCH, item_path, f"{spec.item_type} entry must not be null")
                entries[key] = None
                continue
            entries[key] = self.check_object(item, spec.item_type, item_path)
        return entries

    def check_invariants(self, configuration: Configuration) -> None:
        """Cross-object rules, run once the document is structurally valid."""
        networks = configuration.networks

        declared = set()
        for network in networks.values():
            declared.update(network.contracts)
        for chain_id, network in networks.items():
            missing = declared - set(network.contracts)
            if missing:
                self.fail(
                    ErrorKind.INVARIANT_VIOLATION,
                    f"networks.{chain_id}.contracts",
                    "contracts declared on other networks are missing here "
                    f"(use null for contracts not deployed): {', '.join(sorted(missing))}",
                )

        for chain_id, network in networks.items():
            if not network.testnet and network.relations.mainnet_chain_id is not None:
                self.fail(
                    ErrorKind.INVARIANT_VIOLATION,
                    f"networks.{chain_id}.relations.mainnetChainId",
                    "must be null on a mainnet (testnet is false), "
                    f"got {network.relations.mainnet_chain_id}",
                )

        for chain_id, network in networks.items():
            for name, explorer in (network.explorers or {}).items():
                if explorer is None:
                    continue
                for attribute, token in EXPLORER_PLACEHOLDERS.items():
                    template = getattr(explorer, attribute)
                    if template is not None and token not in template:
                        self.fail(
                            ErrorKind.INVARIANT_VIOLATION,
                            f"networks.{chain_id}.explorers.{name}.{attribute}",
                            f"template {template!r} lacks placeholder '{token}'",
                        )


def validate(raw: Any) -> ValidationResult:
    """
    Validate a decoded configuration document.

    Never raises for bad input; every structural error is collected in one
    pass, and cross-object invariants are checked once the structure is sound.

    Args:
        raw: Generic JSON value (as produced by decode() or json.loads())

    Returns:
        ValidationResult with configuration set on success, errors otherwise
    """
    walker = _Walker()
    configuration = walker.check_object(raw, "Configuration", "")

    if configuration is not None:
        walker.check_invariants(configuration)

    if walker.errors:
        logger.debug("Configuration rejected with %d error(s)", len(walker.errors))
        return ValidationResult(configuration=None, errors=walker.errors)

    logger.debug(
        "Configuration %s validated with %d network(s)",
        configuration.version,
        len(configuration.networks),
    )
    return ValidationResult(configuration=configuration)


def validate_or_raise(raw: Any) -> Configuration:
    """
    Validate a decoded configuration document.

    Args:
        raw: Generic JSON value

    Returns:
        Validated Configuration

    Raises:
        InvalidConfigurationError: If validation fails (carries every error)
    """
    result = validate(raw)
    if not result.ok:
        summary = "; ".join(str(e) for e in result.errors[:5])
        if len(result.errors) > 5:
            summary += f"; ... ({len(result.errors) - 5} more)"
        raise InvalidConfigurationError(f"Invalid network configuration: {summary}", result.errors)
    return result.configuration

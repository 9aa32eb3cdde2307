"""Encoding of validated configurations back into JSON."""

import json
from typing import Any, Dict

from .decoding import plain
from .schema import ValueKind, fields
from .types import Configuration


def _encode_object(obj: Any) -> Dict[str, Any]:
    type_name = obj.schema_type
    result: Dict[str, Any] = {}

    for spec in fields(type_name):
        value = getattr(obj, spec.attribute)
        # Absent optional fields stay absent; explicit nulls are kept
        if value is None and not spec.required and spec.key not in getattr(obj, "null_keys", ()):
            continue
        if value is None:
            result[spec.key] = None
        elif spec.kind is ValueKind.OBJECT:
            result[spec.key] = _encode_object(value)
        elif spec.kind is ValueKind.MAPPING:
            result[spec.key] = {
                key: _encode_object(item) if item is not None else None
                for key, item in value.items()
            }
        else:
            result[spec.key] = value

    # Extension maps never hold standard keys (checked on construction)
    result.update(plain(obj.extensions))
    return result


def encode(configuration: Configuration) -> Dict[str, Any]:
    """
    Convert a Configuration into a generic JSON value.

    Standard fields and extension maps are merged back into one object per
    layer, so extension properties survive a decode/validate/encode cycle.

    Args:
        configuration: Validated configuration

    Returns:
        JSON-compatible dictionary
    """
    return _encode_object(configuration)


def dumps(configuration: Configuration, indent: int = 2) -> str:
    """Serialize a Configuration to JSON text."""
    return json.dumps(encode(configuration), indent=indent)

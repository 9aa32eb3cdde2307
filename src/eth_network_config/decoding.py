"""JSON decoding that keeps track of repeated object keys."""

import json
import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Tuple, Union

logger = logging.getLogger(__name__)


class DecodedObject(dict):
    """
    A decoded JSON object that remembers keys repeated in the source text.

    Plain json.loads() silently keeps the last value of a repeated key. A
    repeated standard field is an extension trying to override that field,
    so the validator needs to see it.

    Attributes:
        repeated_keys: Keys that occurred more than once, in order of first repeat
    """

    def __init__(self, pairs: Iterable[Tuple[str, Any]] = ()):
        super().__init__()
        self.repeated_keys: List[str] = []
        for key, value in pairs:
            if key in self and key not in self.repeated_keys:
                self.repeated_keys.append(key)
            self[key] = value


def repeated_keys(value: Any) -> List[str]:
    """Return keys repeated in the source of a decoded object (empty for plain dicts)."""
    return list(getattr(value, "repeated_keys", []))


def decode(data: Union[str, bytes, bytearray]) -> Any:
    """
    Decode raw JSON text into generic Python values.

    Objects become DecodedObject instances; everything else is what
    json.loads() produces.

    Args:
        data: JSON document as text or UTF-8 bytes

    Returns:
        Decoded JSON value

    Raises:
        ValueError: If data is not valid JSON (json.JSONDecodeError) or not UTF-8
        RecursionError: If data nests too deeply
    """
    value = json.loads(data, object_pairs_hook=DecodedObject)
    logger.debug("Decoded %d bytes of JSON", len(data))
    return value


def plain(value: Any) -> Any:
    """Convert decoded values and read-only mappings back into plain dicts and lists."""
    if isinstance(value, Mapping):
        return {k: plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [plain(v) for v in value]
    return value

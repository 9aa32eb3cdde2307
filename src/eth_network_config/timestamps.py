"""Document timestamp handling for eth-network-config library."""

from datetime import datetime, timezone


def parse_timestamp(value: str) -> datetime:
    """
    Parse the ISO-8601 timestamp of a configuration document.

    Args:
        value: Timestamp such as "2024-03-01T12:00:00Z"

    Returns:
        Timezone-aware datetime (naive values are taken as UTC)

    Raises:
        ValueError: If value is not an ISO-8601 timestamp
    """
    if not isinstance(value, str):
        raise ValueError(f"Timestamp must be a string, got {type(value).__name__}")

    # fromisoformat() only accepts a trailing "Z" from Python 3.11 on
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValueError(f"Invalid ISO-8601 timestamp: {value!r}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

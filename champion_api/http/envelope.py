"""Normalization of the `{"data": ...}` response envelope.

Some endpoints wrap their payload in a `data` key, others return the bare
body. Every service unwraps once, before handing the value to a model.
Collections get a second, per-endpoint step: the caller names the key the
collection lives under and `extract_collection` coerces it to a list.
"""

from typing import Any, List


def unwrap_envelope(value: Any) -> Any:
    """Return the value under `data` if present, otherwise the value itself."""
    if isinstance(value, dict) and "data" in value:
        return value["data"]
    return value


def as_list(value: Any) -> List[Any]:
    """A list is kept as-is; a single object becomes a one-element list."""
    if isinstance(value, list):
        return value
    return [value]


def extract_collection(payload: Any, key: str) -> List[Any]:
    """Pull the collection stored under `key` out of an unwrapped payload.

    Args:
        payload: Already unwrapped response value
        key: Name of the collection field for this endpoint (e.g. "contracts")

    Returns:
        The collection as a list. If the payload carries no `key`, the
        payload itself is treated as the collection.
    """
    if isinstance(payload, dict) and key in payload:
        return as_list(payload[key])
    return as_list(payload)

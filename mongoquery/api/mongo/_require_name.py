"""Validate a collection or index name argument."""

from typing import Any


def _require_name(value: Any, message: str) -> str:
    """Return ``value`` stripped, or raise ValueError(message) if it is not a non-empty string."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(message)
    return value.strip()

"""Read a field from a driver result."""

from collections.abc import Mapping
from typing import Any


def _read_field(raw: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a mapping key or an object attribute."""
    if isinstance(raw, Mapping):
        return raw.get(name, default)
    return getattr(raw, name, default)

"""Type check for dict-like arguments."""

from collections.abc import Mapping
from typing import Any


def _is_dict(value: Any, non_empty: bool = False) -> bool:
    """Check that ``value`` is a mapping (and has content when ``non_empty``)."""
    if not isinstance(value, Mapping):
        return False
    return len(value) > 0 if non_empty else True

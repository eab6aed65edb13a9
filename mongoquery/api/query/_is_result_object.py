"""Shape check for write results."""

from collections.abc import Mapping
from typing import Any


def _is_result_object(raw: Any) -> bool:
    """True for mappings and result objects; False for None, primitives and sequences."""
    if isinstance(raw, Mapping):
        return True
    return raw is not None and not isinstance(raw, (bool, int, float, str, bytes, list, tuple, set))

"""Normalize the result of a ``$count`` aggregation."""

from collections.abc import Mapping
from typing import Any

from ._normalize_count import _normalize_count
from .Outcome import Outcome


def _normalize_count_pipeline(raw: Any) -> Outcome:
    """``[]`` counts as 0, ``[{"count": n}]`` as n, anything else is malformed."""
    if not isinstance(raw, list):
        return Outcome.malformed()
    if not raw:
        return Outcome.empty(0)
    if len(raw) != 1 or not isinstance(raw[0], Mapping):
        return Outcome.malformed()
    return _normalize_count(raw[0].get("count"))

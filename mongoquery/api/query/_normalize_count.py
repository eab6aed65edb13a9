"""Normalize a native count result."""

from typing import Any

from .Outcome import Outcome


def _normalize_count(raw: Any) -> Outcome:
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        return Outcome.malformed()
    return Outcome.success(raw)

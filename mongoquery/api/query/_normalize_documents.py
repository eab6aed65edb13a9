"""Normalize an aggregation result."""

from typing import Any

from .Outcome import Outcome


def _normalize_documents(raw: Any) -> Outcome:
    if not isinstance(raw, list):
        return Outcome.malformed()
    return Outcome.success(raw) if raw else Outcome.empty([])

"""Normalize a single-document lookup."""

from collections.abc import Mapping
from typing import Any

from .Outcome import Outcome


def _normalize_first_document(raw: Any) -> Outcome:
    if not isinstance(raw, list):
        return Outcome.malformed()
    if not raw:
        return Outcome.empty(None)
    if not isinstance(raw[0], Mapping):
        return Outcome.malformed()
    return Outcome.success(raw[0])

"""Sanitize a list of pipeline stages or documents."""

from typing import Any

import bson
from bson.errors import InvalidDocument

from ._is_dict import _is_dict


def _sanitize_stages(items: Any) -> list[Any]:
    """Drop entries that are not non-empty dicts and exact duplicates, keeping order.

    Duplicates are detected on the BSON encoding, so field order and value
    types matter (``{"a": 1}``, ``{"a": 1.0}`` and ``{"a": True}`` are distinct).
    Entries that cannot be encoded are kept as they are.

    Args:
        items: List of candidate stages (or documents)

    Returns:
        Sanitized list; may be empty
    """
    sanitized: list[Any] = []
    seen: set[bytes] = set()
    for item in items:
        if not _is_dict(item, non_empty=True):
            continue
        try:
            key = bson.encode(item)
        except (InvalidDocument, OverflowError):
            sanitized.append(item)
            continue
        if key not in seen:
            seen.add(key)
            sanitized.append(item)
    return sanitized

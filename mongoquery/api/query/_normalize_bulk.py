"""Normalize a bulk write result."""

from typing import Any

from ._is_result_object import _is_result_object
from ._read_field import _read_field
from .BulkResult import BulkResult
from .Outcome import Outcome

_COUNT_FIELDS = ("inserted_count", "matched_count", "modified_count", "deleted_count", "upserted_count")


def _normalize_bulk(raw: Any, expected_inserted: int | None = None) -> Outcome:
    """Turn a driver bulk result into a ``BulkResult``.

    Args:
        raw: Result object or mapping returned by the bulk operator
        expected_inserted: When set, ``inserted_count`` must equal it

    Returns:
        Outcome carrying a BulkResult on success
    """
    if not _is_result_object(raw):
        return Outcome.malformed()
    if _read_field(raw, "acknowledged", True) is False:
        return Outcome.unacknowledged()

    counts: dict[str, int] = {}
    for field in _COUNT_FIELDS:
        value = _read_field(raw, field, 0)
        if value is None:
            value = 0
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return Outcome.malformed()
        counts[field] = value

    upserted_ids = _read_field(raw, "upserted_ids") or {}
    if not isinstance(upserted_ids, dict):
        return Outcome.malformed()

    if expected_inserted is not None and counts["inserted_count"] != expected_inserted:
        return Outcome.malformed("Not all documents were inserted")

    return Outcome.success(BulkResult(acknowledged=True, upserted_ids=upserted_ids, **counts))

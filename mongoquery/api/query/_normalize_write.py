"""Normalize a single write result (delete/update/insert_one)."""

from typing import Any

from ._is_result_object import _is_result_object
from ._read_field import _read_field
from .Outcome import Outcome


def _normalize_write(raw: Any) -> Outcome:
    if not _is_result_object(raw):
        return Outcome.malformed()
    if _read_field(raw, "acknowledged") is not True:
        return Outcome.unacknowledged()
    return Outcome.success(raw)

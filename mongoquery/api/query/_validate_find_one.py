"""Validate find_one arguments."""

from typing import Any

from ._is_dict import _is_dict
from .QueryValidationError import QueryValidationError


def _validate_find_one(query: Any, projection: Any) -> tuple[Any, Any]:
    if query is not None and not _is_dict(query):
        raise QueryValidationError("Query.find_one: If passed, query should be a dict")
    if projection is not None and not _is_dict(projection):
        raise QueryValidationError("Query.find_one: If passed, projection should be a dict")
    return query, projection

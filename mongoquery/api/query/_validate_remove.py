"""Validate remove_one/remove_many arguments."""

from typing import Any

from ._is_dict import _is_dict
from ._validate_options import _validate_options
from .QueryValidationError import QueryValidationError


def _validate_remove(operation: str, query: Any, options: Any) -> tuple[Any, dict[str, Any]]:
    if not _is_dict(query, non_empty=True):
        raise QueryValidationError(f"Query.{operation}: Query should be a dict with content")
    return query, _validate_options(operation, options)

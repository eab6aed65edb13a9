"""Validate update_one/update_many arguments."""

from typing import Any

from ._is_dict import _is_dict
from ._validate_options import _validate_options
from .QueryValidationError import QueryValidationError


def _validate_update(operation: str, query: Any, data: Any, options: Any) -> tuple[Any, Any, dict[str, Any]]:
    """Validate an update.

    ``data`` is either an update-operator dict (``{"$set": {...}}``) or an
    update pipeline (``[{"$set": {...}}, {"$unset": "x"}]``) whose stages are
    all non-empty dicts.
    """
    if not _is_dict(query, non_empty=True):
        raise QueryValidationError(f"Query.{operation}: Query should be a dict with content")
    is_pipeline = isinstance(data, (list, tuple))
    if not _is_dict(data, non_empty=True) and not (is_pipeline and data):
        raise QueryValidationError(f"Query.{operation}: Data should be a dict/list with content")
    options = _validate_options(operation, options)

    if is_pipeline:
        if not all(_is_dict(stage, non_empty=True) for stage in data):
            raise QueryValidationError(f"Query.{operation}: Data pipeline is invalid")
        data = list(data)
    return query, data, options

"""Validate bulk_ops arguments."""

from collections.abc import Callable
from typing import Any

from .QueryValidationError import QueryValidationError


def _validate_bulk_ops(fn: Any, sorted: Any) -> tuple[Callable[..., Any], bool]:
    if not callable(fn):
        raise QueryValidationError("Query.bulk_ops: Fn should be a callable")
    if not isinstance(sorted, bool):
        raise QueryValidationError("Query.bulk_ops: Sorted should be a boolean")
    return fn, sorted

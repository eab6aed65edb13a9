"""Validate the options argument shared by Query methods."""

from typing import Any

from ._is_dict import _is_dict
from .QueryValidationError import QueryValidationError


def _validate_options(operation: str, options: Any) -> dict[str, Any]:
    if options is None:
        return {}
    if not _is_dict(options):
        raise QueryValidationError(f"Query.{operation}: Options should be a dict")
    return dict(options)

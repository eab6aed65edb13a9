"""Validate insert_one arguments."""

from typing import Any

from ._is_dict import _is_dict
from ._validate_options import _validate_options
from .QueryValidationError import QueryValidationError


def _validate_insert_one(document: Any, options: Any) -> tuple[Any, dict[str, Any]]:
    if not _is_dict(document, non_empty=True):
        raise QueryValidationError("Query.insert_one: Document should be a non-empty dict")
    return document, _validate_options("insert_one", options)

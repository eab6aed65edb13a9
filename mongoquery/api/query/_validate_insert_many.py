"""Validate insert_many arguments."""

from typing import Any

from ._sanitize_stages import _sanitize_stages
from ._validate_options import _validate_options
from .QueryValidationError import QueryValidationError


def _validate_insert_many(documents: Any, options: Any) -> tuple[list[Any], dict[str, Any]]:
    if not isinstance(documents, (list, tuple)) or not documents:
        raise QueryValidationError("Query.insert_many: Documents should be a list with content")
    options = _validate_options("insert_many", options)

    sanitized = _sanitize_stages(documents)
    if not sanitized:
        raise QueryValidationError("Query.insert_many: Documents is empty after sanitization")
    return sanitized, options

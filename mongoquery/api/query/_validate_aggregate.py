"""Validate aggregate arguments."""

from typing import Any

from ._sanitize_stages import _sanitize_stages
from ._validate_options import _validate_options
from .QueryValidationError import QueryValidationError


def _validate_aggregate(pipeline: Any, options: Any) -> tuple[list[Any], dict[str, Any]]:
    if not isinstance(pipeline, (list, tuple)) or not pipeline:
        raise QueryValidationError("Query.aggregate: Pipeline should be a list with content")
    options = _validate_options("aggregate", options)

    stages = _sanitize_stages(pipeline)
    if not stages:
        raise QueryValidationError("Query.aggregate: Pipeline is empty after sanitization")
    return stages, options

"""Validate count arguments."""

from typing import Any

from ._is_dict import _is_dict
from ._sanitize_stages import _sanitize_stages
from ._validate_options import _validate_options
from .QueryValidationError import QueryValidationError


def _validate_count(filter: Any, options: Any) -> tuple[Any, dict[str, Any]]:
    """Validate count arguments.

    Returns:
        ``(filter, options)`` where filter is a dict (native count) or a
        sanitized stage list (aggregation count)
    """
    options = _validate_options("count", options)

    if filter is None:
        return {}, options
    if _is_dict(filter):
        return filter, options
    if isinstance(filter, (list, tuple)) and filter:
        stages = _sanitize_stages(filter)
        if stages:
            return stages, options
    raise QueryValidationError("Query.count: Invalid filter passed")

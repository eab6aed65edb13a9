"""Run an aggregation and drain its cursor."""

import inspect
from typing import Any

from ..mongo._is_handle import _is_handle


async def _run_aggregate(collection: Any, pipeline: list[Any], options: dict[str, Any]) -> Any:
    """Run ``pipeline`` and return the raw drained result.

    Works with drivers whose ``aggregate`` returns the cursor directly or an
    awaitable resolving to it. A cursor without ``to_list`` yields ``None``.
    """
    cursor = collection.aggregate(pipeline, **options)
    if inspect.isawaitable(cursor):
        cursor = await cursor
    if not _is_handle(cursor, "to_list"):
        return None
    return await cursor.to_list(None)

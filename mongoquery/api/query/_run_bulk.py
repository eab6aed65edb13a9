"""Bulk orchestration: acquire, populate, execute, normalize."""

import inspect
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ._acquire_collection import _acquire_collection
from ._normalize_bulk import _normalize_bulk
from ._open_bulk_operator import _open_bulk_operator
from .Outcome import Outcome

if TYPE_CHECKING:
    from ..mongo.Mongo import Mongo


async def _run_bulk(
    mongo: "Mongo",
    collection: str,
    fn: Callable[[Any], Any],
    ordered: bool,
    expected_inserted: int | None = None,
    options: dict[str, Any] | None = None,
) -> Outcome:
    """Run one bulk batch.

    ``fn`` receives the operator and may be sync or async; an awaitable result
    is awaited before executing. Exceptions from any step propagate.
    """
    handle = await _acquire_collection(mongo, collection)
    operator = _open_bulk_operator(handle, ordered)

    applied = fn(operator)
    if inspect.isawaitable(applied):
        await applied

    raw = await operator.execute(**(options or {}))
    return _normalize_bulk(raw, expected_inserted)

"""Open a bulk operator on a collection."""

from typing import Any

from .BulkOperator import BulkOperator


def _open_bulk_operator(collection: Any, ordered: bool) -> BulkOperator:
    """Wrap ``collection.bulk_write`` in a BulkOperator.

    Raises:
        RuntimeError: If the collection cannot run bulk writes
    """
    try:
        return BulkOperator(collection, ordered=ordered)
    except TypeError as e:
        raise RuntimeError("Not able to acquire bulk operation") from e

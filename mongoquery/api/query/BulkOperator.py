"""Bulk write operator over ``collection.bulk_write``."""

import inspect
from typing import Any

from pymongo import DeleteMany, DeleteOne, InsertOne, ReplaceOne, UpdateMany, UpdateOne

from ..mongo._is_handle import _is_handle


class BulkOperator:
    """Collects write requests and sends them in one ``bulk_write`` call.

    Request methods return the operator so calls can be chained:

        operator.insert({"a": 1}).update_one({"a": 1}, {"$set": {"b": 2}})
    """

    def __init__(self, collection: Any, ordered: bool = False):
        if not _is_handle(collection, "bulk_write"):
            raise TypeError("BulkOperator: Collection does not support bulk writes")
        self._collection = collection
        self.ordered = ordered
        self._requests: list[Any] = []
        self._executed = False

    def __len__(self) -> int:
        return len(self._requests)

    @property
    def requests(self) -> list[Any]:
        """Copy of the queued requests."""
        return list(self._requests)

    def _add(self, request: Any) -> "BulkOperator":
        if self._executed:
            raise RuntimeError("BulkOperator: Operations already executed")
        self._requests.append(request)
        return self

    def insert(self, document: dict[str, Any]) -> "BulkOperator":
        return self._add(InsertOne(document))

    def update_one(self, filter: dict[str, Any], update: Any, upsert: bool = False) -> "BulkOperator":
        return self._add(UpdateOne(filter, update, upsert=upsert))

    def update_many(self, filter: dict[str, Any], update: Any, upsert: bool = False) -> "BulkOperator":
        return self._add(UpdateMany(filter, update, upsert=upsert))

    def replace_one(self, filter: dict[str, Any], replacement: dict[str, Any], upsert: bool = False) -> "BulkOperator":
        return self._add(ReplaceOne(filter, replacement, upsert=upsert))

    def delete_one(self, filter: dict[str, Any]) -> "BulkOperator":
        return self._add(DeleteOne(filter))

    def delete_many(self, filter: dict[str, Any]) -> "BulkOperator":
        return self._add(DeleteMany(filter))

    async def execute(self, **options: Any) -> Any:
        """Send all queued requests.

        Args:
            **options: Extra ``bulk_write`` keyword options

        Returns:
            Raw driver bulk write result

        Raises:
            RuntimeError: If nothing was queued or the operator already ran
        """
        if self._executed:
            raise RuntimeError("BulkOperator: Operations already executed")
        if not self._requests:
            raise RuntimeError("BulkOperator: No operations to execute")

        self._executed = True
        result = self._collection.bulk_write(list(self._requests), ordered=self.ordered, **options)
        if inspect.isawaitable(result):
            result = await result
        return result

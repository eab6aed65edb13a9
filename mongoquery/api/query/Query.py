"""Query public API: collection-scoped reads, writes and bulk operations."""

from collections.abc import Awaitable, Callable
from typing import Any

from ...utils.get_logger import get_logger
from ..mongo.Mongo import Mongo
from ._acquire_collection import _acquire_collection
from ._count_pipeline import _count_pipeline
from ._find_one_pipeline import _find_one_pipeline
from ._normalize_count import _normalize_count
from ._normalize_count_pipeline import _normalize_count_pipeline
from ._normalize_documents import _normalize_documents
from ._normalize_first_document import _normalize_first_document
from ._normalize_write import _normalize_write
from ._read_field import _read_field
from ._run_aggregate import _run_aggregate
from ._run_bulk import _run_bulk
from ._validate_aggregate import _validate_aggregate
from ._validate_bulk_ops import _validate_bulk_ops
from ._validate_count import _validate_count
from ._validate_find_one import _validate_find_one
from ._validate_insert_many import _validate_insert_many
from ._validate_insert_one import _validate_insert_one
from ._validate_remove import _validate_remove
from ._validate_update import _validate_update
from .BulkResult import BulkResult
from .Outcome import Outcome
from .QueryOperationError import QueryOperationError
from .QueryValidationError import QueryValidationError

logger = get_logger("query")


class Query:
    """Operations scoped to one collection of a Mongo database.

    Every public method validates its arguments synchronously, raising
    ``QueryValidationError`` before any connection is attempted, and returns
    an awaitable for the actual work:

        query = Query(mongo, "users")
        total = await query.count({"active": True})

    Operational failures follow a fixed policy per method: ``count`` and
    ``find_one`` raise ``QueryOperationError``; the rest return a sentinel
    (``[]``, ``False`` or ``None``) and log a warning.
    """

    def __init__(self, mongo: Mongo, collection: str):
        if not isinstance(mongo, Mongo):
            raise QueryValidationError("Query: Expected instance of Mongo")
        if not isinstance(collection, str) or not collection.strip():
            raise QueryValidationError("Query: Expected collection to be a non-empty string")

        self._mongo = mongo
        self._collection = collection.strip()

    @property
    def collection(self) -> str:
        return self._collection

    def __repr__(self) -> str:
        return f"Query(collection={self._collection!r}, mongo={self._mongo.uid!r})"

    def count(self, filter: Any = None, options: dict[str, Any] | None = None) -> Awaitable[int]:
        """Count documents matching a filter.

        Args:
            filter: Query dict (native count) or list of pipeline stages
                (counted through ``$count``); None counts everything
            options: Driver options for ``count_documents``/``aggregate``

        Returns:
            Awaitable resolving to the count

        Raises:
            QueryValidationError: On invalid arguments (immediately)
        """
        filter, options = _validate_count(filter, options)
        return self._count(filter, options)

    async def _count(self, filter: Any, options: dict[str, Any]) -> int:
        try:
            collection = await _acquire_collection(self._mongo, self._collection)
            if isinstance(filter, list):
                raw = await _run_aggregate(collection, _count_pipeline(filter), options)
                outcome = _normalize_count_pipeline(raw)
            else:
                raw = await collection.count_documents(filter, **options)
                outcome = _normalize_count(raw)
        except Exception as e:
            raise QueryOperationError("count", str(e)) from e

        if not outcome.ok:
            raise QueryOperationError("count", outcome.reason)
        return outcome.payload

    def aggregate(self, pipeline: list[dict[str, Any]], options: dict[str, Any] | None = None) -> Awaitable[list[dict[str, Any]]]:
        """Run an aggregation pipeline.

        Stages that are not non-empty dicts and exact duplicates are dropped.
        Resolves to ``[]`` on any operational failure.
        """
        stages, options = _validate_aggregate(pipeline, options)
        return self._aggregate(stages, options)

    async def _aggregate(self, pipeline: list[Any], options: dict[str, Any]) -> list[dict[str, Any]]:
        try:
            collection = await _acquire_collection(self._mongo, self._collection)
            raw = await _run_aggregate(collection, pipeline, options)
        except Exception as e:
            logger.warning(f"Query.aggregate: Failed - {e}")
            return []

        outcome = _normalize_documents(raw)
        if not outcome.ok:
            logger.warning(f"Query.aggregate: Failed - {outcome.reason}")
            return []
        return outcome.payload

    def find_one(
        self, query: dict[str, Any] | None = None, projection: dict[str, Any] | None = None
    ) -> Awaitable[dict[str, Any] | None]:
        """Get the first document matching ``query``, shaped by ``projection``.

        Resolves to None when nothing matches or the result is malformed;
        connection and driver errors raise ``QueryOperationError``.
        """
        query, projection = _validate_find_one(query, projection)
        return self._find_one(query, projection)

    async def _find_one(self, query: Any, projection: Any) -> dict[str, Any] | None:
        try:
            collection = await _acquire_collection(self._mongo, self._collection)
            raw = await _run_aggregate(collection, _find_one_pipeline(query, projection), {})
        except Exception as e:
            raise QueryOperationError("find_one", str(e)) from e

        outcome = _normalize_first_document(raw)
        if outcome.status == "malformed":
            logger.warning(f"Query.find_one: Failed - {outcome.reason}")
        return outcome.payload if outcome.status == "success" else None

    def remove_one(self, query: dict[str, Any], options: dict[str, Any] | None = None) -> Awaitable[bool]:
        query, options = _validate_remove("remove_one", query, options)
        return self._succeeded("remove_one", "delete_one", (query,), options)

    def remove_many(self, query: dict[str, Any], options: dict[str, Any] | None = None) -> Awaitable[bool]:
        query, options = _validate_remove("remove_many", query, options)
        return self._succeeded("remove_many", "delete_many", (query,), options)

    def update_one(self, query: dict[str, Any], data: Any, options: dict[str, Any] | None = None) -> Awaitable[bool]:
        """Update the first document matching ``query``.

        Args:
            query: Non-empty filter dict
            data: Update-operator dict or update pipeline (list of stages)
            options: ``update_one`` keyword options (e.g. ``{"upsert": True}``)

        Returns:
            Awaitable resolving to True on an acknowledged write, else False
        """
        query, data, options = _validate_update("update_one", query, data, options)
        return self._succeeded("update_one", "update_one", (query, data), options)

    def update_many(self, query: dict[str, Any], data: Any, options: dict[str, Any] | None = None) -> Awaitable[bool]:
        query, data, options = _validate_update("update_many", query, data, options)
        return self._succeeded("update_many", "update_many", (query, data), options)

    def insert_one(self, document: dict[str, Any], options: dict[str, Any] | None = None) -> Awaitable[Any]:
        """Insert one document. Resolves to the inserted id, or None on failure."""
        document, options = _validate_insert_one(document, options)
        return self._insert_one(document, options)

    async def _insert_one(self, document: Any, options: dict[str, Any]) -> Any:
        outcome = await self._write("insert_one", "insert_one", (document,), options)
        if outcome is None:
            return None
        return _read_field(outcome.payload, "inserted_id")

    async def _succeeded(self, operation: str, method: str, args: tuple[Any, ...], options: dict[str, Any]) -> bool:
        return await self._write(operation, method, args, options) is not None

    async def _write(self, operation: str, method: str, args: tuple[Any, ...], options: dict[str, Any]) -> Outcome | None:
        try:
            collection = await _acquire_collection(self._mongo, self._collection)
            raw = await getattr(collection, method)(*args, **options)
        except Exception as e:
            logger.warning(f"Query.{operation}: Failed - {e}")
            return None

        outcome = _normalize_write(raw)
        if not outcome.ok:
            logger.warning(f"Query.{operation}: Failed - {outcome.reason}")
            return None
        return outcome

    def insert_many(self, documents: list[dict[str, Any]], options: dict[str, Any] | None = None) -> Awaitable[bool]:
        """Insert documents in one unordered bulk batch.

        Resolves to True only when every sanitized document was inserted.
        """
        documents, options = _validate_insert_many(documents, options)
        return self._insert_many(documents, options)

    async def _insert_many(self, documents: list[Any], options: dict[str, Any]) -> bool:
        def fill(operator: Any) -> None:
            for document in documents:
                operator.insert(document)

        try:
            outcome = await _run_bulk(
                self._mongo,
                self._collection,
                fill,
                ordered=False,
                expected_inserted=len(documents),
                options=options,
            )
        except Exception as e:
            logger.warning(f"Query.insert_many: Failed - {e}")
            return False

        if not outcome.ok:
            logger.warning(f"Query.insert_many: Failed - {outcome.reason}")
            return False
        return True

    def bulk_ops(self, fn: Callable[[Any], Any], sorted: bool = False) -> Awaitable[BulkResult | None]:
        """Run a batch of write requests built by ``fn``.

        Args:
            fn: Sync or async callable receiving a bulk operator
                (``insert``, ``update_one``, ``delete_many``, ...)
            sorted: Execute in order (True) or unordered (False)

        Returns:
            Awaitable resolving to a BulkResult, or None on failure
        """
        fn, sorted = _validate_bulk_ops(fn, sorted)
        return self._bulk_ops(fn, sorted)

    async def _bulk_ops(self, fn: Callable[[Any], Any], ordered: bool) -> BulkResult | None:
        try:
            outcome = await _run_bulk(self._mongo, self._collection, fn, ordered=ordered)
        except Exception as e:
            logger.warning(f"Query.bulk_ops: Failed - {e}")
            return None

        if not outcome.ok:
            logger.warning(f"Query.bulk_ops: Failed - {outcome.reason}")
            return None
        return outcome.payload

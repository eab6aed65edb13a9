"""Async MongoDB data-access layer built on pymongo."""

from .api.mongo import (
    CollectionStructure,
    IndexStructure,
    Mongo,
    MongoConfig,
    MongoConnectError,
    Protocol,
    ReadPreferenceMode,
)
from .api.query import (
    BulkOperator,
    BulkResult,
    Outcome,
    Query,
    QueryOperationError,
    QueryValidationError,
)
from .utils import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    "BulkOperator",
    "BulkResult",
    "CollectionStructure",
    "IndexStructure",
    "Mongo",
    "MongoConfig",
    "MongoConnectError",
    "Outcome",
    "Protocol",
    "Query",
    "QueryOperationError",
    "QueryValidationError",
    "ReadPreferenceMode",
    "configure_logging",
    "get_logger",
]

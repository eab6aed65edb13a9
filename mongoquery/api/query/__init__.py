"""Query API module: collection-scoped reads, writes and bulk operations."""

from .BulkOperator import BulkOperator
from .BulkResult import BulkResult
from .Outcome import Outcome
from .Query import Query
from .QueryOperationError import QueryOperationError
from .QueryValidationError import QueryValidationError

__all__ = [
    "BulkOperator",
    "BulkResult",
    "Outcome",
    "Query",
    "QueryOperationError",
    "QueryValidationError",
]

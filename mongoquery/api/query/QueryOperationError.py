"""Query operational error."""


class QueryOperationError(RuntimeError):
    """Raised by Query methods that surface operational failures instead of returning a sentinel."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Query.{operation}: Failed - {reason}")

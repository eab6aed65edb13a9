"""Query input error."""


class QueryValidationError(ValueError):
    """Raised synchronously when a Query method receives invalid arguments.

    No connection is attempted once this is raised.
    """

"""Database acquisition error."""


class MongoConnectError(RuntimeError):
    """Raised when a live database handle could not be acquired.

    Covers every step (client connect, database select, collection select)
    with one message; the underlying cause is chained as ``__cause__``.
    """

    def __init__(self, message: str = "Mongo.connect: Failed to create database instance"):
        super().__init__(message)

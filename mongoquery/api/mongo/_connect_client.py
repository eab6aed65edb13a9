"""Open an asynchronous MongoDB client pool."""

from typing import Any

from pymongo import AsyncMongoClient


async def _connect_client(uri: str, options: dict[str, Any]) -> AsyncMongoClient:
    """Create a client pool and wait for it to connect.

    Args:
        uri: MongoDB connection URI
        options: Keyword options for ``AsyncMongoClient``

    Returns:
        Connected AsyncMongoClient

    Raises:
        pymongo.errors.PyMongoError: If the connection cannot be established
    """
    client: AsyncMongoClient = AsyncMongoClient(uri, **options)
    await client.aconnect()
    return client

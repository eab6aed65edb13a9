"""Acquire a collection handle from a Mongo instance."""

from typing import TYPE_CHECKING, Any

from ..mongo._is_handle import _is_handle
from ..mongo.MongoConnectError import MongoConnectError

if TYPE_CHECKING:
    from ..mongo.Mongo import Mongo


async def _acquire_collection(mongo: "Mongo", collection: str) -> Any:
    """Connect (lazily) and select ``collection``.

    Raises:
        MongoConnectError: If the database or collection handle is missing or unusable
    """
    try:
        database = await mongo.connect()
        handle = database.get_collection(collection)
    except MongoConnectError:
        raise
    except Exception as e:
        raise MongoConnectError() from e

    if not _is_handle(handle, "aggregate"):
        raise MongoConnectError()
    return handle

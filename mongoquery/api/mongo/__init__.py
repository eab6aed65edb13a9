"""Mongo database wrapper: configuration, connection lifecycle and structure management."""

from .CollectionStructure import CollectionStructure
from .IndexStructure import IndexStructure
from .Mongo import Mongo
from .MongoConfig import MongoConfig
from .MongoConnectError import MongoConnectError
from .Protocol import Protocol
from .ReadPreferenceMode import ReadPreferenceMode

__all__ = [
    "CollectionStructure",
    "IndexStructure",
    "Mongo",
    "MongoConfig",
    "MongoConnectError",
    "Protocol",
    "ReadPreferenceMode",
]

"""Shared fixtures for integration tests.

Runs the package against mongomock through a thin async adapter with the
same surface as pymongo's AsyncMongoClient.
"""

import mongomock
import pytest

from mongoquery.api.mongo.Mongo import Mongo


class AsyncCursor:
    def __init__(self, documents):
        self._documents = documents

    async def to_list(self, length=None):
        return self._documents if length is None else self._documents[:length]


class AsyncCollection:
    """Async facade over a mongomock collection."""

    def __init__(self, collection):
        self._collection = collection

    async def count_documents(self, filter, **options):
        return self._collection.count_documents(filter, **options)

    async def aggregate(self, pipeline, **options):
        return AsyncCursor(list(self._collection.aggregate(pipeline, **options)))

    async def delete_one(self, filter, **options):
        return self._collection.delete_one(filter, **options)

    async def delete_many(self, filter, **options):
        return self._collection.delete_many(filter, **options)

    async def update_one(self, filter, update, **options):
        return self._collection.update_one(filter, update, **options)

    async def update_many(self, filter, update, **options):
        return self._collection.update_many(filter, update, **options)

    async def insert_one(self, document, **options):
        return self._collection.insert_one(document, **options)

    async def bulk_write(self, requests, ordered=True, **options):
        return self._collection.bulk_write(requests, ordered=ordered, **options)

    async def index_information(self):
        return self._collection.index_information()

    async def create_index(self, keys, **options):
        return self._collection.create_index(keys, **options)

    async def drop_index(self, name):
        self._collection.drop_index(name)


class AsyncDatabase:
    def __init__(self, database):
        self._database = database

    def get_collection(self, name):
        return AsyncCollection(self._database[name])

    async def list_collection_names(self, filter=None):
        names = self._database.list_collection_names()
        wanted = (filter or {}).get("name")
        return [name for name in names if wanted is None or name == wanted]

    async def create_collection(self, name):
        return AsyncCollection(self._database.create_collection(name))

    async def drop_collection(self, name):
        self._database.drop_collection(name)
        return {"ok": 1.0}


class AsyncClient:
    def __init__(self, client):
        self._client = client
        self.closed = False

    def get_database(self, name, read_preference=None):
        return AsyncDatabase(self._client[name])

    async def close(self):
        self.closed = True
        self._client.close()


@pytest.fixture
def mongomock_client():
    return mongomock.MongoClient()


@pytest.fixture
def mongo(mongo_config_dict, mongomock_client):
    async def factory(uri, options):
        return AsyncClient(mongomock_client)

    return Mongo(mongo_config_dict, client_factory=factory)


@pytest.fixture
def users(mongomock_client):
    """Raw mongomock collection backing the ``users`` Query."""
    collection = mongomock_client["main"]["users"]
    collection.insert_many(
        [
            {"_id": 1, "name": "Peter", "age": 34, "status": "active"},
            {"_id": 2, "name": "Jake", "age": 28, "status": "active"},
            {"_id": 3, "name": "Bob", "age": 51, "status": "inactive"},
        ]
    )
    return collection

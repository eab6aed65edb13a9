"""Unit test fixtures.

Wires a Mongo wrapper to the recording doubles in mock_mongo.py so tests can
assert on every client, database and collection call.
"""

from dataclasses import dataclass

import pytest
from mock_mongo import MockClient, MockClientFactory, MockCollection, MockDatabase

from mongoquery.api.mongo.Mongo import Mongo
from mongoquery.api.query.Query import Query


@dataclass
class MongoEnv:
    mongo: Mongo
    factory: MockClientFactory
    client: MockClient
    database: MockDatabase
    collection: MockCollection

    def driver_calls(self) -> list:
        """All calls made past the client factory."""
        return self.client.calls + self.database.calls + self.collection.calls


def build_env(config: dict, collection: MockCollection | None = None) -> MongoEnv:
    collection = collection or MockCollection("mycollection")
    database = MockDatabase(collection)
    client = MockClient(database)
    factory = MockClientFactory(client)
    return MongoEnv(
        mongo=Mongo(config, client_factory=factory),
        factory=factory,
        client=client,
        database=database,
        collection=collection,
    )


@pytest.fixture
def make_env(mongo_config_dict):
    """Builder for environments with a custom collection double or config."""

    def _make(collection: MockCollection | None = None, config: dict | None = None) -> MongoEnv:
        return build_env(config or mongo_config_dict, collection)

    return _make


@pytest.fixture
def env(make_env) -> MongoEnv:
    return make_env()


@pytest.fixture
def query(env) -> Query:
    return Query(env.mongo, "mycollection")

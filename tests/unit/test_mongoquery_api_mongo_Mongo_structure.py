"""Unit tests for Mongo collection/index management and bootstrap."""

import asyncio
import logging

import pytest

from mongoquery.api.mongo.MongoConnectError import MongoConnectError

pytestmark = pytest.mark.mongo

USERS = {
    "name": "users",
    "idx": [
        {"name": "email_1", "spec": {"email": 1}, "options": {"unique": True}},
        {"name": "created_-1", "spec": {"created": -1}},
    ],
}


class TestCollections:
    def test_has_collection(self, env):
        env.database.collection_names = ["users"]
        assert asyncio.run(env.mongo.has_collection("users")) is True
        assert asyncio.run(env.mongo.has_collection("orders")) is False
        assert ("list_collection_names", {"name": "users"}) in env.database.calls

    def test_create_collection(self, env):
        assert asyncio.run(env.mongo.create_collection(" users ")) is True
        assert env.database.collection_names == ["users"]

    def test_drop_collection(self, env):
        env.database.collection_names = ["users"]
        assert asyncio.run(env.mongo.drop_collection("users")) is True
        assert env.database.collection_names == []

    @pytest.mark.parametrize("method", ["has_collection", "create_collection", "drop_collection"])
    @pytest.mark.parametrize("name", [None, "", "   ", 5])
    def test_rejects_invalid_name(self, env, method, name):
        with pytest.raises(ValueError, match=f"Mongo.{method}: Collection should be a non-empty string"):
            asyncio.run(getattr(env.mongo, method)(name))
        assert env.factory.calls == []

    def test_connection_failure_propagates(self, env):
        env.factory.mode = "throw"
        with pytest.raises(MongoConnectError):
            asyncio.run(env.mongo.has_collection("users"))


class TestIndexes:
    def test_has_index(self, env):
        env.collection.set_result("index_information", {"_id_": {}, "email_1": {}})
        assert asyncio.run(env.mongo.has_index("users", "email_1")) is True
        assert asyncio.run(env.mongo.has_index("users", "name_1")) is False

    def test_create_index(self, env):
        assert asyncio.run(env.mongo.create_index("users", "email_1", {"email": 1, "created": -1}, {"unique": True}))
        assert env.collection.calls == [
            (
                "create_index",
                {"keys": [("email", 1), ("created", -1)], "options": {"unique": True, "name": "email_1"}},
            ),
        ]

    def test_create_index_name_wins_over_options(self, env):
        asyncio.run(env.mongo.create_index("users", "email_1", {"email": 1}, {"name": "other"}))
        assert env.collection.calls[0][1]["options"] == {"name": "email_1"}

    @pytest.mark.parametrize("spec", [None, {}, {"email": 2}, {"email": True}, {"email": "text"}, [("email", 1)]])
    def test_create_index_rejects_invalid_spec(self, env, spec):
        with pytest.raises(ValueError, match="Mongo.create_index: Invalid spec passed"):
            asyncio.run(env.mongo.create_index("users", "email_1", spec))
        assert env.factory.calls == []

    def test_create_index_rejects_invalid_options(self, env):
        with pytest.raises(ValueError, match="Mongo.create_index: Options should be a dict"):
            asyncio.run(env.mongo.create_index("users", "email_1", {"email": 1}, ["unique"]))

    @pytest.mark.parametrize("method", ["has_index", "create_index", "drop_index"])
    def test_rejects_invalid_index_name(self, env, method):
        args = ("users", "") if method != "create_index" else ("users", "", {"email": 1})
        with pytest.raises(ValueError, match=f"Mongo.{method}: Index Name should be a non-empty string"):
            asyncio.run(getattr(env.mongo, method)(*args))

    def test_drop_index(self, env):
        assert asyncio.run(env.mongo.drop_index("users", "email_1")) is True
        assert env.collection.calls == [("drop_index", "email_1")]

    def test_drop_index_failure_returns_false(self, env, caplog):
        env.collection.set_mode("drop_index", "throw")
        with caplog.at_level(logging.WARNING, logger="mongoquery"):
            assert asyncio.run(env.mongo.drop_index("users", "email_1")) is False
        assert "Mongo.drop_index: Failed to drop email_1 on users" in caplog.text


class TestBootstrap:
    def test_connectivity_check(self, env):
        asyncio.run(env.mongo.bootstrap())
        assert len(env.factory.calls) == 1
        assert [key for key, _ in env.client.calls] == ["get_database", "close"]
        assert env.mongo.is_connected is False

    def test_connectivity_failure_raises(self, env):
        env.factory.mode = "throw"
        with pytest.raises(MongoConnectError):
            asyncio.run(env.mongo.bootstrap())

    def test_creates_missing_structure(self, env):
        asyncio.run(env.mongo.bootstrap([USERS, {"name": "orders"}]))
        assert env.database.collection_names == ["users", "orders"]
        created = [params for key, params in env.collection.calls if key == "create_index"]
        assert created == [
            {"keys": [("email", 1)], "options": {"background": True, "unique": True, "name": "email_1"}},
            {"keys": [("created", -1)], "options": {"background": True, "name": "created_-1"}},
        ]
        assert env.mongo.is_connected is False

    def test_skips_existing_structure(self, env):
        env.database.collection_names = ["users"]
        env.collection.set_result("index_information", {"_id_": {}, "email_1": {}, "created_-1": {}})
        asyncio.run(env.mongo.bootstrap([USERS]))
        assert ("create_collection", "users") not in env.database.calls
        assert [key for key, _ in env.collection.calls if key == "create_index"] == []

    @pytest.mark.parametrize(
        ("structure", "message"),
        [
            ("users", "Mongo.bootstrap: Structure should be a list"),
            ([{"idx": []}], "Mongo.bootstrap: All collection objects need to be valid"),
            ([{"name": "users", "idx": [{"name": "a", "spec": {"a": 2}}]}], "Mongo.bootstrap: All collection objects need to be valid"),
            (
                [{"name": "users", "idx": [{"name": "a", "spec": {"a": 1}}, {"name": "a", "spec": {"b": 1}}]}],
                "Mongo.bootstrap: Ensure all indexes have a unique name",
            ),
        ],
    )
    def test_rejects_invalid_structure(self, env, structure, message):
        with pytest.raises(ValueError, match=message):
            asyncio.run(env.mongo.bootstrap(structure))
        assert env.factory.calls == []

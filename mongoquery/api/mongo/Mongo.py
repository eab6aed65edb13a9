"""Mongo database wrapper (connection manager) public API."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ...utils.get_logger import get_logger
from ._build_uid import _build_uid
from ._build_uri import _build_uri
from ._connect_client import _connect_client
from ._is_handle import _is_handle
from ._require_name import _require_name
from ._validate_structure import _validate_structure
from .MongoConfig import MongoConfig
from .MongoConnectError import MongoConnectError

if TYPE_CHECKING:
    from ..query.Query import Query

logger = get_logger("mongo")

ClientFactory = Callable[[str, dict[str, Any]], Awaitable[Any]]


class Mongo:
    """Owns the process-scoped client pool for one database.

    The client is created on the first successful ``connect()``, torn down by
    ``close()`` and re-created lazily by the next ``connect()``.
    """

    def __init__(self, config: MongoConfig | dict[str, Any], client_factory: ClientFactory | None = None):
        if isinstance(config, MongoConfig):
            self.config = config
        else:
            if not isinstance(config, dict) or not config:
                raise ValueError("Mongo: options should be a dict")
            try:
                self.config = MongoConfig.model_validate(config)
            except ValidationError as e:
                error_list = e.errors() or [{"msg": str(e), "loc": ()}]
                first = error_list[0]
                loc = first.get("loc", ())
                field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
                detail = f"{field}: {first.get('msg', str(e))}" if field else first.get("msg", str(e))
                raise ValueError(f"Mongo: options are invalid - {detail}") from e

        self._client_factory: ClientFactory = client_factory or _connect_client
        self._uri = _build_uri(self.config)
        self._uid = _build_uid(self._uri, self.config.db)
        self._client: Any = None
        self._database: Any = None
        self._lock = asyncio.Lock()

        self._log("Mongo: Instantiated")

    def _log(self, message: str) -> None:
        if self.config.debug:
            logger.info(message)

    @property
    def uri(self) -> str:
        """Connection string built from the configuration."""
        return self._uri

    @property
    def uid(self) -> str:
        """Hashed identifier derived from the connection string and database name."""
        return self._uid

    @property
    def is_connected(self) -> bool:
        return self._client is not None and self._database is not None

    @property
    def is_debug_enabled(self) -> bool:
        return self.config.debug

    @property
    def client_options(self) -> dict[str, Any]:
        """Keyword options passed to the client factory."""
        return {
            "minPoolSize": 1,
            "maxPoolSize": self.config.pool_size,
            "maxConnecting": self.config.pool_size,
            "connectTimeoutMS": 10000,
            "socketTimeoutMS": 0,
            "readPreference": self.config.read_preference.value,
            "retryReads": self.config.retry_reads,
            "retryWrites": self.config.retry_writes,
            "compressors": "zlib",
            "zlibCompressionLevel": 3,
        }

    async def connect(self) -> Any:
        """Return the database handle, establishing the client pool if needed.

        Returns:
            Database handle for the configured database

        Raises:
            MongoConnectError: If the client or the database handle cannot be created
        """
        if self._database is not None:
            return self._database

        async with self._lock:
            if self._database is not None:
                return self._database

            self._log("Mongo.connect: Establishing connection")
            client: Any = None
            try:
                client = await self._client_factory(self._uri, self.client_options)
                if not _is_handle(client, "get_database", "close"):
                    raise MongoConnectError("Mongo.connect: Failed to create client pool")

                database = client.get_database(
                    self.config.db,
                    read_preference=self.config.read_preference.driver_mode,
                )
                if not _is_handle(database, "get_collection"):
                    raise MongoConnectError()
            except Exception as e:
                self._client = None
                self._database = None
                if _is_handle(client, "close"):
                    try:
                        await client.close()
                    except Exception as close_error:
                        logger.warning(f"Mongo.connect: Failed to close partial client - {close_error}")
                self._log(f"Mongo.connect: Failed to connect - {e}")
                raise MongoConnectError() from e

            self._client = client
            self._database = database
            self._log("Mongo.connect: Connection established")
            return database

    async def close(self) -> None:
        """Close the client pool. Failures are logged, state is always cleared.

        Serialized with ``connect`` so a close issued while a connect is in
        flight closes the client that connect produced.
        """
        async with self._lock:
            if self._client is None:
                return

            client = self._client
            self._client = None
            self._database = None
            try:
                self._log("Mongo.close: Closing connection")
                await client.close()
                self._log("Mongo.close: Connection terminated")
            except Exception as e:
                logger.warning(f"Mongo.close: Failed to terminate - {e}")

    async def bootstrap(self, structure: Sequence[Any] | None = None) -> None:
        """Check connectivity and optionally ensure collections and indexes exist.

        Args:
            structure: Optional list of collection definitions, e.g.
                ``[{"name": "users", "idx": [{"name": "email_1", "spec": {"email": 1}}]}]``

        Raises:
            ValueError: If the structure is invalid
            MongoConnectError: If the connectivity check fails
        """
        collections = _validate_structure(structure, "Mongo.bootstrap") if structure else []

        try:
            self._log("Mongo.bootstrap: ------ Connectivity check")
            await self.connect()

            if collections:
                self._log("Mongo.bootstrap: ------ Ensuring structure")
                for struct in collections:
                    if not await self.has_collection(struct.name):
                        await self.create_collection(struct.name)

                    for idx in struct.idx or []:
                        if await self.has_index(struct.name, idx.name):
                            continue
                        await self.create_index(
                            struct.name,
                            idx.name,
                            dict(idx.spec),
                            {"background": True, **(idx.options or {})},
                        )
                self._log("Mongo.bootstrap: ------ Structure ensured")

            await self.close()
            self._log("Mongo.bootstrap: ------ Connectivity success")
        except Exception:
            self._log("Mongo.bootstrap: ------ Connectivity failure")
            raise

    async def has_collection(self, collection: str) -> bool:
        name = _require_name(collection, "Mongo.has_collection: Collection should be a non-empty string")

        database = await self.connect()
        result = await database.list_collection_names(filter={"name": name})
        if not isinstance(result, list):
            raise RuntimeError("Mongo.has_collection: Unexpected result")

        exists = len(result) > 0
        self._log(f"Mongo.has_collection: {name} - {'exists' if exists else 'does not exist'}")
        return exists

    async def create_collection(self, collection: str) -> bool:
        name = _require_name(collection, "Mongo.create_collection: Collection should be a non-empty string")

        database = await self.connect()
        self._log(f"Mongo.create_collection: Creating collection - {name}")
        result = await database.create_collection(name)
        return _is_handle(result, "insert_one")

    async def drop_collection(self, collection: str) -> bool:
        name = _require_name(collection, "Mongo.drop_collection: Collection should be a non-empty string")

        database = await self.connect()
        self._log(f"Mongo.drop_collection: Dropping collection - {name}")
        result = await database.drop_collection(name)
        return bool(result)

    async def has_index(self, collection: str, name: str) -> bool:
        col_name = _require_name(collection, "Mongo.has_index: Collection should be a non-empty string")
        idx_name = _require_name(name, "Mongo.has_index: Index Name should be a non-empty string")

        database = await self.connect()
        info = await database.get_collection(col_name).index_information()
        exists = isinstance(info, dict) and idx_name in info
        self._log(f"Mongo.has_index: {col_name} ix:{idx_name} - {'exists' if exists else 'does not exist'}")
        return exists

    async def create_index(
        self,
        collection: str,
        name: str,
        spec: dict[str, int],
        options: dict[str, Any] | None = None,
    ) -> bool:
        """Create an index on a collection.

        Args:
            collection: Collection to create the index for
            name: Name of the index
            spec: Key specification, e.g. ``{"email": 1, "created": -1}``
            options: Extra ``create_index`` options (e.g. ``{"unique": True}``)

        Returns:
            True if the driver reported the created index name
        """
        col_name = _require_name(collection, "Mongo.create_index: Collection should be a non-empty string")
        idx_name = _require_name(name, "Mongo.create_index: Index Name should be a non-empty string")
        if (
            not isinstance(spec, dict)
            or not spec
            or not all(not isinstance(v, bool) and v in (1, -1) for v in spec.values())
        ):
            raise ValueError("Mongo.create_index: Invalid spec passed")
        if options is None:
            options = {}
        if not isinstance(options, dict):
            raise ValueError("Mongo.create_index: Options should be a dict")

        database = await self.connect()
        self._log(f"Mongo.create_index: Creating index {idx_name} on {col_name}")
        result = await database.get_collection(col_name).create_index(
            list(spec.items()),
            **{**options, "name": idx_name},
        )
        return isinstance(result, str) and len(result) > 0

    async def drop_index(self, collection: str, name: str) -> bool:
        col_name = _require_name(collection, "Mongo.drop_index: Collection should be a non-empty string")
        idx_name = _require_name(name, "Mongo.drop_index: Index Name should be a non-empty string")

        database = await self.connect()
        self._log(f"Mongo.drop_index: Dropping index {idx_name} on {col_name}")
        try:
            await database.get_collection(col_name).drop_index(idx_name)
        except Exception as e:
            logger.warning(f"Mongo.drop_index: Failed to drop {idx_name} on {col_name} - {e}")
            return False
        return True

    def query(self, collection: str) -> "Query":
        """Get a Query bound to one collection of this database."""
        from ..query.Query import Query

        name = _require_name(collection, "Mongo.query: Collection should be a non-empty string")
        return Query(self, name)

    def aggregate(self, collection: str, pipeline: list[dict[str, Any]]) -> Awaitable[list[dict[str, Any]]]:
        """Run an aggregation pipeline against a collection.

        Same contract as ``Query.aggregate``: invalid input raises immediately,
        operational failures resolve to an empty list.
        """
        from ..query.Query import Query

        name = _require_name(collection, "Mongo.aggregate: Collection should be a non-empty string")
        return Query(self, name).aggregate(pipeline)

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from .exceptions import StoreError

logger = logging.getLogger(__name__)

# API collection name -> MongoDB collection name (mongoose pluralized model names)
MONGO_COLLECTIONS = {
    "events": "events",
    "news": "news",
    "team-members": "teammembers",
}


class DocumentStore(Protocol):
    async def open(self) -> None:  # pragma: no cover - interface
        ...

    async def close(self) -> None:  # pragma: no cover - interface
        ...

    async def find_all(self, collection: str) -> List[Dict[str, Any]]:  # pragma: no cover - interface
        ...

    async def insert(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:  # pragma: no cover - interface
        ...

    async def delete(self, collection: str, doc_id: str) -> bool:  # pragma: no cover - interface
        ...


def _with_str_id(doc: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(doc)
    if isinstance(out.get("_id"), ObjectId):
        out["_id"] = str(out["_id"])
    return out


class MemoryStore:
    """Process-local store with the same id scheme as MongoDB. Data is lost on exit."""

    def __init__(self) -> None:
        self._data: Dict[str, Dict[str, Dict[str, Any]]] = {}

    async def open(self) -> None:
        return None

    async def close(self) -> None:
        return None

    async def find_all(self, collection: str) -> List[Dict[str, Any]]:
        return [dict(d) for d in self._data.get(collection, {}).values()]

    async def insert(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        doc = dict(document)
        doc["_id"] = str(ObjectId())
        self._data.setdefault(collection, {})[doc["_id"]] = doc
        return dict(doc)

    async def delete(self, collection: str, doc_id: str) -> bool:
        return self._data.get(collection, {}).pop(doc_id, None) is not None


class MongoStore:
    """
    MongoDB-backed store (motor). Connection is opened by `open()` and released by
    `close()`; the API server ties both to its lifespan.
    """

    def __init__(self, uri: str, db_name: str) -> None:
        self._uri = uri
        self._db_name = db_name
        self._client: Optional[AsyncIOMotorClient] = None

    async def open(self) -> None:
        if self._client is not None:
            return
        self._client = AsyncIOMotorClient(self._uri)
        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            self._client.close()
            self._client = None
            raise StoreError(f"MongoDB connection error: {e}") from e
        logger.info("Connected to MongoDB database %r", self._db_name)

    async def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")

    def _collection(self, collection: str):
        if self._client is None:
            raise StoreError("MongoStore is not open")
        return self._client[self._db_name][MONGO_COLLECTIONS.get(collection, collection)]

    async def find_all(self, collection: str) -> List[Dict[str, Any]]:
        try:
            docs = await self._collection(collection).find().to_list(length=None)
        except PyMongoError as e:
            raise StoreError(f"Failed to read {collection}: {e}") from e
        return [_with_str_id(d) for d in docs]

    async def insert(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        doc = dict(document)
        try:
            await self._collection(collection).insert_one(doc)
        except PyMongoError as e:
            raise StoreError(f"Failed to insert into {collection}: {e}") from e
        return _with_str_id(doc)

    async def delete(self, collection: str, doc_id: str) -> bool:
        try:
            oid = ObjectId(doc_id)
        except (InvalidId, TypeError):
            return False
        try:
            result = await self._collection(collection).delete_one({"_id": oid})
        except PyMongoError as e:
            raise StoreError(f"Failed to delete from {collection}: {e}") from e
        return result.deleted_count > 0

# portfolio/crud/resource_crud.py
"""Document access shared by the collection-backed resources.

Every method returns serialized documents (``_id`` exposed as ``id``) and
wraps driver failures into :class:`PersistenceError` so route handlers only
deal with "found", "not found" and domain errors.
"""
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from portfolio.core.exceptions import PersistenceError
from portfolio.serialize import serialize_doc, serialize_list


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@contextmanager
def store_operation(name: str):
    try:
        yield
    except (PyMongoError, InvalidId) as e:
        raise PersistenceError(name, e) from e


class ResourceRepository:
    def __init__(self, collection, resource: str):
        self.collection = collection
        self.resource = resource

    async def find_many(self, query: Optional[Dict[str, Any]] = None) -> List[dict]:
        with store_operation(f"list {self.resource}"):
            cursor = self.collection.find(query or {}).sort("createdAt", ASCENDING)
            docs = await cursor.to_list(length=None)
        return serialize_list(docs)

    async def find_one(self, query: Dict[str, Any]) -> Optional[dict]:
        with store_operation(f"find {self.resource}"):
            doc = await self.collection.find_one(query)
        return serialize_doc(doc)

    async def find_by_id(self, doc_id: str) -> Optional[dict]:
        with store_operation(f"get {self.resource}"):
            doc = await self.collection.find_one({"_id": ObjectId(doc_id)})
        return serialize_doc(doc)

    async def create(self, data: Dict[str, Any]) -> dict:
        now = utcnow()
        doc = {**data, "createdAt": now, "updatedAt": now}
        with store_operation(f"create {self.resource}"):
            result = await self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return serialize_doc(doc)

    async def update_by_id(self, doc_id: str, data: Dict[str, Any]) -> Optional[dict]:
        with store_operation(f"update {self.resource}"):
            doc = await self.collection.find_one_and_update(
                {"_id": ObjectId(doc_id)},
                {"$set": {**data, "updatedAt": utcnow()}},
                return_document=ReturnDocument.AFTER,
            )
        return serialize_doc(doc)

    async def delete_by_id(self, doc_id: str) -> bool:
        with store_operation(f"delete {self.resource}"):
            result = await self.collection.delete_one({"_id": ObjectId(doc_id)})
        return result.deleted_count > 0

# portfolio/crud/profile_crud.py
from typing import Any, Dict, Optional, Tuple

from pymongo import ReturnDocument

from portfolio.crud.resource_crud import store_operation, utcnow
from portfolio.serialize import serialize_doc

# The profile lives under a fixed key so an upsert can never create a second one.
PROFILE_ID = "profile"


class ProfileRepository:
    def __init__(self, collection):
        self.collection = collection

    async def get(self) -> Optional[dict]:
        with store_operation("get profile"):
            doc = await self.collection.find_one({"_id": PROFILE_ID})
        return serialize_doc(doc)

    async def upsert(self, data: Dict[str, Any]) -> Tuple[dict, bool]:
        """Create the profile or update it in place. Returns ``(doc, created)``."""
        now = utcnow()
        with store_operation("upsert profile"):
            result = await self.collection.update_one(
                {"_id": PROFILE_ID},
                {"$set": {**data, "updatedAt": now}, "$setOnInsert": {"createdAt": now}},
                upsert=True,
            )
            doc = await self.collection.find_one({"_id": PROFILE_ID})
        return serialize_doc(doc), result.upserted_id is not None

    async def update(self, data: Dict[str, Any]) -> Optional[dict]:
        with store_operation("update profile"):
            doc = await self.collection.find_one_and_update(
                {"_id": PROFILE_ID},
                {"$set": {**data, "updatedAt": utcnow()}},
                return_document=ReturnDocument.AFTER,
            )
        return serialize_doc(doc)

    async def delete(self) -> bool:
        with store_operation("delete profile"):
            result = await self.collection.delete_one({"_id": PROFILE_ID})
        return result.deleted_count > 0

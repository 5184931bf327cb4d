# wiki_api/db/mongo.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Literal, Optional

from pymongo import AsyncMongoClient

from wiki_api.config import MONGODB_COLLECTION, MONGODB_DATABASE, MONGODB_URL


logger = logging.getLogger("wiki_api.db")

UpdateMode = Literal["replace", "merge"]


class ArticleStore:
    """Document store for the articles collection.

    Thin async wrapper over a pymongo collection. Errors raised by the
    driver (``pymongo.errors.PyMongoError``) are propagated unchanged;
    the HTTP layer decides how to report them.
    """

    def __init__(self, collection: Any, client: Optional[AsyncMongoClient] = None) -> None:
        self.collection = collection
        self._client = client

    @classmethod
    def connect(
        cls,
        url: str = MONGODB_URL,
        database: str = MONGODB_DATABASE,
        collection: str = MONGODB_COLLECTION,
    ) -> "ArticleStore":
        # The client connects lazily on the first operation
        client: AsyncMongoClient = AsyncMongoClient(url)
        logger.info(
            "MongoDB client created",
            extra={"event": "db_connect", "database": database, "collection": collection},
        )
        return cls(client[database][collection], client=client)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
            logger.info("MongoDB client closed", extra={"event": "db_close"})

    async def find_many(self, filter_dict: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        cursor = self.collection.find(filter_dict or {})
        return await cursor.to_list()

    async def find_one(self, filter_dict: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one(filter_dict)

    async def insert_one(self, document: Dict[str, Any]) -> Any:
        result = await self.collection.insert_one(document)
        return result.inserted_id

    async def update_one(
        self,
        filter_dict: Dict[str, Any],
        changes: Dict[str, Any],
        mode: UpdateMode = "merge",
    ) -> int:
        """Update the first document matching ``filter_dict``.

        ``replace`` swaps the whole document for ``changes`` (the store keeps
        only ``_id``); ``merge`` sets just the given fields. Returns the
        number of matched documents.
        """
        if mode == "replace":
            result = await self.collection.replace_one(filter_dict, changes)
        elif mode == "merge":
            # MongoDB rejects an empty $set, nothing to change either way
            if not changes:
                return 0
            result = await self.collection.update_one(filter_dict, {"$set": changes})
        else:
            raise ValueError(f"Unknown update mode: {mode!r}")
        return result.matched_count

    async def delete_one(self, filter_dict: Dict[str, Any]) -> int:
        result = await self.collection.delete_one(filter_dict)
        return result.deleted_count

    async def delete_many(self, filter_dict: Optional[Dict[str, Any]] = None) -> int:
        result = await self.collection.delete_many(filter_dict or {})
        return result.deleted_count

"""
MongoPostStore

MongoDB operations for the 'blogposts' collection via Motor.

Document layout:
- _id: ObjectId (MongoDB auto-generated)
- title, content, author: str
- created: datetime (UTC)

Writes to a single document are atomic, so concurrent updates to the same
post resolve last-write-wins without extra locking.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from blogapi.exceptions import StoreError
from blogapi.schemas import BlogPost, NewPost
from blogapi.storage.base import PostStore, filter_changes

logger = logging.getLogger(__name__)


def _to_object_id(post_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(post_id)
    except (InvalidId, TypeError):
        return None


def _to_post(document: Dict[str, Any]) -> BlogPost:
    return BlogPost(
        id=str(document["_id"]),
        title=document["title"],
        content=document["content"],
        author=document["author"],
        created=document["created"],
    )


class MongoPostStore(PostStore):
    """PostStore backed by a Motor collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def list(self) -> List[BlogPost]:
        try:
            cursor = self.collection.find({}).sort("_id", 1)
            return [_to_post(doc) async for doc in cursor]
        except PyMongoError as e:
            logger.error(f"Failed to list posts: {e}", exc_info=True)
            raise StoreError(f"Failed to list posts: {e}")

    async def insert(self, post: NewPost) -> BlogPost:
        document = post.model_dump()
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            logger.error(f"Failed to insert post: {e}", exc_info=True)
            raise StoreError(f"Failed to insert post: {e}")

        document["_id"] = result.inserted_id
        logger.debug(f"Inserted post {result.inserted_id}")
        return _to_post(document)

    async def insert_many(self, posts: List[NewPost]) -> List[BlogPost]:
        if not posts:
            return []
        documents = [post.model_dump() for post in posts]
        try:
            result = await self.collection.insert_many(documents)
        except PyMongoError as e:
            logger.error(f"Failed to insert posts: {e}", exc_info=True)
            raise StoreError(f"Failed to insert posts: {e}")

        for document, inserted_id in zip(documents, result.inserted_ids):
            document["_id"] = inserted_id
        return [_to_post(doc) for doc in documents]

    async def find_by_id(self, post_id: str) -> Optional[BlogPost]:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        try:
            document = await self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"Failed to fetch post {post_id}: {e}", exc_info=True)
            raise StoreError(f"Failed to fetch post: {e}")

        return _to_post(document) if document else None

    async def update_by_id(
        self, post_id: str, changes: Dict[str, Any]
    ) -> Optional[BlogPost]:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        updates = filter_changes(changes)
        if not updates:
            return await self.find_by_id(post_id)

        try:
            document = await self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": updates},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Failed to update post {post_id}: {e}", exc_info=True)
            raise StoreError(f"Failed to update post: {e}")

        return _to_post(document) if document else None

    async def delete_by_id(self, post_id: str) -> bool:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return False

        try:
            result = await self.collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"Failed to delete post {post_id}: {e}", exc_info=True)
            raise StoreError(f"Failed to delete post: {e}")

        return result.deleted_count == 1

    async def count(self) -> int:
        try:
            return await self.collection.count_documents({})
        except PyMongoError as e:
            raise StoreError(f"Failed to count posts: {e}")

    async def ping(self) -> bool:
        try:
            await self.collection.database.command("ping")
            return True
        except PyMongoError:
            return False

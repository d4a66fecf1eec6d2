"""In-process PostStore used by tests and `--store memory` runs."""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId

from blogapi.schemas import BlogPost, NewPost
from blogapi.storage.base import PostStore, filter_changes

logger = logging.getLogger(__name__)


class InMemoryPostStore(PostStore):
    """Dict-backed store. Ids are ObjectId hex strings like the Mongo backend."""

    def __init__(self):
        self._posts: Dict[str, BlogPost] = {}

    async def list(self) -> List[BlogPost]:
        return [post.model_copy() for post in self._posts.values()]

    async def insert(self, post: NewPost) -> BlogPost:
        post_id = str(ObjectId())
        stored = BlogPost(id=post_id, **post.model_dump())
        self._posts[post_id] = stored
        logger.debug(f"Inserted post {post_id}")
        return stored.model_copy()

    async def insert_many(self, posts: List[NewPost]) -> List[BlogPost]:
        return [await self.insert(post) for post in posts]

    async def find_by_id(self, post_id: str) -> Optional[BlogPost]:
        post = self._posts.get(post_id)
        return post.model_copy() if post else None

    async def update_by_id(
        self, post_id: str, changes: Dict[str, Any]
    ) -> Optional[BlogPost]:
        current = self._posts.get(post_id)
        if current is None:
            return None

        updated = current.model_copy(update=filter_changes(changes))
        self._posts[post_id] = updated
        return updated.model_copy()

    async def delete_by_id(self, post_id: str) -> bool:
        return self._posts.pop(post_id, None) is not None

    async def count(self) -> int:
        return len(self._posts)

    def clear(self) -> None:
        self._posts.clear()

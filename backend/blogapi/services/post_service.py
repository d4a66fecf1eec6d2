"""Blog post resource service.

Mediates between HTTP handlers and the PostStore: required-field checks,
author normalization, partial-update merging and not-found handling.
"""

import logging
from typing import Any, Dict, List

from blogapi.exceptions import NotFoundError, ValidationError
from blogapi.schemas import (
    AuthorName,
    BlogPost,
    BlogPostCreate,
    BlogPostUpdate,
    NewPost,
)
from blogapi.storage.base import UPDATABLE_FIELDS, PostStore

logger = logging.getLogger(__name__)


def normalize_author(author: str | AuthorName) -> str:
    """Collapse either author form into the flat display string."""
    if isinstance(author, AuthorName):
        return author.display_name
    return author


def _require_text(field: str, value: Any) -> None:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Missing `{field}` in request body")


class BlogPostService:
    """CRUD operations on blog posts."""

    def __init__(self, store: PostStore):
        self.store = store

    async def list_posts(self) -> List[BlogPost]:
        return await self.store.list()

    async def get_post(self, post_id: str) -> BlogPost:
        post = await self.store.find_by_id(post_id)
        if post is None:
            raise NotFoundError(f"Blog post {post_id} not found")
        return post

    async def create_post(self, data: BlogPostCreate) -> BlogPost:
        author = normalize_author(data.author)
        for field, value in (
            ("title", data.title),
            ("content", data.content),
            ("author", author),
        ):
            _require_text(field, value)

        post = await self.store.insert(
            NewPost(title=data.title, content=data.content, author=author)
        )
        logger.info(f"Created blog post {post.id}: {post.title!r}")
        return post

    async def update_post(self, post_id: str, data: BlogPostUpdate) -> BlogPost:
        """Merge the supplied fields into the stored post.

        Fields left out of the request keep their stored values. A body id,
        when present, must match the path id.
        """
        supplied = data.model_dump(exclude_unset=True)

        body_id = supplied.pop("id", None)
        if body_id is not None and body_id != post_id:
            raise ValidationError(
                f"Request path id ({post_id}) and request body id "
                f"({body_id}) must match"
            )

        changes: Dict[str, Any] = {}
        for field in UPDATABLE_FIELDS:
            if field not in supplied:
                continue
            value = getattr(data, field)
            if field == "author" and value is not None:
                value = normalize_author(value)
            _require_text(field, value)
            changes[field] = value

        post = await self.store.update_by_id(post_id, changes)
        if post is None:
            raise NotFoundError(f"Blog post {post_id} not found")

        logger.info(f"Updated blog post {post_id}: {sorted(changes)}")
        return post

    async def delete_post(self, post_id: str) -> None:
        deleted = await self.store.delete_by_id(post_id)
        if not deleted:
            raise NotFoundError(f"Blog post {post_id} not found")
        logger.info(f"Deleted blog post {post_id}")

"""
PostStore Abstract Class

Storage capability for blog posts. The resource service only talks to this
interface, so any document store can back the API.

Methods:
- list() -> List[BlogPost]: Every stored post
- insert(post: NewPost) -> BlogPost: Persist, assigning a fresh id
- find_by_id(post_id: str) -> Optional[BlogPost]
- update_by_id(post_id: str, changes: Dict) -> Optional[BlogPost]
- delete_by_id(post_id: str) -> bool
- ping() -> bool: Backend health
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from blogapi.schemas import BlogPost, NewPost

# Fields an update may change. id and created are immutable.
UPDATABLE_FIELDS = ("title", "content", "author")


class PostStore(ABC):
    """Abstract async store for blog posts."""

    @abstractmethod
    async def list(self) -> List[BlogPost]:
        pass

    @abstractmethod
    async def insert(self, post: NewPost) -> BlogPost:
        pass

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[BlogPost]:
        """Return the post, or None if the id is unknown or malformed."""
        pass

    @abstractmethod
    async def update_by_id(
        self, post_id: str, changes: Dict[str, Any]
    ) -> Optional[BlogPost]:
        """Apply changes to the stored post and return the updated post.

        Only keys in UPDATABLE_FIELDS are applied. Returns None if the id
        is unknown.
        """
        pass

    @abstractmethod
    async def delete_by_id(self, post_id: str) -> bool:
        """Remove the post. Returns False if the id is unknown."""
        pass

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        pass


def filter_changes(changes: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys an update is not allowed to touch."""
    return {key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}

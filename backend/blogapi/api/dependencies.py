"""
FastAPI dependency injection for the post store and service.
"""

from fastapi import Depends, Request

from blogapi.services.post_service import BlogPostService
from blogapi.storage.base import PostStore


def get_store(request: Request) -> PostStore:
    """
    FastAPI dependency that provides the store attached at startup.

    Raises:
        RuntimeError: if the app lifespan has not attached a store
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Post store not initialized")
    return store


def get_post_service(store: PostStore = Depends(get_store)) -> BlogPostService:
    return BlogPostService(store)

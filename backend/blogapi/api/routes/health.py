"""Health and root endpoints."""

from typing import Dict

from fastapi import APIRouter, Depends, Request

from blogapi import __version__
from blogapi.api.dependencies import get_store
from blogapi.storage.base import PostStore

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    request: Request,
    store: PostStore = Depends(get_store),
) -> Dict[str, str]:
    """
    Health check endpoint for load balancers and monitoring.

    Returns:
        dict: Health status of the application and database
    """
    db_connected = await store.ping()

    return {
        "status": "healthy" if db_connected else "degraded",
        "service": "blogapi",
        "version": __version__,
        "database": "connected" if db_connected else "disconnected",
        "environment": request.app.state.settings.environment,
    }


@router.get("/", tags=["Root"])
async def root() -> Dict[str, str]:
    """API information."""
    return {
        "name": "Blog API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "posts": "/posts",
    }

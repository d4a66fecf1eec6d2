"""API routes module."""

from blogapi.api.routes.health import router as health_router
from blogapi.api.routes.posts import router as posts_router

__all__ = ["health_router", "posts_router"]

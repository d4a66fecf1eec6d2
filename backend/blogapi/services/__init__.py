"""Services module."""

from blogapi.services.post_service import BlogPostService, normalize_author

__all__ = ["BlogPostService", "normalize_author"]

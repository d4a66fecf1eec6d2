"""Pydantic schemas for blog posts.

BlogPost is the record shape shared by every PostStore backend and the
HTTP responses. BlogPostCreate and BlogPostUpdate are request bodies.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class AuthorName(BaseSchema):
    """Structured author name, accepted on input only."""

    first_name: str = Field(alias="firstName")
    last_name: str = Field(default="", alias="lastName")

    @property
    def display_name(self) -> str:
        return f"{self.first_name.strip()} {self.last_name.strip()}".strip()


class NewPost(BaseSchema):
    """Validated fields for a post that has not been stored yet."""

    title: str
    content: str
    author: str
    created: datetime = Field(default_factory=lambda: utc_now())


class BlogPost(BaseSchema):
    """A stored blog post as returned by the API."""

    id: str
    title: str
    content: str
    author: str
    created: datetime


class BlogPostCreate(BaseSchema):
    """Request body for POST /posts."""

    title: str
    content: str
    author: str | AuthorName


class BlogPostUpdate(BaseSchema):
    """Request body for PUT /posts/{id}. Every field is optional."""

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: str | AuthorName | None = None


def utc_now() -> datetime:
    """Current UTC time at millisecond precision, the resolution MongoDB keeps."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)

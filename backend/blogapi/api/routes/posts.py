"""Blog post API routes."""

from fastapi import APIRouter, Depends, Response, status

from blogapi.api.dependencies import get_post_service
from blogapi.schemas import BlogPost, BlogPostCreate, BlogPostUpdate
from blogapi.services.post_service import BlogPostService

router = APIRouter(prefix="/posts", tags=["Posts"])


@router.get("", response_model=list[BlogPost])
async def list_posts(service: BlogPostService = Depends(get_post_service)):
    """List every stored blog post."""
    return await service.list_posts()


@router.get("/{post_id}", response_model=BlogPost)
async def get_post(post_id: str, service: BlogPostService = Depends(get_post_service)):
    """Get a single blog post."""
    return await service.get_post(post_id)


@router.post("", response_model=BlogPost, status_code=status.HTTP_201_CREATED)
async def create_post(
    data: BlogPostCreate,
    service: BlogPostService = Depends(get_post_service),
):
    """Create a blog post. Author may be a string or {firstName, lastName}."""
    return await service.create_post(data)


@router.put("/{post_id}", response_model=BlogPost)
async def update_post(
    post_id: str,
    data: BlogPostUpdate,
    service: BlogPostService = Depends(get_post_service),
):
    """Update the supplied fields of a blog post and return the result."""
    return await service.update_post(post_id, data)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    service: BlogPostService = Depends(get_post_service),
) -> Response:
    await service.delete_post(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

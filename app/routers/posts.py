import logging
from typing import Optional

from fastapi import APIRouter, Depends

from app import dependencies as deps
from app.errors import PostNotFoundError, PostStoreError
from app.schemas.blog import PostCreate, PostDetail, PostPage
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=PostPage)
def list_posts(
    page: Optional[int] = None,
    limit: Optional[int] = None,
    tag: Optional[str] = None,
    search: Optional[str] = None,
    service: PostsService = Depends(deps.get_posts_service),
):
    """List published posts, newest first."""
    return service.list_published_posts(page=page, limit=limit, tag=tag, search=search)


@router.get("/posts/{slug}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single published post by slug."""
    try:
        return service.get_published_post(slug)
    except PostStoreError as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise PostNotFoundError(slug) from e


@router.post("/posts", response_model=PostDetail)
def create_post(
    payload: PostCreate,
    service: PostsService = Depends(deps.get_posts_service),
):
    return service.create_post(payload)

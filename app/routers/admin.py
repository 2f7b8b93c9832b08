import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app import dependencies as deps
from app.errors import PostNotFoundError, PostStoreError
from app.schemas.blog import PostDetail, PostPage, PostUpdate
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

# Access control for these routes belongs to whatever sits in front of the app.
router = APIRouter()


def _int_or_none(value: Optional[str]) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@router.get("/posts", response_model=PostPage)
def list_all_posts(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    tag: Optional[str] = None,
    search: Optional[str] = None,
    service: PostsService = Depends(deps.get_posts_service),
):
    """List every post, drafts included.

    Unparseable ``page``/``limit`` values fall back to the defaults.
    """
    return service.list_all_posts(
        page=_int_or_none(page), limit=_int_or_none(limit), tag=tag, search=search
    )


@router.get("/posts/{post_id}", response_model=PostDetail)
def get_post(
    post_id: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        return service.get_post(post_id)
    except PostStoreError as e:
        logger.error(f"Unexpected error retrieving post {post_id}: {e}")
        raise PostNotFoundError(post_id) from e


@router.put("/posts/{post_id}", response_model=PostDetail)
def update_post(
    post_id: str,
    payload: PostUpdate,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Merge the supplied fields into an existing post."""
    try:
        return service.update_post(post_id, payload)
    except PostStoreError as e:
        logger.error(f"Unexpected error updating post {post_id}: {e}")
        raise PostNotFoundError(post_id) from e


@router.delete("/posts/{post_id}", status_code=204)
def delete_post(
    post_id: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        service.delete_post(post_id)
    except PostStoreError as e:
        logger.error(f"Unexpected error deleting post {post_id}: {e}")
        raise PostNotFoundError(post_id) from e
    return Response(status_code=204)

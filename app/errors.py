import logging

from fastapi import FastAPI, Request
from fastapi.responses import Response

logger = logging.getLogger(__name__)


class PostsError(Exception):
    """Base error for the posts service."""


class PostNotFoundError(PostsError):
    """No post matched the id or slug, or a write touched zero rows."""

    def __init__(self, key: str):
        super().__init__(f"Post not found: {key}")
        self.key = key


class PostStoreError(PostsError):
    """The database rejected or failed a statement."""


async def post_not_found_handler(request: Request, exc: PostNotFoundError):
    return Response(status_code=404)


async def post_store_error_handler(request: Request, exc: PostStoreError):
    logger.error(f"Database failure on {request.method} {request.url.path}: {exc}")
    return Response(status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PostNotFoundError, post_not_found_handler)
    app.add_exception_handler(PostStoreError, post_store_error_handler)

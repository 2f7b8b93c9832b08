import datetime
import logging
import math
import uuid
from typing import Optional

from app.errors import PostNotFoundError
from app.repos.posts_repo import PostFilter
from app.schemas.blog import Pagination, PostCreate, PostDetail, PostPage, PostUpdate

logger = logging.getLogger(__name__)

MAX_PUBLIC_LIMIT = 50
ADMIN_DEFAULT_LIMIT = 10

# Columns an update may overwrite. id and created_at never change.
EDITABLE_FIELDS = (
    "title",
    "content",
    "excerpt",
    "slug",
    "author",
    "published",
    "featured_image",
    "tags",
)


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class PostsService:
    def __init__(self, repo, posts_per_page: int = 10):
        self.repo = repo
        self.posts_per_page = posts_per_page

    def list_published_posts(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
    ) -> PostPage:
        if limit is None:
            limit = self.posts_per_page
        filters = PostFilter(published_only=True, tag=tag, search=search)
        return self._list_page(filters, page, min(limit, MAX_PUBLIC_LIMIT))

    def list_all_posts(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
    ) -> PostPage:
        # Empty query values mean "no filter" on the admin listing.
        filters = PostFilter(tag=tag or None, search=search or None)
        return self._list_page(
            filters, page, ADMIN_DEFAULT_LIMIT if limit is None else limit
        )

    def _list_page(
        self, filters: PostFilter, page: Optional[int], limit: int
    ) -> PostPage:
        page = max(page or 1, 1)
        limit = max(limit, 1)

        # Two separate round trips: a write landing between them can make the
        # page and the totals disagree.
        rows = self.repo.list_posts(filters, limit=limit, offset=(page - 1) * limit)
        total = self.repo.count_posts(filters)

        return PostPage(
            posts=[PostDetail.model_validate(row) for row in rows],
            pagination=Pagination(
                current_page=page,
                total_pages=math.ceil(total / limit),
                total_posts=total,
                posts_per_page=limit,
            ),
        )

    def get_published_post(self, slug: str) -> PostDetail:
        row = self.repo.get_by_slug(slug)
        if row is None:
            raise PostNotFoundError(slug)
        return PostDetail.model_validate(row)

    def get_post(self, post_id: str) -> PostDetail:
        row = self.repo.get_by_id(post_id)
        if row is None:
            raise PostNotFoundError(post_id)
        return PostDetail.model_validate(row)

    def create_post(self, payload: PostCreate) -> PostDetail:
        now = _utcnow()
        values = {
            "id": str(uuid.uuid4()),
            **payload.model_dump(),
            "created_at": now,
            "updated_at": now,
        }
        self.repo.create(values)
        logger.info(f"Created post {values['id']} ({payload.slug})")
        return PostDetail(**values)

    def update_post(self, post_id: str, payload: PostUpdate) -> PostDetail:
        """Merge ``payload`` over the stored post and write it back.

        Null and missing fields both keep the stored value, so
        ``featured_image`` cannot be cleared through this call. The read and
        the write are separate statements with no transaction around them:
        concurrent updates to one post are last-write-wins.
        """
        current = self.repo.get_by_id(post_id)
        if current is None:
            raise PostNotFoundError(post_id)

        changes = payload.model_dump(exclude_none=True)
        merged = {
            field: changes[field] if field in changes else getattr(current, field)
            for field in EDITABLE_FIELDS
        }
        merged["tags"] = list(merged["tags"])
        merged["updated_at"] = _utcnow()
        # Taken before the write: the commit expires ``current``.
        created_at = current.created_at

        if self.repo.update(post_id, merged) == 0:
            # Deleted between the read and the write.
            raise PostNotFoundError(post_id)

        return PostDetail(id=post_id, created_at=created_at, **merged)

    def delete_post(self, post_id: str) -> None:
        if self.repo.delete(post_id) == 0:
            raise PostNotFoundError(post_id)
        logger.info(f"Deleted post {post_id}")

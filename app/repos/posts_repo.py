from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import ColumnElement, Select

from app.errors import PostStoreError
from app.models.post import Post


@dataclass(frozen=True)
class PostFilter:
    """Optional predicates for post listings, AND-combined."""

    published_only: bool = False
    tag: Optional[str] = None
    search: Optional[str] = None

    def clauses(self) -> List[ColumnElement]:
        clauses: List[ColumnElement] = []
        if self.published_only:
            clauses.append(Post.published.is_(True))
        if self.tag is not None:
            clauses.append(Post.tags.contains([self.tag]))
        if self.search is not None:
            clauses.append(
                or_(
                    Post.title.contains(self.search, autoescape=True),
                    Post.content.contains(self.search, autoescape=True),
                )
            )
        return clauses


def listing_query(filters: PostFilter, limit: int, offset: int) -> Select:
    return (
        select(Post)
        .where(*filters.clauses())
        .order_by(Post.created_at.desc())
        .limit(limit)
        .offset(offset)
    )


def count_query(filters: PostFilter) -> Select:
    return select(func.count()).select_from(Post).where(*filters.clauses())


class SqlPostsRepo:
    """SQLAlchemy persistence for posts. Every value is a bound parameter."""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _store_errors(self, action: str):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PostStoreError(f"Failed to {action}: {e}") from e

    def list_posts(self, filters: PostFilter, limit: int, offset: int) -> List[Post]:
        with self._store_errors("list posts"):
            return list(self.db.scalars(listing_query(filters, limit, offset)))

    def count_posts(self, filters: PostFilter) -> int:
        with self._store_errors("count posts"):
            return self.db.execute(count_query(filters)).scalar_one()

    def get_by_slug(self, slug: str) -> Optional[Post]:
        stmt = select(Post).where(Post.slug == slug, Post.published.is_(True))
        with self._store_errors("load post by slug"):
            return self.db.scalars(stmt).first()

    def get_by_id(self, post_id: str) -> Optional[Post]:
        with self._store_errors("load post by id"):
            return self.db.get(Post, post_id)

    def create(self, values: Dict[str, Any]) -> None:
        with self._store_errors("create post"):
            self.db.add(Post(**values))
            self.db.commit()

    def update(self, post_id: str, values: Dict[str, Any]) -> int:
        """Overwrite the row's columns with ``values``; returns rows affected."""
        stmt = (
            update(Post)
            .where(Post.id == post_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        with self._store_errors("update post"):
            result = self.db.execute(stmt)
            self.db.commit()
            return result.rowcount

    def delete(self, post_id: str) -> int:
        stmt = (
            delete(Post)
            .where(Post.id == post_id)
            .execution_options(synchronize_session=False)
        )
        with self._store_errors("delete post"):
            result = self.db.execute(stmt)
            self.db.commit()
            return result.rowcount

import datetime
import itertools

import pytest

from app.models.post import Post

BASE_TIME = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)


def make_post(
    post_id: str,
    *,
    slug: str | None = None,
    published: bool = True,
    tags=None,
    minutes: int = 0,
    **overrides,
) -> Post:
    """Build a transient Post row; ``minutes`` offsets created_at from BASE_TIME."""
    stamp = BASE_TIME + datetime.timedelta(minutes=minutes)
    values = {
        "id": post_id,
        "title": f"Title {post_id}",
        "content": f"Content of {post_id}",
        "excerpt": f"Excerpt {post_id}",
        "slug": slug or f"slug-{post_id}",
        "author": "Ada",
        "published": published,
        "featured_image": None,
        "tags": list(tags or []),
        "created_at": stamp,
        "updated_at": stamp,
    }
    values.update(overrides)
    return Post(**values)


class FakePostsRepo:
    """
    In-memory stand-in for SqlPostsRepo, applying PostFilter the same way the
    SQL does.
    """

    def __init__(self, posts=None):
        self.posts = {post.id: post for post in posts or []}
        self.calls = []

    def _matching(self, filters):
        rows = [
            post
            for post in self.posts.values()
            if (not filters.published_only or post.published)
            and (filters.tag is None or filters.tag in post.tags)
            and (
                filters.search is None
                or filters.search in post.title
                or filters.search in post.content
            )
        ]
        return sorted(rows, key=lambda post: post.created_at, reverse=True)

    def list_posts(self, filters, limit, offset):
        self.calls.append(("list", filters, limit, offset))
        return self._matching(filters)[offset : offset + limit]

    def count_posts(self, filters):
        self.calls.append(("count", filters))
        return len(self._matching(filters))

    def get_by_slug(self, slug):
        return next(
            (p for p in self.posts.values() if p.slug == slug and p.published), None
        )

    def get_by_id(self, post_id):
        return self.posts.get(post_id)

    def create(self, values):
        self.posts[values["id"]] = Post(**values)

    def update(self, post_id, values):
        post = self.posts.get(post_id)
        if post is None:
            return 0
        for name, value in values.items():
            setattr(post, name, value)
        return 1

    def delete(self, post_id):
        return 1 if self.posts.pop(post_id, None) is not None else 0


class FakeScalars:
    def __init__(self, rows):
        self.rows = rows

    def __iter__(self):
        return iter(self.rows)

    def first(self):
        return self.rows[0] if self.rows else None


class FakeResult:
    def __init__(self, value=None, rowcount=0):
        self.value = value
        self.rowcount = rowcount

    def scalar_one(self):
        return self.value


class FakeSession:
    """
    Lightweight SQLAlchemy Session stand-in for repository tests.
    Set error to make every statement (and commit) raise it.
    """

    def __init__(
        self, rows=None, record_map=None, execute_value=None, rowcount=1, error=None
    ):
        self.rows = rows or []
        self.record_map = record_map or {}
        self.execute_value = execute_value
        self.rowcount = rowcount
        self.error = error
        self.executed = []
        self.added = []
        self.committed = False
        self.rolled_back = False

    def _maybe_fail(self):
        if self.error is not None:
            raise self.error

    def scalars(self, stmt):
        self.executed.append(stmt)
        self._maybe_fail()
        return FakeScalars(self.rows)

    def execute(self, stmt):
        self.executed.append(stmt)
        self._maybe_fail()
        return FakeResult(self.execute_value, self.rowcount)

    def get(self, model, key):
        self._maybe_fail()
        return self.record_map.get(key)

    def add(self, obj):
        self.added.append(obj)

    def commit(self):
        self._maybe_fail()
        self.committed = True

    def rollback(self):
        self.rolled_back = True


@pytest.fixture
def ticking_clock(monkeypatch):
    """Make the posts service clock advance one second per reading."""
    from app.services import posts_service

    ticks = itertools.count(1)
    monkeypatch.setattr(
        posts_service,
        "_utcnow",
        lambda: BASE_TIME + datetime.timedelta(days=1, seconds=next(ticks)),
    )

from types import SimpleNamespace

from app.dependencies import (
    get_context,
    get_db,
    get_posts_repo,
    get_posts_service,
    get_site_config,
)
from app.repos.posts_repo import SqlPostsRepo
from app.services.posts_service import PostsService
from app.settings import Settings


def test_get_context_reads_app_state():
    context = object()
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(context=context)))

    assert get_context(request) is context


def test_get_site_config_comes_from_context():
    site_config = Settings(SITE_NAME="Notes").site_config()

    assert get_site_config(context=SimpleNamespace(site_config=site_config)) is site_config


def test_get_db_closes_session():
    class FakeSession:
        closed = False

        def close(self):
            self.closed = True

    session = FakeSession()
    gen = get_db(context=SimpleNamespace(session_factory=lambda: session))

    assert next(gen) is session
    gen.close()
    assert session.closed is True


def test_get_posts_repo_constructs_repo():
    db = object()
    repo = get_posts_repo(db=db)

    assert isinstance(repo, SqlPostsRepo)
    assert repo.db is db


def test_get_posts_service_uses_configured_page_size():
    repo = object()
    site_config = Settings(POSTS_PER_PAGE=25).site_config()

    svc = get_posts_service(repo=repo, site_config=site_config)

    assert isinstance(svc, PostsService)
    assert svc.repo is repo
    assert svc.posts_per_page == 25

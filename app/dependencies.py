from fastapi import Depends, Request

from app.context import AppContext
from app.repos.posts_repo import SqlPostsRepo
from app.schemas.site import SiteConfig
from app.services.posts_service import PostsService


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_site_config(context: AppContext = Depends(get_context)) -> SiteConfig:
    return context.site_config


def get_db(context: AppContext = Depends(get_context)):
    db = context.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_posts_repo(db=Depends(get_db)):
    return SqlPostsRepo(db)


def get_posts_service(
    repo=Depends(get_posts_repo),
    site_config: SiteConfig = Depends(get_site_config),
):
    return PostsService(repo=repo, posts_per_page=site_config.posts_per_page)

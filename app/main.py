import logging
from contextlib import asynccontextmanager
from typing import Optional

import anyio.to_thread
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.context import AppContext
from app.db.postgres.migrate import run_migrations
from app.errors import register_exception_handlers
from app.routers import admin, posts, site
from app.settings import Settings

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)
    context = AppContext.from_settings(settings)

    app = FastAPI(title="Blog API", description="Posts, site config and health")
    app.state.context = context

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.RUN_MIGRATIONS:
            await anyio.to_thread.run_sync(run_migrations, settings.database_url)
        logger.info(
            f"Blog API ready for {settings.SERVER_HOST}:{settings.SERVER_PORT}"
        )

        try:
            yield
        finally:
            context.dispose()
            logger.info("Database pool disposed")

    app.router.lifespan_context = lifespan

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(posts.router, prefix="/api")
    app.include_router(admin.router, prefix="/api/admin")
    app.include_router(site.router)
    return app


app = create_app()

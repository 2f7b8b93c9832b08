from dataclasses import dataclass

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.db.postgres.base import create_db_engine, create_session_factory
from app.schemas.site import SiteConfig
from app.settings import Settings


@dataclass(frozen=True)
class AppContext:
    """Process-wide state shared by every request.

    Built once at startup and attached to the application; handlers reach it
    through ``app.dependencies.get_context``. Nothing in here is mutated after
    construction, the connection pool inside ``engine`` does its own locking.
    """

    settings: Settings
    site_config: SiteConfig
    engine: Engine
    session_factory: sessionmaker

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        engine = create_db_engine(settings.database_url)
        return cls(
            settings=settings,
            site_config=settings.site_config(),
            engine=engine,
            session_factory=create_session_factory(engine),
        )

    def dispose(self) -> None:
        self.engine.dispose()

from pathlib import Path
from typing import Optional

from pydantic import ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.schemas.site import SiteConfig


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Database
    DATABASE_URL: Optional[str] = None
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USERNAME: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DATABASE: str = "blog"
    RUN_MIGRATIONS: bool = True

    # Server
    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = 3000

    # Logging
    LOG_LEVEL: str = "INFO"

    # Site
    SITE_NAME: str = "My Blog"
    SITE_DESCRIPTION: str = "A beautiful blog"
    SITE_URL: str = "http://localhost:4321"
    SITE_AUTHOR: str = "Blog Author"
    SITE_EMAIL: str = "author@example.com"
    SITE_KEYWORDS: str = "blog"
    SITE_LANGUAGE: str = "en"
    TWITTER_HANDLE: str = "@blog"
    GITHUB_URL: str = "https://github.com"
    ENABLE_COMMENTS: bool = True
    ENABLE_SEARCH: bool = True
    POSTS_PER_PAGE: int = 10

    @field_validator(
        "POSTGRES_PORT",
        "RUN_MIGRATIONS",
        "SERVER_PORT",
        "ENABLE_COMMENTS",
        "ENABLE_SEARCH",
        "POSTS_PER_PAGE",
        mode="wrap",
    )
    @classmethod
    def _default_on_unparseable(cls, value, handler, info: ValidationInfo):
        """Garbage in a typed env var falls back to the field default."""
        try:
            return handler(value)
        except ValidationError:
            return cls.model_fields[info.field_name].default

    @property
    def postgres_url(self) -> str:
        return f"postgresql+psycopg2://{self.POSTGRES_USERNAME}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DATABASE}"

    @property
    def database_url(self) -> str:
        return self.DATABASE_URL or self.postgres_url

    def site_config(self) -> SiteConfig:
        return SiteConfig(
            site_name=self.SITE_NAME,
            site_description=self.SITE_DESCRIPTION,
            site_url=self.SITE_URL,
            site_author=self.SITE_AUTHOR,
            site_email=self.SITE_EMAIL,
            site_keywords=self.SITE_KEYWORDS,
            site_language=self.SITE_LANGUAGE,
            twitter_handle=self.TWITTER_HANDLE,
            github_url=self.GITHUB_URL,
            enable_comments=self.ENABLE_COMMENTS,
            posts_per_page=self.POSTS_PER_PAGE,
            enable_search=self.ENABLE_SEARCH,
        )

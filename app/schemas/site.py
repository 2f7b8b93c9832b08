from pydantic import BaseModel, ConfigDict


class SiteConfig(BaseModel):
    """Static site settings, captured once at startup."""

    model_config = ConfigDict(frozen=True)

    site_name: str
    site_description: str
    site_url: str
    site_author: str
    site_email: str
    site_keywords: str
    site_language: str
    twitter_handle: str
    github_url: str
    enable_comments: bool
    posts_per_page: int
    enable_search: bool

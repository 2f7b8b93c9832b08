from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class PostCreate(BaseModel):
    title: str
    content: str
    excerpt: str
    slug: str
    author: str
    published: bool
    featured_image: Optional[str] = None
    tags: List[str]


class PostUpdate(BaseModel):
    """Partial update; a missing or null field keeps the stored value."""

    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    slug: Optional[str] = None
    author: Optional[str] = None
    published: Optional[bool] = None
    featured_image: Optional[str] = None
    tags: Optional[List[str]] = None


class PostDetail(PostCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime


class Pagination(BaseModel):
    current_page: int
    total_pages: int
    total_posts: int
    posts_per_page: int


class PostPage(BaseModel):
    posts: List[PostDetail]
    pagination: Pagination

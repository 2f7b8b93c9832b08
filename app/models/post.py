from sqlalchemy import Boolean, Column, DateTime, String, Text, text
from sqlalchemy.dialects.postgresql import JSONB

from app.db.postgres.base import Base


class Post(Base):
    __tablename__ = "posts"

    id = Column(String(36), primary_key=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=False)
    slug = Column(String(255), nullable=False, index=True)
    author = Column(String(255), nullable=False)
    published = Column(Boolean, nullable=False, server_default=text("false"))
    featured_image = Column(String(1024), nullable=True)
    tags = Column(JSONB, nullable=False, server_default=text("'[]'::jsonb"))
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)

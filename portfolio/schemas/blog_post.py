import uuid
from typing import Optional

from .base import CamelModel, OptionalId, OptionalUTCDatetime, UTCDatetime
from .file import FileRead
from .user import AuthorRead, AuthorPublic


class BlogPostCreate(CamelModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None
    featured_image_id: OptionalId = None
    published: Optional[bool] = None


class BlogPostUpdate(BlogPostCreate):
    id: Optional[uuid.UUID] = None


class BlogPostRead(CamelModel):
    id: uuid.UUID
    title: str
    slug: str
    excerpt: Optional[str] = None
    content: Optional[str] = None
    featured_image_id: Optional[uuid.UUID] = None
    featured_image: Optional[FileRead] = None
    author_id: Optional[uuid.UUID] = None
    author: Optional[AuthorRead] = None
    published: bool
    published_at: OptionalUTCDatetime = None
    created_at: UTCDatetime
    updated_at: UTCDatetime


class BlogPostPublicRead(BlogPostRead):
    author: Optional[AuthorPublic] = None

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from .. import schemas
from ..models import BlogPost
from ..utils.exceptions import NotFoundError, ValidationError
from ..utils.slug import resolve_slug
from .utils import commit_or_conflict, ensure_file_exists, ensure_slug_available, require_text, utcnow


class BlogService:
    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(BlogPost).options(
            joinedload(BlogPost.featured_image),
            joinedload(BlogPost.author),
        )

    def list_posts(self) -> List[BlogPost]:
        return self._query().order_by(BlogPost.created_at.desc()).all()

    def list_published_posts(self) -> List[BlogPost]:
        return (
            self._query()
            .filter(BlogPost.published.is_(True))
            .order_by(BlogPost.published_at.desc())
            .all()
        )

    def get_published_post_by_slug(self, slug: str) -> BlogPost:
        post = self._query().filter(BlogPost.slug == slug).first()
        if not post or not post.published:
            raise NotFoundError("Post not found")
        return post

    def get_post(self, post_id: uuid.UUID) -> BlogPost:
        post = self.db.query(BlogPost).filter(BlogPost.id == post_id).first()
        if not post:
            raise NotFoundError("Post not found")
        return post

    def create_post(self, data: schemas.BlogPostCreate, author_id: Optional[uuid.UUID] = None) -> BlogPost:
        post = BlogPost(author_id=author_id, published=False)
        self._apply(post, data)
        self.db.add(post)
        commit_or_conflict(self.db, f"Slug '{post.slug}' is already in use")
        self.db.refresh(post)
        return post

    def update_post(self, data: schemas.BlogPostUpdate) -> BlogPost:
        """Full-record replace. The author is kept from creation."""
        if data.id is None:
            raise ValidationError("ID is required")
        post = self.get_post(data.id)
        self._apply(post, data, exclude_id=post.id)
        post.updated_at = utcnow()
        commit_or_conflict(self.db, f"Slug '{post.slug}' is already in use")
        self.db.refresh(post)
        return post

    def delete_post(self, post_id: Optional[uuid.UUID]) -> None:
        if post_id is None:
            raise ValidationError("ID is required")
        post = self.get_post(post_id)
        self.db.delete(post)
        self.db.commit()

    def _apply(self, post: BlogPost, data: schemas.BlogPostCreate, exclude_id: Optional[uuid.UUID] = None) -> None:
        title = require_text(data.title, "Title is required")
        slug = resolve_slug(data.slug, title)
        if not slug:
            raise ValidationError("Slug could not be derived from title")
        ensure_slug_available(self.db, BlogPost, slug, exclude_id=exclude_id)
        ensure_file_exists(self.db, data.featured_image_id)

        published = bool(data.published)
        # publishedAt is stamped on the transition to published and cleared
        # on unpublish; re-publishing stamps it again.
        if published and not post.published:
            post.published_at = utcnow()
        elif not published:
            post.published_at = None

        post.title = title
        post.slug = slug
        post.excerpt = data.excerpt
        post.content = data.content
        post.featured_image_id = data.featured_image_id
        post.published = published

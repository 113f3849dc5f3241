import uuid
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from .. import schemas
from ..models import Page, PageType
from ..utils.exceptions import NotFoundError, ValidationError
from ..utils.slug import resolve_slug
from .utils import commit_or_conflict, ensure_file_exists, ensure_slug_available, require_text, utcnow

DEFAULT_PAGES = [
    {
        "title": "Home",
        "slug": "home",
        "content": "Welcome to my photography collection",
        "page_type": PageType.home.value,
        "show_in_menu": True,
        "menu_order": "1",
        "published": True,
    },
    {
        "title": "Exhibition",
        "slug": "exhibition",
        "content": "Explore our curated exhibitions and collections",
        "page_type": PageType.standard.value,
        "show_in_menu": True,
        "menu_order": "2",
        "published": True,
    },
]


class PageService:
    """Static pages, including the single page that acts as the site's home."""

    def __init__(self, db: Session):
        self.db = db

    def list_pages(self) -> List[Page]:
        return (
            self.db.query(Page)
            .options(joinedload(Page.featured_image))
            .order_by(Page.created_at.desc())
            .all()
        )

    def list_published_pages(self) -> List[Page]:
        return (
            self.db.query(Page)
            .options(joinedload(Page.featured_image))
            .filter(Page.published.is_(True))
            .order_by(Page.created_at.desc())
            .all()
        )

    def get_published_page_by_slug(self, slug: str) -> Page:
        """Unpublished pages are reported as missing."""
        page = (
            self.db.query(Page)
            .options(joinedload(Page.featured_image))
            .filter(Page.slug == slug)
            .first()
        )
        if not page or not page.published:
            raise NotFoundError("Page not found")
        return page

    def get_page(self, page_id: uuid.UUID) -> Page:
        page = self.db.query(Page).filter(Page.id == page_id).first()
        if not page:
            raise NotFoundError("Page not found")
        return page

    def create_page(self, data: schemas.PageCreate) -> Page:
        page = Page()
        self._apply(page, data)
        self.db.add(page)
        commit_or_conflict(self.db, f"Slug '{page.slug}' is already in use")
        self.db.refresh(page)
        return page

    def update_page(self, data: schemas.PageUpdate) -> Page:
        """Full-record replace; omitted optional fields fall back to their defaults."""
        if data.id is None:
            raise ValidationError("ID is required")
        page = self.get_page(data.id)
        self._apply(page, data, exclude_id=page.id)
        page.updated_at = utcnow()
        commit_or_conflict(self.db, f"Slug '{page.slug}' is already in use")
        self.db.refresh(page)
        return page

    def delete_page(self, page_id: Optional[uuid.UUID]) -> None:
        if page_id is None:
            raise ValidationError("ID is required")
        page = self.get_page(page_id)
        self.db.delete(page)
        self.db.commit()

    def create_default_pages(self) -> List[Page]:
        """Seeds the Home and Exhibition pages, skipping slugs that already exist."""
        created = []
        for values in DEFAULT_PAGES:
            if self.db.query(Page.id).filter(Page.slug == values["slug"]).first():
                continue
            page = Page(**values)
            self.db.add(page)
            created.append(page)
        self.db.commit()
        return created

    def _apply(self, page: Page, data: schemas.PageCreate, exclude_id: Optional[uuid.UUID] = None) -> None:
        title = require_text(data.title, "Title is required")
        slug = resolve_slug(data.slug, title)
        if not slug:
            raise ValidationError("Slug could not be derived from title")
        ensure_slug_available(self.db, Page, slug, exclude_id=exclude_id)

        page_type = data.page_type or PageType.standard.value
        if page_type not in {t.value for t in PageType}:
            raise ValidationError(f"Invalid page type '{page_type}'")
        ensure_file_exists(self.db, data.featured_image_id)

        page.title = title
        page.slug = slug
        page.content = data.content
        page.page_type = page_type
        page.featured_image_id = data.featured_image_id
        page.show_in_menu = bool(data.show_in_menu)
        page.menu_order = data.menu_order or "0"
        page.published = bool(data.published)

from typing import Any, Dict

from sqlalchemy.orm import Session, joinedload

from ..models import Category, File, Page, PageType
from ..utils.exceptions import NotFoundError


class GalleryService:
    """Read-only queries behind the public site."""

    def __init__(self, db: Session):
        self.db = db

    def get_home(self) -> Dict[str, Any]:
        """
        Returns the published home page, its menu and every category with the
        newest file in it as a cover image.

        The cover lookup runs one query per category. That is fine for a
        personal portfolio but grows linearly with the number of categories.
        """
        home = (
            self.db.query(Page)
            .options(joinedload(Page.featured_image))
            .filter(Page.page_type == PageType.home.value, Page.published.is_(True))
            .first()
        )
        if not home:
            raise NotFoundError("Home page not found")

        menu_pages = []
        if home.show_in_menu:
            # menu_order is text, so "10" sorts before "2".
            menu_pages = (
                self.db.query(Page)
                .filter(Page.published.is_(True), Page.page_type == PageType.standard.value)
                .order_by(Page.menu_order.asc())
                .all()
            )

        categories = []
        for category in self.db.query(Category).order_by(Category.name.asc()).all():
            cover = (
                self.db.query(File)
                .filter(File.category_id == category.id)
                .order_by(File.created_at.desc())
                .first()
            )
            categories.append({"category": category, "image": cover})

        return {"page": home, "menu_pages": menu_pages, "categories": categories}

    def get_category_gallery(self, slug: str) -> Dict[str, Any]:
        category = self.db.query(Category).filter(Category.slug == slug).first()
        if not category:
            raise NotFoundError("Category not found")
        files = (
            self.db.query(File)
            .filter(File.category_id == category.id)
            .order_by(File.created_at.desc())
            .all()
        )
        return {"category": category, "files": files}

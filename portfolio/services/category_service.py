import logging
import uuid
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import schemas
from ..core.object_storage import ObjectStorage
from ..models import Category, File
from ..utils.exceptions import InternalError, NotFoundError, ValidationError
from ..utils.slug import resolve_slug
from .utils import commit_or_conflict, ensure_slug_available, require_text, utcnow

logger = logging.getLogger(__name__)


class CategoryService:
    """Handles all business logic related to categories."""

    def __init__(self, db: Session, storage: ObjectStorage):
        self.db = db
        self.storage = storage

    def list_categories(self) -> List[Category]:
        return self.db.query(Category).order_by(Category.created_at.desc()).all()

    def get_category(self, category_id: uuid.UUID) -> Category:
        category = self.db.query(Category).filter(Category.id == category_id).first()
        if not category:
            raise NotFoundError("Category not found")
        return category

    def create_category(self, data: schemas.CategoryCreate) -> Category:
        name = require_text(data.name, "Name is required")
        slug = self._slug_for(data.slug, name)
        ensure_slug_available(self.db, Category, slug)

        category = Category(name=name, slug=slug, description=data.description)
        self.db.add(category)
        commit_or_conflict(self.db, f"Slug '{slug}' is already in use")
        self.db.refresh(category)
        return category

    def update_category(self, data: schemas.CategoryUpdate) -> Category:
        """Full-record replace; fields left out of the body are cleared."""
        if data.id is None:
            raise ValidationError("ID is required")
        category = self.get_category(data.id)
        name = require_text(data.name, "Name is required")
        slug = self._slug_for(data.slug, name)
        ensure_slug_available(self.db, Category, slug, exclude_id=category.id)

        category.name = name
        category.slug = slug
        category.description = data.description
        category.updated_at = utcnow()
        commit_or_conflict(self.db, f"Slug '{slug}' is already in use")
        self.db.refresh(category)
        return category

    def delete_category(self, category_id: Optional[uuid.UUID]) -> None:
        """
        Deletes a category and, by cascade, all of its files. The binaries of
        those files are removed from storage first so the cascade does not
        leave them orphaned. A storage failure aborts before any row is touched.
        """
        if category_id is None:
            raise ValidationError("ID is required")
        category = self.get_category(category_id)
        keys = [key for (key,) in self.db.query(File.key).filter(File.category_id == category.id).all()]

        for key in keys:
            self.storage.delete_object(key)

        try:
            self.db.delete(category)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                f"Category {category_id} row delete failed after its objects were removed; "
                f"rows now reference missing objects: {keys}"
            )
            raise InternalError("Failed to delete category") from e

        logger.info(f"Deleted category {category_id} and {len(keys)} file(s)")

    @staticmethod
    def _slug_for(slug: Optional[str], name: str) -> str:
        resolved = resolve_slug(slug, name)
        if not resolved:
            raise ValidationError("Slug could not be derived from name")
        return resolved

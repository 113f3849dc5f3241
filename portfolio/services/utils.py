from datetime import datetime, timezone
from typing import Optional, Type
import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..models import Category, File
from ..utils.exceptions import ConflictError, ValidationError


def utcnow() -> datetime:
    """Naive UTC, the form the DateTime columns store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def require_text(value: Optional[str], message: str) -> str:
    """Returns the stripped value, raising ValidationError when blank."""
    if value is None or not str(value).strip():
        raise ValidationError(message)
    return str(value).strip()


def ensure_slug_available(db: Session, model: Type, slug: str, exclude_id: Optional[uuid.UUID] = None) -> None:
    query = db.query(model).filter(model.slug == slug)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)
    if query.first() is not None:
        raise ConflictError(f"Slug '{slug}' is already in use")


def ensure_file_exists(db: Session, file_id: Optional[uuid.UUID]) -> None:
    if file_id is not None and db.query(File.id).filter(File.id == file_id).first() is None:
        raise ValidationError("Featured image not found")


def ensure_category_exists(db: Session, category_id: Optional[uuid.UUID]) -> None:
    if category_id is not None and db.query(Category.id).filter(Category.id == category_id).first() is None:
        raise ValidationError("Category not found")


def commit_or_conflict(db: Session, message: str) -> None:
    """
    Commits the session. A unique-constraint race that slipped past the
    pre-checks is rolled back and reported as a conflict.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(message) from e

import logging
import uuid
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from .. import schemas
from ..core.object_storage import ObjectStorage
from ..models import File
from ..utils.exceptions import InternalError, NotFoundError, ValidationError
from ..utils.metadata import normalize_metadata
from .utils import ensure_category_exists, require_text

logger = logging.getLogger(__name__)


class FileService:
    """Metadata rows for uploaded media, kept in step with the bucket."""

    def __init__(self, db: Session, storage: ObjectStorage):
        self.db = db
        self.storage = storage

    def list_files(self, category_id: Optional[uuid.UUID] = None) -> List[File]:
        query = self.db.query(File).options(joinedload(File.category))
        if category_id is not None:
            query = query.filter(File.category_id == category_id)
        return query.order_by(File.created_at.desc()).all()

    def get_file(self, file_id: uuid.UUID) -> File:
        file = self.db.query(File).options(joinedload(File.category)).filter(File.id == file_id).first()
        if not file:
            raise NotFoundError("File not found")
        return file

    def create_file(self, data: schemas.FileCreate, uploaded_by: Optional[uuid.UUID] = None) -> File:
        """Records an object that the client has already uploaded with a presigned URL."""
        if not (data.name and data.url and data.key):
            raise ValidationError("Name, URL, and key are required")
        ensure_category_exists(self.db, data.category_id)

        file = File(
            name=data.name,
            url=data.url,
            key=data.key,
            size=str(data.size) if data.size is not None else None,
            mime_type=data.mime_type,
            category_id=data.category_id,
            uploaded_by=uploaded_by,
        )
        self.db.add(file)
        self.db.commit()
        self.db.refresh(file)
        return file

    def update_file(self, file_id: uuid.UUID, data: schemas.FileUpdate) -> File:
        changes = data.model_dump(exclude_unset=True)
        file = self.get_file(file_id)

        if "name" in changes:
            file.name = require_text(changes["name"], "Name is required")
        if "location" in changes:
            file.location = changes["location"]
        if "captured_at" in changes:
            file.captured_at = changes["captured_at"]
        if "metadata" in changes:
            file.metadata_json = normalize_metadata(changes["metadata"])
        if "category_id" in changes:
            ensure_category_exists(self.db, changes["category_id"])
            file.category_id = changes["category_id"]

        self.db.commit()
        self.db.refresh(file)
        return file

    def delete_file(self, file_id: Optional[uuid.UUID]) -> None:
        """
        Removes the object from the bucket, then the row. If the object delete
        fails the row is left alone; if the row delete fails the key is logged
        for reconciliation.
        """
        if file_id is None:
            raise ValidationError("ID is required")
        file = self.db.query(File).filter(File.id == file_id).first()
        if not file:
            raise NotFoundError("File not found")

        key = file.key
        self.storage.delete_object(key)

        try:
            self.db.delete(file)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"File {file_id} row delete failed after object '{key}' was removed; needs reconciliation")
            raise InternalError("Failed to delete file") from e

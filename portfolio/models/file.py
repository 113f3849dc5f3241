import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from ..models.base import Base, UUIDChar

class File(Base):
    """Metadata row for one binary object in the media bucket."""
    __tablename__ = "files"

    id = Column(UUIDChar, primary_key=True, default=uuid.uuid4)
    category_id = Column(UUIDChar, ForeignKey("categories.id", ondelete="CASCADE"), nullable=True, index=True)
    name = Column(String, nullable=False)
    url = Column(String, nullable=False)
    key = Column(String, nullable=False)
    size = Column(String, nullable=True)  # bytes, kept as text
    mime_type = Column(String, nullable=True)
    uploaded_by = Column(UUIDChar, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    location = Column(String, nullable=True)
    captured_at = Column(DateTime, nullable=True)
    # "metadata" is reserved on declarative classes
    metadata_json = Column("metadata", Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    category = relationship("Category", back_populates="files")
    uploader = relationship("User", back_populates="uploaded_files")

    # Referenced as a featured image; deleting the file nulls these references.
    featured_in_pages = relationship("Page", back_populates="featured_image")
    featured_in_posts = relationship("BlogPost", back_populates="featured_image")

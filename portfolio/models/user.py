import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from ..models.base import Base, UUIDChar

class User(Base):
    __tablename__ = "users"

    id = Column(UUIDChar, primary_key=True, default=uuid.uuid4)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    display_name = Column(String, nullable=True)
    role = Column(String, default="admin", nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Content is referenced, not owned: deleting a user nulls these references.
    uploaded_files = relationship("File", back_populates="uploader")
    blog_posts = relationship("BlogPost", back_populates="author")

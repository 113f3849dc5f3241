import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship
from ..models.base import Base, UUIDChar

class Category(Base):
    __tablename__ = "categories"

    id = Column(UUIDChar, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # A category owns its files.
    files = relationship("File", back_populates="category", cascade="all, delete-orphan", passive_deletes=True)

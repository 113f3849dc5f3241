import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from ..models.base import Base, UUIDChar

class BlogPost(Base):
    __tablename__ = "blog_posts"

    id = Column(UUIDChar, primary_key=True, default=uuid.uuid4)
    title = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    excerpt = Column(Text, nullable=True)
    content = Column(Text, nullable=True)
    featured_image_id = Column(UUIDChar, ForeignKey("files.id", ondelete="SET NULL"), nullable=True)
    author_id = Column(UUIDChar, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    published = Column(Boolean, default=False, nullable=False)
    published_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    featured_image = relationship("File", back_populates="featured_in_posts")
    author = relationship("User", back_populates="blog_posts")

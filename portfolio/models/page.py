import enum
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from ..models.base import Base, UUIDChar


class PageType(str, enum.Enum):
    standard = "standard"
    home = "home"


class Page(Base):
    __tablename__ = "pages"

    id = Column(UUIDChar, primary_key=True, default=uuid.uuid4)
    title = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    content = Column(Text, nullable=True)
    page_type = Column(String, default=PageType.standard.value, nullable=False)
    featured_image_id = Column(UUIDChar, ForeignKey("files.id", ondelete="SET NULL"), nullable=True)
    show_in_menu = Column(Boolean, default=False, nullable=False)
    # Text on purpose: menu entries sort lexicographically ("10" < "2").
    menu_order = Column(String, default="0", nullable=True)
    published = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    featured_image = relationship("File", back_populates="featured_in_pages")

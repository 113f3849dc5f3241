import uuid
from typing import Optional

from .base import CamelModel, UTCDatetime


class CategoryCreate(CamelModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None


class CategoryUpdate(CategoryCreate):
    id: Optional[uuid.UUID] = None


class CategoryRead(CamelModel):
    id: uuid.UUID
    name: str
    slug: str
    description: Optional[str] = None
    created_at: UTCDatetime
    updated_at: UTCDatetime

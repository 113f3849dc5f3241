import uuid
from typing import Optional

from pydantic import field_validator

from .base import CamelModel, OptionalId, UTCDatetime
from .file import FileRead


class PageCreate(CamelModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    content: Optional[str] = None
    page_type: Optional[str] = None
    featured_image_id: OptionalId = None
    show_in_menu: Optional[bool] = None
    menu_order: Optional[str] = None
    published: Optional[bool] = None

    @field_validator("menu_order", mode="before")
    @classmethod
    def menu_order_as_text(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class PageUpdate(PageCreate):
    id: Optional[uuid.UUID] = None


class PageRead(CamelModel):
    id: uuid.UUID
    title: str
    slug: str
    content: Optional[str] = None
    page_type: str
    featured_image_id: Optional[uuid.UUID] = None
    featured_image: Optional[FileRead] = None
    show_in_menu: bool
    menu_order: Optional[str] = None
    published: bool
    created_at: UTCDatetime
    updated_at: UTCDatetime


class MenuPage(CamelModel):
    id: uuid.UUID
    title: str
    slug: str
    menu_order: Optional[str] = None

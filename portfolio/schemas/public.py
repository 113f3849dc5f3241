from typing import List, Optional

from .base import CamelModel
from .category import CategoryRead
from .file import FileRead
from .page import PageRead, MenuPage


class CategoryWithImage(CategoryRead):
    image: Optional[FileRead] = None


class CategoryGallery(CamelModel):
    category: CategoryRead
    files: List[FileRead]


class HomeResponse(CamelModel):
    page: PageRead
    menu_pages: List[MenuPage]
    categories: List[CategoryWithImage]


class DashboardStats(CamelModel):
    categories: int
    files: int
    blogs: int

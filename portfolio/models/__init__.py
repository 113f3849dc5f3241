"""
Central import point for all SQLAlchemy models.

Importing every model here registers them with the Base metadata before any
relationship is resolved or any table is created.
"""
from .base import Base
from .user import User
from .category import Category
from .file import File
from .page import Page, PageType
from .blog_post import BlogPost


__all__ = [
    "Base",
    "User",
    "Category",
    "File",
    "Page",
    "PageType",
    "BlogPost",
]

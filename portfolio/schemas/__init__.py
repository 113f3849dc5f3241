"""
Exposes the request/response schemas for easier importing.
"""
from .user import UserCreate, UserRead, AuthorRead, AuthorPublic
from .token import Token
from .category import CategoryCreate, CategoryUpdate, CategoryRead
from .file import FileCreate, FileUpdate, FileRead, FileWithCategory
from .page import PageCreate, PageUpdate, PageRead, MenuPage
from .blog_post import BlogPostCreate, BlogPostUpdate, BlogPostRead, BlogPostPublicRead
from .upload import PresignedUrlRequest, PresignedUrlResponse
from .public import CategoryWithImage, CategoryGallery, HomeResponse, DashboardStats
from .contact import ContactRequest, ContactResponse

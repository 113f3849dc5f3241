from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query

from .. import schemas
from ..dependencies import get_blog_service, get_gallery_service, get_page_service
from ..services.blog_service import BlogService
from ..services.gallery_service import GalleryService
from ..services.page_service import PageService

# No authentication here: only published content is ever returned.
router = APIRouter(prefix="/public", tags=["Public"])

@router.get("/pages", response_model=Union[schemas.PageRead, List[schemas.PageRead]])
def read_pages(
    slug: Optional[str] = Query(None),
    service: PageService = Depends(get_page_service),
):
    """All published pages, or the single published page matching `slug`."""
    if slug:
        return schemas.PageRead.model_validate(service.get_published_page_by_slug(slug))
    return [schemas.PageRead.model_validate(page) for page in service.list_published_pages()]

@router.get("/blog", response_model=Union[schemas.BlogPostPublicRead, List[schemas.BlogPostPublicRead]])
def read_blog(
    slug: Optional[str] = Query(None),
    service: BlogService = Depends(get_blog_service),
):
    """Published posts, newest publication first, or one published post by slug."""
    if slug:
        return schemas.BlogPostPublicRead.model_validate(service.get_published_post_by_slug(slug))
    return [schemas.BlogPostPublicRead.model_validate(post) for post in service.list_published_posts()]

@router.get("/category/{slug}", response_model=schemas.CategoryGallery)
def read_category(
    slug: str,
    service: GalleryService = Depends(get_gallery_service),
):
    gallery = service.get_category_gallery(slug)
    return schemas.CategoryGallery(
        category=schemas.CategoryRead.model_validate(gallery["category"]),
        files=[schemas.FileRead.model_validate(f) for f in gallery["files"]],
    )

@router.get("/home", response_model=schemas.HomeResponse)
def read_home(service: GalleryService = Depends(get_gallery_service)):
    home = service.get_home()
    categories = []
    for entry in home["categories"]:
        category = schemas.CategoryRead.model_validate(entry["category"])
        image = schemas.FileRead.model_validate(entry["image"]) if entry["image"] else None
        categories.append(schemas.CategoryWithImage(**category.model_dump(), image=image))
    return schemas.HomeResponse(
        page=schemas.PageRead.model_validate(home["page"]),
        menu_pages=[schemas.MenuPage.model_validate(page) for page in home["menu_pages"]],
        categories=categories,
    )

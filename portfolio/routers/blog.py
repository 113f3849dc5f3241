import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from .. import schemas
from ..dependencies import get_blog_service, require_admin
from ..models.user import User
from ..services.blog_service import BlogService

router = APIRouter(prefix="/admin/blog", tags=["Blog"])

@router.get("", response_model=List[schemas.BlogPostRead])
def list_posts(
    current_user: User = Depends(require_admin),
    service: BlogService = Depends(get_blog_service),
):
    return service.list_posts()

@router.post("", response_model=schemas.BlogPostRead, status_code=status.HTTP_201_CREATED)
def create_post(
    data: schemas.BlogPostCreate,
    current_user: User = Depends(require_admin),
    service: BlogService = Depends(get_blog_service),
):
    """Creates a post authored by the caller; publishing stamps publishedAt."""
    return service.create_post(data, author_id=current_user.id)

@router.put("", response_model=schemas.BlogPostRead)
def update_post(
    data: schemas.BlogPostUpdate,
    current_user: User = Depends(require_admin),
    service: BlogService = Depends(get_blog_service),
):
    return service.update_post(data)

@router.delete("")
def delete_post(
    post_id: Optional[uuid.UUID] = Query(None, alias="id"),
    current_user: User = Depends(require_admin),
    service: BlogService = Depends(get_blog_service),
):
    service.delete_post(post_id)
    return {"success": True}

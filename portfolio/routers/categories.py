import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from .. import schemas
from ..dependencies import get_category_service, require_admin
from ..models.user import User
from ..services.category_service import CategoryService

router = APIRouter(prefix="/admin/categories", tags=["Categories"])

@router.get("", response_model=List[schemas.CategoryRead])
def list_categories(
    current_user: User = Depends(require_admin),
    service: CategoryService = Depends(get_category_service),
):
    return service.list_categories()

@router.post("", response_model=schemas.CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(
    data: schemas.CategoryCreate,
    current_user: User = Depends(require_admin),
    service: CategoryService = Depends(get_category_service),
):
    """Creates a category. A blank slug is derived from the name."""
    return service.create_category(data)

@router.put("", response_model=schemas.CategoryRead)
def update_category(
    data: schemas.CategoryUpdate,
    current_user: User = Depends(require_admin),
    service: CategoryService = Depends(get_category_service),
):
    return service.update_category(data)

@router.delete("")
def delete_category(
    category_id: Optional[uuid.UUID] = Query(None, alias="id"),
    current_user: User = Depends(require_admin),
    service: CategoryService = Depends(get_category_service),
):
    """Deletes the category together with all of its files and their stored objects."""
    service.delete_category(category_id)
    return {"success": True}

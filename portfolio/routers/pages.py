import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from .. import schemas
from ..dependencies import get_page_service, require_admin
from ..models.user import User
from ..services.page_service import PageService

router = APIRouter(prefix="/admin/pages", tags=["Pages"])

@router.get("", response_model=List[schemas.PageRead])
def list_pages(
    current_user: User = Depends(require_admin),
    service: PageService = Depends(get_page_service),
):
    return service.list_pages()

@router.post("", response_model=schemas.PageRead, status_code=status.HTTP_201_CREATED)
def create_page(
    data: schemas.PageCreate,
    current_user: User = Depends(require_admin),
    service: PageService = Depends(get_page_service),
):
    return service.create_page(data)

@router.put("", response_model=schemas.PageRead)
def update_page(
    data: schemas.PageUpdate,
    current_user: User = Depends(require_admin),
    service: PageService = Depends(get_page_service),
):
    return service.update_page(data)

@router.delete("")
def delete_page(
    page_id: Optional[uuid.UUID] = Query(None, alias="id"),
    current_user: User = Depends(require_admin),
    service: PageService = Depends(get_page_service),
):
    service.delete_page(page_id)
    return {"success": True}

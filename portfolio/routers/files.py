import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from .. import schemas
from ..dependencies import get_file_service, require_admin
from ..models.user import User
from ..services.file_service import FileService

router = APIRouter(prefix="/admin/files", tags=["Files"])

@router.get("", response_model=List[schemas.FileWithCategory])
def list_files(
    category_id: Optional[uuid.UUID] = Query(None, alias="categoryId"),
    current_user: User = Depends(require_admin),
    service: FileService = Depends(get_file_service),
):
    return service.list_files(category_id=category_id)

@router.post("", response_model=schemas.FileRead, status_code=status.HTTP_201_CREATED)
def create_file(
    data: schemas.FileCreate,
    current_user: User = Depends(require_admin),
    service: FileService = Depends(get_file_service),
):
    """
    Final step of an upload: record an object already written to the bucket
    through a presigned URL.
    """
    return service.create_file(data, uploaded_by=current_user.id)

@router.delete("")
def delete_file_by_query(
    file_id: Optional[uuid.UUID] = Query(None, alias="id"),
    current_user: User = Depends(require_admin),
    service: FileService = Depends(get_file_service),
):
    service.delete_file(file_id)
    return {"success": True}

@router.get("/{file_id}", response_model=schemas.FileWithCategory)
def get_file(
    file_id: uuid.UUID,
    current_user: User = Depends(require_admin),
    service: FileService = Depends(get_file_service),
):
    return service.get_file(file_id)

@router.patch("/{file_id}", response_model=schemas.FileWithCategory)
def update_file(
    file_id: uuid.UUID,
    data: schemas.FileUpdate,
    current_user: User = Depends(require_admin),
    service: FileService = Depends(get_file_service),
):
    """Partial update of name, location, capture time, metadata or category."""
    return service.update_file(file_id, data)

@router.delete("/{file_id}")
def delete_file(
    file_id: uuid.UUID,
    current_user: User = Depends(require_admin),
    service: FileService = Depends(get_file_service),
):
    service.delete_file(file_id)
    return {"success": True}

from fastapi import APIRouter, Depends

from .. import schemas
from ..dependencies import get_upload_service, require_admin
from ..models.user import User
from ..services.upload_service import UploadService

router = APIRouter(prefix="/upload", tags=["Upload"])

@router.post("/presigned-url", response_model=schemas.PresignedUrlResponse)
def create_presigned_url(
    data: schemas.PresignedUrlRequest,
    current_user: User = Depends(require_admin),
    service: UploadService = Depends(get_upload_service),
):
    """
    Returns a short-lived signed PUT URL and the key it is bound to. The client
    uploads the bytes directly to storage, then records them via POST /admin/files.
    """
    return service.create_presigned_upload(data.filename, data.content_type)

from fastapi import APIRouter, Depends

from .. import schemas
from ..services.contact_service import submit_contact
from ..services.email_service import EmailService, get_email_service

router = APIRouter(tags=["Contact"])

@router.post("/contact", response_model=schemas.ContactResponse)
def send_contact_message(
    data: schemas.ContactRequest,
    email_service: EmailService = Depends(get_email_service),
):
    submit_contact(data, email_service)
    return {"success": True, "message": "Email sent successfully"}

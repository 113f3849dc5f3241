from typing import Optional

from .base import CamelModel


class ContactRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class ContactResponse(CamelModel):
    success: bool
    message: str

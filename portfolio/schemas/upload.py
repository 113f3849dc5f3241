from typing import Optional

from .base import CamelModel


class PresignedUrlRequest(CamelModel):
    filename: Optional[str] = None
    content_type: Optional[str] = None


class PresignedUrlResponse(CamelModel):
    presigned_url: str
    key: str
    public_url: str
    expires_in: int
    # Echoed back for the client to set as the PUT Content-Type.
    content_type: Optional[str] = None

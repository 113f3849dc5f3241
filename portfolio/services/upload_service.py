import os
import uuid
from typing import Dict, Optional

from ..core.object_storage import ObjectStorage
from ..utils.exceptions import ValidationError


def generate_object_key(filename: str) -> str:
    """
    A random hex id plus the original extension. Keys never collide and never
    carry user-supplied path segments.
    """
    name = os.path.basename(filename)
    # Text after the last dot, so ".jpg" still yields a .jpg key.
    extension = name.rsplit(".", 1)[1].lower() if "." in name else ""
    return f"{uuid.uuid4().hex}.{extension}" if extension else uuid.uuid4().hex


class UploadService:
    """
    First step of the upload handshake: hand the browser a signed PUT URL.
    The browser uploads the bytes itself and then posts the file metadata.
    """

    def __init__(self, storage: ObjectStorage, expires_in: int = 3600):
        self.storage = storage
        self.expires_in = expires_in

    def create_presigned_upload(self, filename: Optional[str], content_type: Optional[str] = None) -> Dict[str, object]:
        if not filename or not filename.strip():
            raise ValidationError("Filename is required")
        key = generate_object_key(filename.strip())
        presigned_url = self.storage.generate_presigned_put_url(key, expires_in=self.expires_in)
        return {
            "presigned_url": presigned_url,
            "key": key,
            "public_url": self.storage.public_url(key),
            "expires_in": self.expires_in,
            "content_type": content_type,
        }

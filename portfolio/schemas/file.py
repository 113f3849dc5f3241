import uuid
from typing import Any, Dict, Optional, Union

from pydantic import AliasChoices, Field

from .base import CamelModel, OptionalId, OptionalDatetime, OptionalUTCDatetime, UTCDatetime
from .category import CategoryRead


class FileCreate(CamelModel):
    name: Optional[str] = None
    url: Optional[str] = None
    key: Optional[str] = None
    size: Optional[Union[int, str]] = None
    mime_type: Optional[str] = None
    category_id: OptionalId = None


class FileUpdate(CamelModel):
    """Partial update: only the keys present in the request body are applied."""
    name: Optional[str] = None
    location: Optional[str] = None
    captured_at: OptionalDatetime = None
    metadata: Optional[Union[str, Dict[str, Any]]] = None
    category_id: OptionalId = None


class FileRead(CamelModel):
    id: uuid.UUID
    category_id: Optional[uuid.UUID] = None
    name: str
    url: str
    key: str
    size: Optional[str] = None
    mime_type: Optional[str] = None
    uploaded_by: Optional[uuid.UUID] = None
    location: Optional[str] = None
    captured_at: OptionalUTCDatetime = None
    # The ORM attribute is metadata_json; clients see "metadata".
    metadata_json: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("metadata_json", "metadata"),
        serialization_alias="metadata",
    )
    created_at: UTCDatetime


class FileWithCategory(FileRead):
    category: Optional[CategoryRead] = None

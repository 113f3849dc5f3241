"""
Helpers for the free-form File.metadata column.

The column is text holding a JSON object. By convention a `tags` key holds a
list of strings. Values are always written back with sorted keys and compact
separators so the same mapping always produces the same text.
"""

import json
from typing import Any, Dict, Optional, Union

from .exceptions import ValidationError

FileMetadata = Dict[str, Any]


def parse_metadata(raw: Union[str, FileMetadata, None]) -> Optional[FileMetadata]:
    """
    Accepts a JSON string, a mapping or None and returns the mapping.
    Blank strings count as None.
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        if not raw.strip():
            return None
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Metadata is not valid JSON: {e.msg}") from e
    else:
        value = raw

    if not isinstance(value, dict):
        raise ValidationError("Metadata must be a JSON object")

    tags = value.get("tags")
    if tags is not None and (not isinstance(tags, list) or not all(isinstance(t, str) for t in tags)):
        raise ValidationError("Metadata 'tags' must be a list of strings")
    return value


def serialize_metadata(value: Optional[FileMetadata]) -> Optional[str]:
    if value is None:
        return None
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def normalize_metadata(raw: Union[str, FileMetadata, None]) -> Optional[str]:
    """Validates incoming metadata and returns its canonical text form."""
    return serialize_metadata(parse_metadata(raw))



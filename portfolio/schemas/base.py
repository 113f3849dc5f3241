import uuid
from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def blank_to_none(value):
    """Form inputs send "" for an unset select or date; treat it as null."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Columns hold naive UTC. Offsets on input are converted, then dropped."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def mark_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive values read back from the database are UTC; say so on the wire."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


OptionalId = Annotated[Optional[uuid.UUID], BeforeValidator(blank_to_none)]
OptionalDatetime = Annotated[Optional[datetime], BeforeValidator(blank_to_none), AfterValidator(to_naive_utc)]

# Response-side timestamps, serialized with a "Z" offset.
UTCDatetime = Annotated[datetime, AfterValidator(mark_utc)]
OptionalUTCDatetime = Annotated[Optional[datetime], AfterValidator(mark_utc)]

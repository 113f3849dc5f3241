import uuid
from typing import Optional
from pydantic import EmailStr

from .base import CamelModel


class UserCreate(CamelModel):
    email: EmailStr
    password: str
    display_name: Optional[str] = None
    role: str = "admin"


class UserRead(CamelModel):
    id: uuid.UUID
    email: EmailStr
    display_name: Optional[str] = None
    role: str


class AuthorRead(CamelModel):
    id: uuid.UUID
    display_name: Optional[str] = None
    email: Optional[str] = None


class AuthorPublic(CamelModel):
    id: uuid.UUID
    display_name: Optional[str] = None

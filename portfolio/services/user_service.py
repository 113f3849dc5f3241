from typing import Optional
from sqlalchemy.orm import Session

from ..models.user import User
from ..schemas.user import UserCreate
from ..core.security import get_password_hash, verify_password
from ..utils.exceptions import ConflictError


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.lower()).first()

def create_user(db: Session, user_in: UserCreate) -> User:
    """Creates an operator account. Emails are stored lowercased."""
    if get_user_by_email(db, user_in.email):
        raise ConflictError("Email already registered")

    db_user = User(
        email=user_in.email.lower(),
        display_name=user_in.display_name,
        hashed_password=get_password_hash(user_in.password),
        role=user_in.role,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user

def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """Returns the user when the credentials match, otherwise None."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user

from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from ..core import security
from ..core.db import get_db
from ..dependencies import require_admin
from ..models.user import User
from ..schemas.token import Token
from ..schemas.user import UserRead
from ..services import user_service
from ..utils.exceptions import UnauthorizedError

router = APIRouter(prefix="/auth", tags=["Authentication"])

@router.post("/token", response_model=Token)
def login_for_access_token(
    db: Session = Depends(get_db),
    form_data: OAuth2PasswordRequestForm = Depends(),
):
    """
    Exchanges an email (sent as `username`) and password for a bearer token.
    """
    user = user_service.authenticate_user(db=db, email=form_data.username, password=form_data.password)
    if not user:
        raise UnauthorizedError("Invalid email or password")
    return {"access_token": security.create_access_token(user), "token_type": "bearer"}

@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(require_admin)):
    return current_user

from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from .core.auth import AuthContext, ANONYMOUS
from .core.config import settings
from .core.db import get_db
from .core.object_storage import ObjectStorage, get_object_storage
from .core.security import decode_access_token
from .models import User
from .services.blog_service import BlogService
from .services.category_service import CategoryService
from .services.file_service import FileService
from .services.gallery_service import GalleryService
from .services.page_service import PageService
from .services.upload_service import UploadService

# auto_error=False: anonymous callers get an empty AuthContext instead of an immediate 401
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth/token", auto_error=False)

# --- Authentication ---

def get_auth_context(
    db: Session = Depends(get_db),
    token: Optional[str] = Depends(oauth2_scheme),
) -> AuthContext:
    """Resolves the bearer token, if any, into an AuthContext."""
    if not token:
        return ANONYMOUS
    user_id = decode_access_token(token)
    if user_id is None:
        return ANONYMOUS
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        return ANONYMOUS
    return AuthContext(principal=user)

def require_admin(auth: AuthContext = Depends(get_auth_context)) -> User:
    """Dependency for admin-only routes; raises UnauthorizedError for anyone else."""
    return auth.require_admin()

# --- Service Dependencies ---

def get_category_service(
    db: Session = Depends(get_db),
    storage: ObjectStorage = Depends(get_object_storage),
) -> CategoryService:
    return CategoryService(db=db, storage=storage)

def get_file_service(
    db: Session = Depends(get_db),
    storage: ObjectStorage = Depends(get_object_storage),
) -> FileService:
    return FileService(db=db, storage=storage)

def get_page_service(db: Session = Depends(get_db)) -> PageService:
    return PageService(db=db)

def get_blog_service(db: Session = Depends(get_db)) -> BlogService:
    return BlogService(db=db)

def get_gallery_service(db: Session = Depends(get_db)) -> GalleryService:
    return GalleryService(db=db)

def get_upload_service(storage: ObjectStorage = Depends(get_object_storage)) -> UploadService:
    return UploadService(storage=storage, expires_in=settings.PRESIGNED_URL_EXPIRE_SECONDS)


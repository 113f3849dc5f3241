from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .. import schemas
from ..core.db import get_db
from ..dependencies import require_admin
from ..models.user import User
from ..services.stats_service import get_dashboard_stats

router = APIRouter(prefix="/admin", tags=["Dashboard"])

@router.get("/stats", response_model=schemas.DashboardStats)
def read_stats(
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return get_dashboard_stats(db)

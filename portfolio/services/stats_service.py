from typing import Dict

from sqlalchemy.orm import Session

from ..models import BlogPost, Category, File


def get_dashboard_stats(db: Session) -> Dict[str, int]:
    """Counts shown on the admin dashboard landing screen."""
    return {
        "categories": db.query(Category).count(),
        "files": db.query(File).count(),
        "blogs": db.query(BlogPost).count(),
    }

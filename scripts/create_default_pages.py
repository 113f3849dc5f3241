#!/usr/bin/env python
"""
Seeds the default Home and Exhibition pages. Pages whose slug already
exists are left untouched, so the script can be run repeatedly.
"""

import sys

from portfolio.core.db import SessionLocal
from portfolio.main import create_tables
from portfolio.services.page_service import PageService


def main() -> int:
    create_tables()
    db = SessionLocal()
    try:
        created = PageService(db).create_default_pages()
        for page in created:
            print(f"Created page: {page.title}")
        if not created:
            print("Default pages already exist, nothing to do.")
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())

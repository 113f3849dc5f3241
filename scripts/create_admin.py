#!/usr/bin/env python
"""
Creates an admin account for the dashboard.

Usage:
    python scripts/create_admin.py admin@example.com 'secret' --name "Admin User"
"""

import argparse
import getpass
import sys

from portfolio.core.db import SessionLocal
from portfolio.main import create_tables
from portfolio.schemas.user import UserCreate
from portfolio.services import user_service
from portfolio.utils.exceptions import ConflictError


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create an admin user")
    parser.add_argument("email")
    parser.add_argument("password", nargs="?", help="prompted for when omitted")
    parser.add_argument("--name", dest="display_name", default=None)
    args = parser.parse_args(argv)

    password = args.password or getpass.getpass("Password: ")
    if not password:
        print("Password must not be empty", file=sys.stderr)
        return 1

    create_tables()
    db = SessionLocal()
    try:
        user = user_service.create_user(
            db,
            UserCreate(email=args.email, password=password, display_name=args.display_name),
        )
    except ConflictError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    finally:
        db.close()

    print(f"Created admin user {user.email} ({user.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())

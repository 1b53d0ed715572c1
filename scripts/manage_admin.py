#!/usr/bin/env python3
"""Create or reset the administrator used for event-log corrections.

Floor terminals append start/stop events without credentials; only
PUT/DELETE /api/v1/logs/{id} require an admin bearer token, obtained from
POST /api/v1/auth/token.

Usage:
  # create or reset the account
  python3 scripts/manage_admin.py --username supervisor --password s3cret

  # also print a bearer token for a one-off correction with curl
  python3 scripts/manage_admin.py --username supervisor --password s3cret --print-token

Tables are created if missing.
"""
import sys
from pathlib import Path
import argparse

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy.exc import SQLAlchemyError

from esp_tracker.auth import authenticate_admin, create_access_token
from esp_tracker.db import database, transaction
from esp_tracker import crud
from esp_tracker.security import get_password_hash


def upsert_admin(db, username, password, name="Administrator"):
    """创建管理员，已存在时重置密码；返回 (admin, 是否新建)"""
    admin = crud.get_admin_by_username(db, username)
    if admin is None:
        return crud.create_admin(db, username, password, name=name), True
    with transaction(db):
        admin.hashed_password = get_password_hash(password)
        admin.name = name
    return admin, False


def issue_token(db, username, password):
    """用刚设置的凭据走一遍登录校验，成功时返回 bearer token"""
    admin = authenticate_admin(db, username, password)
    if admin is None:
        return None
    return create_access_token({"sub": admin.username})


def main():
    parser = argparse.ArgumentParser(
        description='Create or reset the administrator allowed to correct or delete logged events'
    )
    parser.add_argument("--username", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument("--name", default="Administrator")
    parser.add_argument(
        "--print-token",
        action="store_true",
        help="Print a bearer token for PUT/DELETE /api/v1/logs/{id}",
    )
    args = parser.parse_args()

    try:
        database.create_all()
    except SQLAlchemyError as exc:
        print("Warning: could not create tables on startup:", exc)

    with database.session() as db:
        _, created = upsert_admin(db, args.username, args.password, name=args.name)
        print(f"{'Created' if created else 'Reset password for'} admin: {args.username}")

        if args.print_token:
            token = issue_token(db, args.username, args.password)
            if token is None:
                print("Login check failed; no token issued")
                sys.exit(1)
            print(f"Authorization: Bearer {token}")


if __name__ == '__main__':
    main()

#!/usr/bin/env python3
"""Seed the user directory and a sample process catalog.

This script is runnable directly (python scripts/seed_data.py) and also import-safe.
Existing id codes and job codes are skipped, so it can be re-run safely.
"""
import sys
from pathlib import Path
from datetime import date

# Ensure project root is on sys.path when running the script directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy.exc import SQLAlchemyError

from esp_tracker.db import database
from esp_tracker import crud, schemas


import argparse


DEFAULT_USERS = [
    ("E1001", "张伟"),
    ("E1002", "王芳"),
    ("E1003", "李娜"),
    ("E1004", "刘强"),
    ("E1005", "陈静"),
]

DEFAULT_JOBS = {
    ("J1", "ESP Controller Board"): [
        (1, "SMT 贴片", 2),
        (2, "回流焊", 1),
        (3, "插件焊接", 2),
        (4, "功能测试", 1),
    ],
    ("J2", "Power Module"): [
        (10, "绕线", 1),
        (20, "点胶", 1),
        (30, "老化测试", 1),
    ],
}


def seed_users(db):
    for id_code, name in DEFAULT_USERS:
        if crud.get_user_by_id_code(db, id_code):
            print(f"User {id_code} already exists")
            continue
        crud.create_user(db, schemas.UserCreate(id_code=id_code, name=name))
        print(f"Created user {id_code} ({name})")


def seed_catalog(db):
    for (job_code, job_name), steps in DEFAULT_JOBS.items():
        if crud.get_job_name(db, job_code) is not None:
            print(f"Job {job_code} already in catalog")
            continue
        crud.create_process_steps_bulk(
            db,
            job_code,
            job_name,
            date.today(),
            [
                schemas.BulkStep(process_number=number, process_description=desc, worker_count=workers)
                for number, desc, workers in steps
            ],
        )
        print(f"Loaded {len(steps)} process steps for {job_code}")


def main():
    parser = argparse.ArgumentParser(description='Seed users and a sample process catalog.')
    parser.add_argument('--no-users', action='store_true', help='Skip seeding users')
    parser.add_argument('--no-catalog', action='store_true', help='Skip seeding the process catalog')
    args = parser.parse_args()

    try:
        database.create_all()
    except SQLAlchemyError as exc:
        print("Warning: could not create tables on startup:", exc)

    with database.session() as db:
        if not args.no_users:
            seed_users(db)
        if not args.no_catalog:
            seed_catalog(db)
    print("Done")


if __name__ == '__main__':
    main()

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

# Ensure project root is on sys.path so tests can import 'esp_tracker' package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from esp_tracker import crud, schemas
from esp_tracker.database.connection import Database, get_db
from esp_tracker.main import app


@pytest.fixture()
def database():
    # Fresh in-memory schema per test; StaticPool keeps the single connection alive across sessions
    test_db = Database("sqlite://", poolclass=StaticPool)
    test_db.create_all()
    yield test_db
    test_db.drop_all()
    test_db.engine.dispose()


@pytest.fixture()
def db(database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(database):
    app.dependency_overrides[get_db] = database.get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def catalog(db):
    """作业 J1 的四道工序"""
    return crud.create_process_steps_bulk(
        db,
        "J1",
        "Controller Board",
        None,
        [
            schemas.BulkStep(process_number=1, process_description="SMT"),
            schemas.BulkStep(process_number=2, process_description="Reflow"),
            schemas.BulkStep(process_number=3, process_description="Assembly"),
            schemas.BulkStep(process_number=4, process_description="Test"),
        ],
    )


@pytest.fixture()
def operator(db):
    return crud.create_user(db, schemas.UserCreate(id_code="E1001", name="Alice"))

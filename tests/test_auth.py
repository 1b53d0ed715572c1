import pytest

from esp_tracker import crud
from esp_tracker.auth import create_access_token, verify_token


@pytest.fixture()
def admin_headers(client, db):
    crud.create_admin(db, "supervisor", "s3cret", name="Supervisor")
    r = client.post("/api/v1/auth/token", data={"username": "supervisor", "password": "s3cret"})
    assert r.status_code == 200
    token = r.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


def test_token_round_trip():
    token = create_access_token({"sub": "supervisor"})
    assert verify_token(token) == "supervisor"
    assert verify_token("garbage") is None


def test_login_fails_with_wrong_credentials(client, db):
    crud.create_admin(db, "supervisor", "s3cret")
    r = client.post("/api/v1/auth/token", data={"username": "supervisor", "password": "bad"})
    assert r.status_code == 401


def test_admin_can_correct_and_delete_events(client, catalog, admin_headers):
    plan = client.post("/api/v1/work-plans", json={"production_date": "2025-07-16", "job_code": "J1"}).json()
    event = client.post(
        "/api/v1/logs",
        json={"work_plan_id": plan["id"], "process_number": 1, "status": "start", "timestamp": "2025-07-16T08:00:00"},
    ).json()

    r = client.put(
        f"/api/v1/logs/{event['id']}",
        json={"work_plan_id": plan["id"], "process_number": 2, "status": "stop", "timestamp": "2025-07-16T08:30:00"},
        headers=admin_headers,
    )
    assert r.status_code == 200
    assert r.json()["process_number"] == 2
    assert r.json()["status"] == "stop"

    r = client.delete(f"/api/v1/logs/{event['id']}", headers=admin_headers)
    assert r.status_code == 200
    assert client.get(f"/api/v1/logs/{event['id']}").status_code == 404
    assert client.delete(f"/api/v1/logs/{event['id']}", headers=admin_headers).status_code == 404


def test_correction_of_missing_event_returns_404(client, catalog, admin_headers):
    plan = client.post("/api/v1/work-plans", json={"production_date": "2025-07-16", "job_code": "J1"}).json()
    r = client.put(
        "/api/v1/logs/999",
        json={"work_plan_id": plan["id"], "process_number": 1, "status": "stop", "timestamp": "2025-07-16T08:30:00"},
        headers=admin_headers,
    )
    assert r.status_code == 404

from datetime import date

import pytest

from esp_tracker import crud, schemas
from esp_tracker.core.exceptions import ReferentialViolation
from esp_tracker.models import FinishedFlag, Log, WorkPlan, WorkPlanOperator


def _plan_payload(**overrides):
    payload = {
        "production_date": "2025-07-16",
        "job_code": "J1",
        "start_time": "08:00:00",
        "end_time": "17:00:00",
    }
    payload.update(overrides)
    return payload


def test_create_work_plan_round_trip(client, catalog, operator):
    r = client.post(
        "/api/v1/work-plans",
        json=_plan_payload(
            production_date="2025-07-16T08:30:00",
            operators=[{"user_id": operator.id}, {"id_code": "E9999"}],
        ),
    )
    assert r.status_code == 201
    body = r.json()
    assert body["production_date"] == "2025-07-16"
    assert body["job_name"] == "Controller Board"
    assert body["is_finished"] is False
    assert len(body["operators"]) == 2
    assert body["operator_names"] == ["Alice"]
    assert body["operator_codes"] == ["E9999"]

    r = client.get(f"/api/v1/work-plans/{body['id']}")
    assert r.status_code == 200
    assert r.json() == body


def test_create_rejects_unknown_job_code(client, catalog):
    r = client.post("/api/v1/work-plans", json=_plan_payload(job_code="NOPE"))
    assert r.status_code == 404
    assert r.json()["success"] is False
    assert r.json()["message"] == "Job code not found"


def test_create_rejects_unknown_user_id(client, catalog):
    r = client.post("/api/v1/work-plans", json=_plan_payload(operators=[{"user_id": 999}]))
    assert r.status_code == 404
    assert client.get("/api/v1/work-plans").json() == []


def test_operator_reference_must_be_exactly_one(client, catalog):
    r = client.post("/api/v1/work-plans", json=_plan_payload(operators=[{"user_id": 1, "id_code": "E1"}]))
    assert r.status_code == 422
    r = client.post("/api/v1/work-plans", json=_plan_payload(operators=[{}]))
    assert r.status_code == 422


def test_at_most_four_operators(client, catalog):
    operators = [{"id_code": f"E{i}"} for i in range(5)]
    r = client.post("/api/v1/work-plans", json=_plan_payload(operators=operators))
    assert r.status_code == 422


def test_create_is_atomic_when_operator_insert_fails(db, catalog):
    plan = schemas.WorkPlanCreate(
        production_date=date(2025, 7, 16),
        job_code="J1",
        job_name="Controller Board",
        operators=[{"id_code": "E1"}, {"user_id": 999}],
    )
    with pytest.raises(ReferentialViolation):
        crud.create_work_plan(db, plan)
    assert db.query(WorkPlan).count() == 0
    assert db.query(WorkPlanOperator).count() == 0


def test_update_without_operators_keeps_assignments(client, catalog):
    created = client.post(
        "/api/v1/work-plans", json=_plan_payload(operators=[{"id_code": "E1"}, {"id_code": "E2"}])
    ).json()

    r = client.put(f"/api/v1/work-plans/{created['id']}", json=_plan_payload(start_time="09:00:00"))
    assert r.status_code == 200
    body = r.json()
    assert body["start_time"] == "09:00:00"
    assert body["operator_codes"] == ["E1", "E2"]


def test_update_with_empty_operators_clears_assignments(client, catalog):
    created = client.post("/api/v1/work-plans", json=_plan_payload(operators=[{"id_code": "E1"}])).json()

    r = client.put(f"/api/v1/work-plans/{created['id']}", json=_plan_payload(operators=[]))
    assert r.status_code == 200
    assert r.json()["operators"] == []


def test_update_with_operators_replaces_set(client, catalog):
    created = client.post("/api/v1/work-plans", json=_plan_payload(operators=[{"id_code": "E1"}])).json()

    r = client.put(
        f"/api/v1/work-plans/{created['id']}",
        json=_plan_payload(operators=[{"id_code": "E7"}, {"id_code": "E8"}]),
    )
    assert r.json()["operator_codes"] == ["E7", "E8"]


def test_update_rejects_explicit_null_operators(client, catalog):
    created = client.post("/api/v1/work-plans", json=_plan_payload(operators=[{"id_code": "E1"}])).json()

    r = client.put(f"/api/v1/work-plans/{created['id']}", json=_plan_payload(operators=None))
    assert r.status_code == 422
    assert client.get(f"/api/v1/work-plans/{created['id']}").json()["operator_codes"] == ["E1"]


def test_replace_operators_endpoint(client, catalog, operator):
    created = client.post("/api/v1/work-plans", json=_plan_payload(operators=[{"id_code": "E1"}])).json()

    r = client.put(f"/api/v1/work-plans/{created['id']}/operators", json={"operators": [{"user_id": operator.id}]})
    assert r.status_code == 200
    assert r.json()["operator_names"] == ["Alice"]
    assert r.json()["operator_codes"] == []


def test_update_missing_work_plan_returns_404(client, catalog):
    r = client.put("/api/v1/work-plans/999", json=_plan_payload())
    assert r.status_code == 404


def test_list_filters_by_date(client, catalog):
    client.post("/api/v1/work-plans", json=_plan_payload())
    client.post("/api/v1/work-plans", json=_plan_payload(production_date="2025-07-17"))

    assert len(client.get("/api/v1/work-plans").json()) == 2
    plans = client.get("/api/v1/work-plans", params={"date": "2025-07-17"}).json()
    assert [p["production_date"] for p in plans] == ["2025-07-17"]


def test_finish_toggle_keeps_single_flag(client, db, catalog):
    created = client.post("/api/v1/work-plans", json=_plan_payload()).json()
    plan_id = created["id"]

    assert client.patch(f"/api/v1/work-plans/{plan_id}/finish").status_code == 200
    assert client.patch(f"/api/v1/work-plans/{plan_id}/unfinish").status_code == 200
    assert client.patch(f"/api/v1/work-plans/{plan_id}/finish").status_code == 200

    body = client.get(f"/api/v1/work-plans/{plan_id}").json()
    assert body["is_finished"] is True
    assert body["finished_at"] is not None
    assert db.query(FinishedFlag).filter(FinishedFlag.work_plan_id == plan_id).count() == 1


def test_finish_missing_work_plan_returns_404(client):
    assert client.patch("/api/v1/work-plans/999/finish").status_code == 404


def test_delete_removes_flag_operators_and_events(client, db, catalog):
    created = client.post("/api/v1/work-plans", json=_plan_payload(operators=[{"id_code": "E1"}])).json()
    plan_id = created["id"]
    client.patch(f"/api/v1/work-plans/{plan_id}/finish")
    client.post("/api/v1/logs/start", json={"work_plan_id": plan_id, "process_number": 1})

    r = client.delete(f"/api/v1/work-plans/{plan_id}")
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Work plan deleted successfully"}

    assert client.get(f"/api/v1/work-plans/{plan_id}").status_code == 404
    assert client.get(f"/api/v1/logs/work-plan/{plan_id}/status").json() == []
    assert db.query(FinishedFlag).count() == 0
    assert db.query(WorkPlanOperator).count() == 0
    assert db.query(Log).count() == 0


def test_delete_missing_work_plan_returns_404(client):
    assert client.delete("/api/v1/work-plans/999").status_code == 404


def test_update_keeps_job_name_copied_at_creation(client, catalog):
    created = client.post("/api/v1/work-plans", json=_plan_payload()).json()
    assert created["job_name"] == "Controller Board"

    r = client.put(f"/api/v1/process-steps/{catalog[0].id}", json={"job_name": "Renamed Board"})
    assert r.status_code == 200

    r = client.put(f"/api/v1/work-plans/{created['id']}", json=_plan_payload(start_time="10:00:00"))
    assert r.status_code == 200
    assert r.json()["job_name"] == "Controller Board"


def test_update_with_new_job_code_takes_catalog_name(client, catalog):
    client.post(
        "/api/v1/process-steps/bulk",
        json={"job_code": "J2", "job_name": "Power Module", "steps": [{"process_number": 1}]},
    )
    created = client.post("/api/v1/work-plans", json=_plan_payload()).json()

    r = client.put(f"/api/v1/work-plans/{created['id']}", json=_plan_payload(job_code="J2"))
    assert r.json()["job_code"] == "J2"
    assert r.json()["job_name"] == "Power Module"


def test_mark_finished_for_missing_work_plan_is_referential_violation(db):
    with pytest.raises(ReferentialViolation):
        crud.mark_finished(db, 999)
    assert db.query(FinishedFlag).count() == 0


def test_finish_is_independent_of_process_status(client, catalog):
    plan_id = client.post("/api/v1/work-plans", json=_plan_payload()).json()["id"]
    client.post("/api/v1/logs/start", json={"work_plan_id": plan_id, "process_number": 1})

    assert client.patch(f"/api/v1/work-plans/{plan_id}/finish").status_code == 200

    assert client.get(f"/api/v1/work-plans/{plan_id}").json()["is_finished"] is True
    rows = client.get(f"/api/v1/logs/work-plan/{plan_id}/status").json()
    assert [(row["process_number"], row["status"]) for row in rows] == [(1, "start")]

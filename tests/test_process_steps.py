from datetime import date

from esp_tracker.utils.helpers import day_bounds, normalize_production_date


def test_bulk_import_and_list(client):
    r = client.post(
        "/api/v1/process-steps/bulk",
        json={
            "job_code": "J2",
            "job_name": "Power Module",
            "date_recorded": "2025-07-01",
            "steps": [
                {"process_number": 20, "process_description": "Potting"},
                {"process_number": 10, "process_description": "Winding", "worker_count": 2},
            ],
        },
    )
    assert r.status_code == 201
    assert len(r.json()) == 2

    steps = client.get("/api/v1/process-steps/job/J2").json()
    assert [s["process_number"] for s in steps] == [10, 20]
    assert steps[0]["worker_count"] == 2

    filtered = client.get("/api/v1/process-steps", params={"date_recorded": "2025-07-02"}).json()
    assert filtered == []


def test_bulk_import_requires_steps(client):
    r = client.post("/api/v1/process-steps/bulk", json={"job_code": "J2", "job_name": "Power Module", "steps": []})
    assert r.status_code == 422


def test_job_codes_and_search(client, catalog):
    client.post("/api/v1/process-steps", json={"job_code": "K9", "job_name": "Cable Harness", "process_number": 1})

    codes = client.get("/api/v1/process-steps/job-codes").json()
    assert codes == [
        {"job_code": "J1", "job_name": "Controller Board"},
        {"job_code": "K9", "job_name": "Cable Harness"},
    ]

    assert client.get("/api/v1/process-steps/search", params={"query": "harness"}).json() == [
        {"job_code": "K9", "job_name": "Cable Harness"}
    ]
    assert client.get("/api/v1/process-steps/search", params={"query": "J1"}).json() == [
        {"job_code": "J1", "job_name": "Controller Board"}
    ]
    assert client.get("/api/v1/process-steps/search", params={"query": ""}).json() == []


def test_process_description_lookup(client, catalog):
    r = client.get("/api/v1/process-steps/job/J1/2")
    assert r.status_code == 200
    assert r.json()["process_description"] == "Reflow"
    assert client.get("/api/v1/process-steps/job/J1/99").status_code == 404


def test_update_and_delete_step(client, catalog):
    step_id = catalog[0].id
    r = client.put(f"/api/v1/process-steps/{step_id}", json={"process_description": "SMT placement"})
    assert r.status_code == 200
    assert r.json()["process_description"] == "SMT placement"
    assert r.json()["process_number"] == 1

    assert client.delete(f"/api/v1/process-steps/{step_id}").status_code == 200
    assert client.get(f"/api/v1/process-steps/{step_id}").status_code == 404
    assert client.put("/api/v1/process-steps/999", json={"worker_count": 1}).status_code == 404


def test_normalize_production_date():
    assert normalize_production_date("2025-07-16T08:30:00") == date(2025, 7, 16)
    assert normalize_production_date("2025-07-16 23:59:59") == date(2025, 7, 16)
    assert normalize_production_date(date(2025, 7, 16)) == date(2025, 7, 16)


def test_day_bounds():
    start, end = day_bounds(date(2025, 7, 16))
    assert (end - start).days == 1
    assert start.hour == 0 and start.date() == date(2025, 7, 16)


def test_update_rejects_null_for_required_fields(client, catalog):
    step_id = catalog[0].id
    assert client.put(f"/api/v1/process-steps/{step_id}", json={"job_name": None}).status_code == 422
    assert client.put(f"/api/v1/process-steps/{step_id}", json={"process_number": None}).status_code == 422

    r = client.put(f"/api/v1/process-steps/{step_id}", json={"process_description": None})
    assert r.status_code == 200
    assert r.json()["job_name"] == "Controller Board"
    assert r.json()["process_description"] is None

from esp_tracker import crud, schemas


def test_create_and_get_user(client):
    r = client.post("/api/v1/users", json={"id_code": "E2001", "name": "Bob"})
    assert r.status_code == 201
    user = r.json()

    assert client.get(f"/api/v1/users/{user['id']}").json() == user
    assert client.get("/api/v1/users/code/E2001").json() == user
    assert client.get("/api/v1/users/code/E0000").status_code == 404


def test_duplicate_id_code_conflicts(client):
    client.post("/api/v1/users", json={"id_code": "E2001", "name": "Bob"})
    r = client.post("/api/v1/users", json={"id_code": "E2001", "name": "Robert"})
    assert r.status_code == 409
    assert r.json()["message"] == "ID code already exists"


def test_update_to_existing_id_code_conflicts(client):
    client.post("/api/v1/users", json={"id_code": "E2001", "name": "Bob"})
    other = client.post("/api/v1/users", json={"id_code": "E2002", "name": "Carol"}).json()

    r = client.put(f"/api/v1/users/{other['id']}", json={"id_code": "E2001"})
    assert r.status_code == 409
    r = client.put(f"/api/v1/users/{other['id']}", json={"name": "Caroline"})
    assert r.status_code == 200
    assert r.json() == {"id": other["id"], "id_code": "E2002", "name": "Caroline"}


def test_update_missing_user_returns_404(client):
    assert client.put("/api/v1/users/999", json={"name": "Nobody"}).status_code == 404


def test_list_excludes_system_accounts(client, db):
    crud.create_user(db, schemas.UserCreate(id_code="EMP001", name="Test Account"))
    crud.create_user(db, schemas.UserCreate(id_code="E3001", name="Dana"))

    codes = [u["id_code"] for u in client.get("/api/v1/users").json()]
    assert codes == ["E3001"]
    assert client.get("/api/v1/users/code/EMP001").status_code == 200


def test_delete_user(client):
    user = client.post("/api/v1/users", json={"id_code": "E2001", "name": "Bob"}).json()
    r = client.delete(f"/api/v1/users/{user['id']}")
    assert r.status_code == 200
    assert client.get(f"/api/v1/users/{user['id']}").status_code == 404
    assert client.delete(f"/api/v1/users/{user['id']}").status_code == 404


def test_user_work_plans(client, catalog, operator):
    client.post(
        "/api/v1/work-plans",
        json={"production_date": "2025-07-16", "job_code": "J1", "operators": [{"user_id": operator.id}]},
    )
    client.post(
        "/api/v1/work-plans",
        json={"production_date": "2025-07-17", "job_code": "J1", "operators": [{"id_code": "E1001"}]},
    )

    by_id = client.get(f"/api/v1/users/{operator.id}/work-plans").json()
    assert [p["production_date"] for p in by_id] == ["2025-07-16"]
    assert by_id[0]["operator_names"] == ["Alice"]

    by_code = client.get("/api/v1/users/code/E1001/work-plans").json()
    assert [p["production_date"] for p in by_code] == ["2025-07-17"]
    assert by_code[0]["operator_names"] == ["Alice"]

    filtered = client.get("/api/v1/users/code/E1001/work-plans", params={"date": "2025-07-16"}).json()
    assert filtered == []


def test_resolve_operator_name(db, operator):
    assert crud.resolve_operator_name(db, user_id=operator.id) == "Alice"
    assert crud.resolve_operator_name(db, id_code="E1001") == "Alice"
    assert crud.resolve_operator_name(db, id_code="E404") is None


def test_update_rejects_null_for_required_fields(client):
    user = client.post("/api/v1/users", json={"id_code": "E2001", "name": "Bob"}).json()

    assert client.put(f"/api/v1/users/{user['id']}", json={"name": None}).status_code == 422
    assert client.put(f"/api/v1/users/{user['id']}", json={"id_code": None}).status_code == 422
    assert client.get(f"/api/v1/users/{user['id']}").json() == user

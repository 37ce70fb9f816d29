"""Project directory operations: create, list, lookup and member roster."""

from decimal import Decimal

from siteops.models.project import Project


def _project_payload(**overrides):
    payload = {
        "name": "Jembatan Citarum",
        "description": "Rehabilitasi jembatan",
        "location": "Bandung",
        "start_date": "2026-02-01T00:00:00",
        "end_date": None,
        "status": "planning",
        "budget": 100000,
    }
    payload.update(overrides)
    return payload


def test_create_project_returns_persisted_record(client):
    resp = client.post("/rpc/createProject", json=_project_payload())
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] > 0
    assert data["name"] == "Jembatan Citarum"
    assert data["status"] == "planning"
    assert data["end_date"] is None
    assert data["created_at"]
    assert Decimal(data["budget"]) == Decimal("100000")


def test_create_project_budget_round_trips_exactly(client):
    resp = client.post("/rpc/createProject", json=_project_payload(budget="12345678901.23"))
    assert resp.status_code == 200
    assert Decimal(resp.json()["budget"]) == Decimal("12345678901.23")

    fetched = client.get("/rpc/getProjectById", params={"id": resp.json()["id"]})
    assert Decimal(fetched.json()["budget"]) == Decimal("12345678901.23")


def test_create_project_without_budget(client):
    resp = client.post("/rpc/createProject", json=_project_payload(budget=None, description=None))
    assert resp.status_code == 200
    assert resp.json()["budget"] is None
    assert resp.json()["description"] is None


def test_create_project_allows_duplicate_names(client):
    first = client.post("/rpc/createProject", json=_project_payload())
    second = client.post("/rpc/createProject", json=_project_payload())
    assert first.status_code == 200 and second.status_code == 200
    assert first.json()["id"] != second.json()["id"]


def test_create_project_rejects_unknown_status(client, db):
    resp = client.post("/rpc/createProject", json=_project_payload(status="paused"))
    assert resp.status_code == 422
    assert db.query(Project).count() == 0


def test_create_project_rejects_extra_budget_precision(client):
    resp = client.post("/rpc/createProject", json=_project_payload(budget="10.005"))
    assert resp.status_code == 422


def test_get_projects_lists_all_in_insertion_order(client):
    for name in ("A", "B", "C"):
        client.post("/rpc/createProject", json=_project_payload(name=name))
    resp = client.get("/rpc/getProjects")
    assert resp.status_code == 200
    assert [p["name"] for p in resp.json()] == ["A", "B", "C"]


def test_get_project_by_id_missing_returns_null(client):
    resp = client.get("/rpc/getProjectById", params={"id": 999})
    assert resp.status_code == 200
    assert resp.json() is None


def test_project_member_roster(client, seed_project, seed_users, seed_company):
    resp = client.post(
        "/rpc/addProjectMember",
        json={
            "project_id": seed_project.id,
            "user_id": seed_users["contractor"].id,
            "company_id": seed_company.id,
            "role": "main_contractor",
            "work_package": "Struktur",
        },
    )
    assert resp.status_code == 200
    member = resp.json()
    assert member["role"] == "main_contractor"
    assert member["user_name"] == "Contractor"
    assert member["company_name"] == "PT Bangun Jaya"

    list_resp = client.get("/rpc/getProjectMembers", params={"projectId": seed_project.id})
    assert list_resp.status_code == 200
    assert len(list_resp.json()) == 1
    assert list_resp.json()[0]["work_package"] == "Struktur"


def test_add_member_to_missing_project(client, seed_users, seed_company):
    resp = client.post(
        "/rpc/addProjectMember",
        json={
            "project_id": 404,
            "user_id": seed_users["owner"].id,
            "company_id": seed_company.id,
            "role": "owner",
        },
    )
    assert resp.status_code == 404
    assert "Project with id 404" in resp.json()["detail"]


def test_add_member_with_unknown_company_violates_constraint(client, seed_project, seed_users):
    resp = client.post(
        "/rpc/addProjectMember",
        json={
            "project_id": seed_project.id,
            "user_id": seed_users["owner"].id,
            "company_id": 999,
            "role": "owner",
        },
    )
    assert resp.status_code == 409


def test_add_member_rejects_unknown_role(client, seed_project, seed_users, seed_company):
    resp = client.post(
        "/rpc/addProjectMember",
        json={
            "project_id": seed_project.id,
            "user_id": seed_users["owner"].id,
            "company_id": seed_company.id,
            "role": "foreman",
        },
    )
    assert resp.status_code == 422


def test_project_dates_are_normalized_to_utc(client):
    resp = client.post(
        "/rpc/createProject",
        json=_project_payload(start_date="2026-02-01T07:00:00+07:00", end_date="2026-12-31T00:00:00Z"),
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["start_date"] == "2026-02-01T00:00:00Z"
    assert data["end_date"] == "2026-12-31T00:00:00Z"
    assert data["created_at"].endswith("Z")


def test_openapi_documents_decimal_wire_format(client):
    schemas = client.get("/openapi.json").json()["components"]["schemas"]
    assert "JSON string" in schemas["ProjectOut"]["properties"]["budget"]["description"]
    assert "JSON string" in schemas["PaymentApplicationOut"]["properties"]["amount"]["description"]

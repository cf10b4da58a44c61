from __future__ import annotations

from conftest import bearer


def test_onboarding_flow_reflects_in_stats(client):
    registered = client.post(
        "/api/auth/register",
        json={"username": "principal", "email": "principal@lincoln.edu", "password": "lincoln123"},
    ).get_json()
    headers = bearer(registered["token"])
    admin_id = registered["user"]["id"]

    institution = client.post(
        "/api/institutions",
        json={"name": "Lincoln High", "type": "high-school", "educationSystem": "american"},
        headers=headers,
    ).get_json()
    configured = client.post(f"/api/institutions/{institution['id']}/configure", headers=headers)
    student = client.post(
        "/api/students",
        json={"institutionId": institution["id"], "userId": admin_id, "studentId": "S100"},
        headers=headers,
    )
    stats = client.get(f"/api/institutions/{institution['id']}/stats", headers=headers).get_json()
    me = client.get("/api/auth/me", headers=headers).get_json()

    assert configured.status_code == 200
    assert student.status_code == 201
    assert stats["totalStudents"] == 1
    assert stats["classroomUsage"] == 0
    assert me["institution"]["isConfigured"] is True
    assert me["user"]["institutionId"] == institution["id"]


def test_unexpected_errors_become_500(client, container, register_user, monkeypatch):
    _, headers = register_user()

    def boom(*args, **kwargs):
        raise RuntimeError("database went away")

    monkeypatch.setattr(container.institutions_repo, "create", boom)
    res = client.post(
        "/api/institutions",
        json={"name": "X", "type": "university", "educationSystem": "ib"},
        headers=headers,
    )

    assert res.status_code == 500
    assert res.get_json() == {"message": "Internal server error"}

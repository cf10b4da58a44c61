from __future__ import annotations


def test_create_institution_links_creator_and_logs(client, container, register_user):
    user, headers = register_user()

    res = client.post(
        "/api/institutions",
        json={
            "name": "Lincoln High",
            "type": "high-school",
            "educationSystem": "american",
            "location": "Springfield",
            "structure": {"grades": [9, 10, 11, 12]},
        },
        headers=headers,
    )

    assert res.status_code == 201
    institution = res.get_json()
    assert institution["isConfigured"] is False
    assert institution["educationSystem"] == "american"
    assert institution["structure"] == {"grades": [9, 10, 11, 12]}
    assert container.users_repo.get_by_id(user["id"]).institution_id == institution["id"]

    [activity] = container.activities_repo.rows
    assert activity.action == "institution_created"
    assert activity.metadata == {"institutionType": "high-school", "educationSystem": "american"}


def test_create_institution_lists_every_invalid_field(client, register_user):
    _, headers = register_user()

    res = client.post("/api/institutions", json={"type": "castle"}, headers=headers)

    assert res.status_code == 400
    fields = {e["field"] for e in res.get_json()["errors"]}
    assert fields == {"name", "type", "educationSystem"}


def test_get_missing_institution_is_404(client, register_user):
    _, headers = register_user()

    res = client.get("/api/institutions/999", headers=headers)

    assert res.status_code == 404


def test_configure_is_one_way_and_idempotent(client, admin_with_institution):
    _, headers, institution_id = admin_with_institution()
    before = client.get(f"/api/institutions/{institution_id}", headers=headers).get_json()
    assert before["isConfigured"] is False

    first = client.post(f"/api/institutions/{institution_id}/configure", headers=headers)
    second = client.post(f"/api/institutions/{institution_id}/configure", headers=headers)

    assert first.status_code == 200
    assert second.status_code == 200
    assert first.get_json()["message"] == "Institution configured successfully"
    after = client.get(f"/api/institutions/{institution_id}", headers=headers).get_json()
    assert after["isConfigured"] is True


def test_configure_missing_institution_is_404(client, register_user):
    _, headers = register_user()

    res = client.post("/api/institutions/42/configure", headers=headers)

    assert res.status_code == 404


def test_update_institution_is_partial(client, admin_with_institution):
    _, headers, institution_id = admin_with_institution()

    res = client.put(
        f"/api/institutions/{institution_id}",
        json={"location": "Downtown", "size": "large"},
        headers=headers,
    )

    assert res.status_code == 200
    data = res.get_json()
    assert data["name"] == "Lincoln High"
    assert data["location"] == "Downtown"
    assert data["size"] == "large"


def test_update_cannot_flip_configured_flag(client, admin_with_institution):
    _, headers, institution_id = admin_with_institution()

    res = client.put(f"/api/institutions/{institution_id}", json={"isConfigured": True}, headers=headers)

    assert res.status_code == 200
    assert res.get_json()["isConfigured"] is False


def test_update_rejects_bad_enum(client, admin_with_institution):
    _, headers, institution_id = admin_with_institution()

    res = client.put(f"/api/institutions/{institution_id}", json={"educationSystem": "martian"}, headers=headers)

    assert res.status_code == 400


def test_update_missing_institution_is_404(client, register_user):
    _, headers = register_user()

    res = client.put("/api/institutions/5", json={"name": "X"}, headers=headers)

    assert res.status_code == 404


def test_recent_activities_newest_first_with_limit(client, admin_with_institution):
    _, headers, institution_id = admin_with_institution()
    client.post(f"/api/institutions/{institution_id}/configure", headers=headers)
    client.post(
        f"/api/institutions/{institution_id}/faculties",
        json={"name": "Science"},
        headers=headers,
    )

    everything = client.get(f"/api/institutions/{institution_id}/activities", headers=headers).get_json()
    limited = client.get(f"/api/institutions/{institution_id}/activities?limit=1", headers=headers).get_json()
    fallback = client.get(f"/api/institutions/{institution_id}/activities?limit=abc", headers=headers).get_json()

    assert [a["action"] for a in everything] == ["faculty_created", "institution_configured", "institution_created"]
    assert [a["action"] for a in limited] == ["faculty_created"]
    assert len(fallback) == 3

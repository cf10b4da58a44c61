from __future__ import annotations


def _integration(institution_id, name="SIS", **extra):
    body = {
        "institutionId": institution_id,
        "name": name,
        "type": "sis",
        "endpoint": "https://sis.example.edu/api",
        "apiKey": "k-123",
        "configuration": {"syncEvery": "1h"},
    }
    body.update(extra)
    return body


def test_deleted_integration_disappears_from_list(client, admin_with_institution):
    _, headers, institution_id = admin_with_institution()
    keep = client.post("/api/integrations", json=_integration(institution_id, "SIS"), headers=headers).get_json()
    drop = client.post("/api/integrations", json=_integration(institution_id, "LMS"), headers=headers).get_json()

    res = client.delete(f"/api/integrations/{drop['id']}", headers=headers)
    listed = client.get(f"/api/integrations/{institution_id}", headers=headers).get_json()

    assert res.status_code == 200
    assert [i["id"] for i in listed] == [keep["id"]]


def test_api_key_is_never_returned(client, admin_with_institution):
    _, headers, institution_id = admin_with_institution()

    created = client.post("/api/integrations", json=_integration(institution_id), headers=headers)

    body = created.get_json()
    assert created.status_code == 201
    assert "apiKey" not in body
    assert body["hasApiKey"] is True
    assert body["isActive"] is True
    assert body["configuration"] == {"syncEvery": "1h"}


def test_update_keeps_api_key(client, container, admin_with_institution):
    _, headers, institution_id = admin_with_institution()
    created = client.post("/api/integrations", json=_integration(institution_id), headers=headers).get_json()

    res = client.put(f"/api/integrations/{created['id']}", json={"isActive": False}, headers=headers)

    assert res.status_code == 200
    assert res.get_json()["isActive"] is False
    assert res.get_json()["hasApiKey"] is True


def test_integration_requires_endpoint(client, admin_with_institution):
    _, headers, institution_id = admin_with_institution()
    body = _integration(institution_id)
    del body["endpoint"]

    res = client.post("/api/integrations", json=body, headers=headers)

    assert res.status_code == 400


def test_deleting_missing_integration_is_404(client, admin_with_institution):
    _, headers, _ = admin_with_institution()

    assert client.delete("/api/integrations/999", headers=headers).status_code == 404

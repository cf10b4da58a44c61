from __future__ import annotations

import os
import stat

import pytest

from src.smart_campus.smart_campus.client.session import (
    ApiError,
    ApiSession,
    CampusClient,
    FileTokenStore,
    MemoryTokenStore,
)

BASE_URL = "http://campus.test"


class _Response:
    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code
        self.reason = response.status.partition(" ")[2]

    def json(self):
        data = self._response.get_json(silent=True)
        if data is None:
            raise ValueError("no JSON body")
        return data


class FlaskTransport:
    """Stands in for ``requests.Session`` by forwarding to the Flask test client."""

    def __init__(self, client):
        self._client = client
        self.sent_headers: list[dict] = []

    def request(self, method, url, *, json=None, params=None, headers=None, timeout=None):
        self.sent_headers.append(dict(headers or {}))
        res = self._client.open(
            url[len(BASE_URL):], method=method, json=json, query_string=params, headers=headers
        )
        return _Response(res)


@pytest.fixture()
def transport(client):
    return FlaskTransport(client)


def test_register_stores_token_and_authenticates_later_calls(transport):
    store = MemoryTokenStore()
    api = CampusClient(ApiSession(BASE_URL, store=store, http=transport))

    api.register(username="ann", email="ann@example.edu", password="secret123")
    me = api.me()

    assert store.load()
    assert me["user"]["username"] == "ann"
    assert transport.sent_headers[-1]["Authorization"] == f"Bearer {store.load()}"


def test_logout_clears_token(transport):
    api = CampusClient(ApiSession(BASE_URL, http=transport))
    api.register(username="ann", email="ann@example.edu", password="secret123")

    api.logout()

    assert not api.session.is_authenticated
    with pytest.raises(ApiError) as err:
        api.me()
    assert err.value.status == 401


def test_failed_login_raises_with_server_message(transport):
    api = CampusClient(ApiSession(BASE_URL, http=transport))

    with pytest.raises(ApiError) as err:
        api.login(email="ghost@example.edu", password="whatever")

    assert err.value.status == 401
    assert err.value.message == "Invalid credentials"
    assert api.session.token is None


def test_generic_helpers(transport):
    api = CampusClient(ApiSession(BASE_URL, http=transport))
    api.register(username="ann", email="ann@example.edu", password="secret123")

    institution = api.post(
        "/api/institutions", {"name": "Lincoln High", "type": "high-school", "educationSystem": "american"}
    )
    api.put(f"/api/institutions/{institution['id']}", {"location": "Springfield"})
    activities = api.get(f"/api/institutions/{institution['id']}/activities", limit=1)

    assert api.get(f"/api/institutions/{institution['id']}")["location"] == "Springfield"
    assert len(activities) == 1


def test_sessions_do_not_share_credentials(transport):
    first = CampusClient(ApiSession(BASE_URL, http=transport))
    second = CampusClient(ApiSession(BASE_URL, http=transport))

    first.register(username="ann", email="ann@example.edu", password="secret123")

    assert first.session.is_authenticated
    assert not second.session.is_authenticated


def test_file_token_store_round_trip(tmp_path):
    store = FileTokenStore(tmp_path / "nested" / "token")

    assert store.load() is None
    store.save("abc.def.ghi")
    assert FileTokenStore(tmp_path / "nested" / "token").load() == "abc.def.ghi"
    store.clear()
    store.clear()
    assert store.load() is None


@pytest.mark.skipif(os.name != "posix", reason="POSIX file modes")
def test_file_token_store_is_owner_only(tmp_path):
    path = tmp_path / "token"
    path.write_text("old", encoding="utf-8")
    path.chmod(0o644)

    FileTokenStore(path).save("abc.def.ghi")

    assert stat.S_IMODE(path.stat().st_mode) == 0o600
    assert path.read_text(encoding="utf-8") == "abc.def.ghi"


@pytest.mark.skipif(os.name != "posix", reason="POSIX file modes")
def test_new_token_file_is_created_owner_only(tmp_path, monkeypatch):
    created = []
    real_open = os.open

    def recording_open(path, flags, mode=0o777, *args, **kwargs):
        created.append(mode)
        return real_open(path, flags, mode, *args, **kwargs)

    monkeypatch.setattr(os, "open", recording_open)
    FileTokenStore(tmp_path / "token").save("abc")

    assert created == [0o600]

"""Python consumer of the REST API.

The bearer token lives in an injected ``TokenStore`` owned by an ``ApiSession``;
build one session per user at the application's composition root and pass it
to whatever needs to talk to the server.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional, Protocol

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class ApiError(Exception):
    """Non-2xx answer from the server."""

    def __init__(self, status: int, message: str, payload: Any = None):
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message
        self.payload = payload


class TokenStore(Protocol):
    def load(self) -> Optional[str]:
        raise NotImplementedError

    def save(self, token: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class MemoryTokenStore(TokenStore):
    def __init__(self, token: Optional[str] = None):
        self._token = token

    def load(self) -> Optional[str]:
        return self._token

    def save(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class FileTokenStore(TokenStore):
    """Keeps the token in a user-private file so it survives restarts."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def load(self) -> Optional[str]:
        try:
            token = self._path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def save(self, token: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        # Owner-only from creation.
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(token)
        # An existing file keeps its old mode under O_CREAT.
        self._path.chmod(0o600)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)


class ApiSession:
    """One authenticated conversation with the server."""

    def __init__(
        self,
        base_url: str,
        *,
        store: Optional[TokenStore] = None,
        http: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.store = store or MemoryTokenStore()
        self._http = http or requests.Session()
        self._timeout = timeout

    @property
    def token(self) -> Optional[str]:
        return self.store.load()

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def request(self, method: str, path: str, *, json: Any = None, params: Optional[dict] = None) -> Any:
        headers = {"Accept": "application/json"}
        token = self.store.load()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        response = self._http.request(
            method,
            f"{self.base_url}{path}",
            json=json,
            params=params,
            headers=headers,
            timeout=self._timeout,
        )

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not 200 <= response.status_code < 300:
            message = payload.get("message") if isinstance(payload, dict) else None
            raise ApiError(response.status_code, message or response.reason or "Request failed", payload)
        return payload


class CampusClient:
    """Typed-ish helpers over an ``ApiSession``."""

    def __init__(self, session: ApiSession):
        self.session = session

    def _authenticate(self, path: str, body: dict) -> dict:
        data = self.session.request("POST", path, json=body)
        self.session.store.save(data["token"])
        logger.debug("stored token for user %s", data["user"]["id"])
        return data

    def register(self, *, username: str, email: str, password: str, role: Optional[str] = None) -> dict:
        body = {"username": username, "email": email, "password": password}
        if role:
            body["role"] = role
        return self._authenticate("/api/auth/register", body)

    def login(self, *, email: str, password: str) -> dict:
        return self._authenticate("/api/auth/login", {"email": email, "password": password})

    def logout(self) -> None:
        self.session.store.clear()

    def me(self) -> dict:
        if not self.session.is_authenticated:
            raise ApiError(401, "No token found")
        return self.session.request("GET", "/api/auth/me")

    def get(self, path: str, **params: Any) -> Any:
        return self.session.request("GET", path, params=params or None)

    def post(self, path: str, body: Any) -> Any:
        return self.session.request("POST", path, json=body)

    def put(self, path: str, body: Any) -> Any:
        return self.session.request("PUT", path, json=body)

    def delete(self, path: str) -> Any:
        return self.session.request("DELETE", path)

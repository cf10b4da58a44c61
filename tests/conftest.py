from __future__ import annotations

import itertools
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

import pytest

from src.smart_campus.smart_campus.activities.model import ActivityLog
from src.smart_campus.smart_campus.auth.tokens import TokenService
from src.smart_campus.smart_campus.container import Container, assemble_container
from src.smart_campus.smart_campus.core.exceptions import ConflictError
from src.smart_campus.smart_campus.institutions.model import Institution
from src.smart_campus.smart_campus.main import create_app
from src.smart_campus.smart_campus.records.definition import EntityDefinition
from src.smart_campus.smart_campus.users.model import User

JWT_SECRET = "test-jwt-secret-with-at-least-32-bytes"


class InMemoryUsers:
    def __init__(self):
        self.rows: dict[int, User] = {}
        self._ids = itertools.count(1)

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.rows.get(int(user_id))

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.rows.values() if u.username == username), None)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.rows.values() if u.email == email), None)

    def create_user(self, *, username: str, email: str, password_hash: str, role: str) -> int:
        if self.get_by_email(email) or self.get_by_username(username):
            raise ConflictError("Duplicate value for users")
        user_id = next(self._ids)
        self.rows[user_id] = User(
            id=user_id,
            username=username,
            email=email,
            password_hash=password_hash,
            role=role,
            institution_id=None,
            created_at=datetime(2024, 1, 1),
        )
        return user_id

    def _replace(self, user_id: int, **changes: Any) -> bool:
        user = self.rows.get(int(user_id))
        if user is None:
            return False
        self.rows[user.id] = User(**{**user.__dict__, **changes})
        return True

    def set_institution(self, user_id: int, *, institution_id: int) -> bool:
        return self._replace(user_id, institution_id=int(institution_id))

    def update_role(self, user_id: int, *, role: str, permissions: Optional[list[str]] = None) -> bool:
        changes: dict[str, Any] = {"role": role}
        if permissions is not None:
            changes["permissions"] = list(permissions)
        return self._replace(user_id, **changes)

    def list_by_institution(self, institution_id: int, *, role: Optional[str] = None) -> Sequence[User]:
        return [
            u for u in self.rows.values()
            if u.institution_id == int(institution_id) and (role is None or u.role == role)
        ]


class InMemoryInstitutions:
    def __init__(self):
        self.rows: dict[int, Institution] = {}
        self._ids = itertools.count(1)

    def get_by_id(self, institution_id: int) -> Optional[Institution]:
        return self.rows.get(int(institution_id))

    def create(self, values: Mapping[str, Any]) -> int:
        institution_id = next(self._ids)
        self.rows[institution_id] = Institution(id=institution_id, is_configured=False, **values)
        return institution_id

    def update(self, institution_id: int, changes: Mapping[str, Any]) -> bool:
        current = self.rows.get(int(institution_id))
        if current is None:
            return False
        self.rows[current.id] = Institution(**{**current.__dict__, **changes})
        return True

    def mark_configured(self, institution_id: int) -> bool:
        return self.update(institution_id, {"is_configured": True})


class InMemoryActivities:
    def __init__(self):
        self.rows: list[ActivityLog] = []

    def append(self, *, institution_id, user_id, action, description, metadata=None) -> int:
        activity = ActivityLog(
            id=len(self.rows) + 1,
            institution_id=institution_id,
            user_id=user_id,
            action=action,
            description=description,
            metadata=metadata,
        )
        self.rows.append(activity)
        return activity.id

    def list_recent(self, institution_id: int, *, limit: int) -> Sequence[ActivityLog]:
        mine = [a for a in self.rows if a.institution_id == institution_id]
        return sorted(mine, key=lambda a: a.id, reverse=True)[:limit]


class InMemoryTenantRepository:
    def __init__(self, store: "InMemoryEntityStore", definition: EntityDefinition, institution_id: int):
        self._store = store
        self._definition = definition
        self._rows = store.tables.setdefault(definition.table, {})
        self.institution_id = int(institution_id)

    def _mine(self) -> list[dict]:
        return [r for _, r in sorted(self._rows.items()) if r["institution_id"] == self.institution_id]

    def _check_unique(self, values: Mapping[str, Any], *, skip_id: Optional[int] = None) -> None:
        # Unique keys span all tenants, like the database indexes.
        for column in self._definition.unique_columns:
            if column not in values:
                continue
            for row in self._rows.values():
                if row["id"] != skip_id and row.get(column) == values[column]:
                    raise self._definition.duplicate_error({column: values[column]})

    def list(self):
        return [self._definition.build(r) for r in self._mine()]

    def list_where(self, **filters):
        return [
            self._definition.build(r) for r in self._mine()
            if all(r.get(k) == v for k, v in filters.items())
        ]

    def get(self, entity_id: int):
        row = self._rows.get(int(entity_id))
        if row is None or row["institution_id"] != self.institution_id:
            return None
        return self._definition.build(row)

    def create(self, values):
        self._check_unique(values)
        entity_id = next(self._store.ids)
        self._rows[entity_id] = {
            **{c: values[c] for c in self._definition.writable_columns if c in values},
            "id": entity_id,
            "institution_id": self.institution_id,
            "created_at": datetime(2024, 1, 1),
        }
        return self.get(entity_id)

    def update(self, entity_id: int, changes):
        if self.get(entity_id) is None:
            return None
        self._check_unique(changes, skip_id=int(entity_id))
        self._rows[int(entity_id)].update({c: changes[c] for c in self._definition.writable_columns if c in changes})
        return self.get(entity_id)

    def delete(self, entity_id: int) -> bool:
        if self.get(entity_id) is None:
            return False
        del self._rows[int(entity_id)]
        return True

    def count(self) -> int:
        return len(self._mine())


class InMemoryEntityStore:
    def __init__(self):
        self.tables: dict[str, dict[int, dict]] = {}
        self.ids = itertools.count(1)

    def for_tenant(self, definition: EntityDefinition, institution_id: int) -> InMemoryTenantRepository:
        return InMemoryTenantRepository(self, definition, institution_id)


@pytest.fixture()
def container() -> Container:
    return assemble_container(
        users_repo=InMemoryUsers(),
        institutions_repo=InMemoryInstitutions(),
        activities_repo=InMemoryActivities(),
        entity_store=InMemoryEntityStore(),
        tokens=TokenService(JWT_SECRET),
    )


@pytest.fixture()
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture()
def client(app):
    return app.test_client()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def register_user(client):
    """POST /api/auth/register and return (user, auth headers)."""

    counter = itertools.count(1)

    def _register(**overrides):
        n = next(counter)
        body = {"username": f"user{n}", "email": f"user{n}@example.edu", "password": "secret123"}
        body.update(overrides)
        res = client.post("/api/auth/register", json=body)
        assert res.status_code == 201, res.get_json()
        data = res.get_json()
        return data["user"], bearer(data["token"])

    return _register


@pytest.fixture()
def admin_with_institution(client, register_user):
    """A registered admin who created (and therefore belongs to) an institution."""

    def _make(name: str = "Lincoln High", **user_overrides):
        user, headers = register_user(**user_overrides)
        res = client.post(
            "/api/institutions",
            json={"name": name, "type": "high-school", "educationSystem": "american"},
            headers=headers,
        )
        assert res.status_code == 201, res.get_json()
        return user, headers, res.get_json()["id"]

    return _make

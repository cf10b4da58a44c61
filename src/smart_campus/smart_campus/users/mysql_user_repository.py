from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, decode_json, encode_json, fetchall, fetchone
from .model import User
from .repository import UserRepository

_USER_COLUMNS = "id, username, email, password_hash, role, institution_id, permissions, is_active, created_at, updated_at"


def _row_to_user(row: dict) -> User:
    return User(
        id=int(row["id"]),
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=row["role"],
        institution_id=row.get("institution_id"),
        permissions=decode_json(row.get("permissions")),
        is_active=bool(row.get("is_active", True)),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, column: str, value) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE {column}=%s", (value,))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._get_one("id", int(user_id))

    def get_by_username(self, username: str) -> Optional[User]:
        return self._get_one("username", username)

    def get_by_email(self, email: str) -> Optional[User]:
        return self._get_one("email", email)

    def create_user(self, *, username: str, email: str, password_hash: str, role: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(username, email, password_hash, role, is_active)
                VALUES(%s,%s,%s,%s,1)
                """,
                (username, email, password_hash, role),
            )
            return int(cur.lastrowid)

    def set_institution(self, user_id: int, *, institution_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE users SET institution_id=%s, updated_at=CURRENT_TIMESTAMP WHERE id=%s",
                (int(institution_id), int(user_id)),
            )
            return cur.rowcount > 0

    def update_role(self, user_id: int, *, role: str, permissions: Optional[list[str]] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if permissions is None:
                cur.execute(
                    "UPDATE users SET role=%s, updated_at=CURRENT_TIMESTAMP WHERE id=%s",
                    (role, int(user_id)),
                )
            else:
                cur.execute(
                    "UPDATE users SET role=%s, permissions=%s, updated_at=CURRENT_TIMESTAMP WHERE id=%s",
                    (role, encode_json(list(permissions)), int(user_id)),
                )
            # rowcount is 0 when the values did not change; check existence instead.
            cur.execute("SELECT 1 AS found FROM users WHERE id=%s", (int(user_id),))
            return fetchone(cur) is not None

    def list_by_institution(self, institution_id: int, *, role: Optional[str] = None) -> Sequence[User]:
        clauses = ["institution_id=%s"]
        params: list[object] = [int(institution_id)]
        if role:
            clauses.append("role=%s")
            params.append(role)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_USER_COLUMNS} FROM users WHERE {' AND '.join(clauses)} ORDER BY id",
                tuple(params),
            )
            return [_row_to_user(r) for r in fetchall(cur)]

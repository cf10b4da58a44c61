from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, decode_json, encode_json, fetchall
from .model import ActivityLog
from .repository import ActivityRepository


class MySQLActivityRepository(ActivityRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(
        self,
        *,
        institution_id: int,
        user_id: int,
        action: str,
        description: str,
        metadata: Optional[dict[str, Any]] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO activities_log(institution_id, user_id, action, description, metadata)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(institution_id), int(user_id), action, description, encode_json(metadata or {})),
            )
            return int(cur.lastrowid)

    def list_recent(self, institution_id: int, *, limit: int) -> Sequence[ActivityLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, institution_id, user_id, action, description, metadata, created_at
                FROM activities_log
                WHERE institution_id=%s
                ORDER BY created_at DESC, id DESC
                LIMIT %s
                """,
                (int(institution_id), int(limit)),
            )
            return [
                ActivityLog(
                    id=int(r["id"]),
                    institution_id=int(r["institution_id"]),
                    user_id=int(r["user_id"]),
                    action=r["action"],
                    description=r["description"],
                    metadata=decode_json(r.get("metadata")),
                    created_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, decode_json, encode_json, fetchone
from .model import Institution
from .repository import InstitutionRepository

_JSON_COLUMNS = {"academic_calendar", "structure"}
_WRITABLE_COLUMNS = ("name", "type", "education_system", "location", "size", "academic_calendar", "structure")


def _to_db(column: str, value: Any) -> Any:
    return encode_json(value) if column in _JSON_COLUMNS else value


class MySQLInstitutionRepository(InstitutionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, institution_id: int) -> Optional[Institution]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, type, education_system, location, size, academic_calendar,
                       structure, is_configured, created_at, updated_at
                FROM institutions
                WHERE id=%s
                """,
                (int(institution_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Institution(
                id=int(r["id"]),
                name=r["name"],
                type=r["type"],
                education_system=r["education_system"],
                location=r.get("location"),
                size=r.get("size"),
                academic_calendar=decode_json(r.get("academic_calendar")),
                structure=decode_json(r.get("structure")),
                is_configured=bool(r.get("is_configured")),
                created_at=r.get("created_at"),
                updated_at=r.get("updated_at"),
            )

    def create(self, values: Mapping[str, Any]) -> int:
        columns = [c for c in _WRITABLE_COLUMNS if c in values]
        placeholders = ",".join(["%s"] * len(columns))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO institutions({', '.join(columns)}, is_configured) VALUES({placeholders}, 0)",
                tuple(_to_db(c, values[c]) for c in columns),
            )
            return int(cur.lastrowid)

    def update(self, institution_id: int, changes: Mapping[str, Any]) -> bool:
        columns = [c for c in _WRITABLE_COLUMNS if c in changes]
        assignments = [f"{c}=%s" for c in columns] + ["updated_at=CURRENT_TIMESTAMP"]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE institutions SET {', '.join(assignments)} WHERE id=%s",
                tuple(_to_db(c, changes[c]) for c in columns) + (int(institution_id),),
            )
            return cur.rowcount > 0

    def mark_configured(self, institution_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE institutions SET is_configured=1, updated_at=CURRENT_TIMESTAMP WHERE id=%s",
                (int(institution_id),),
            )
            return cur.rowcount > 0

from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, decode_json, encode_json, fetchall, fetchone
from .definition import EntityDefinition
from .repository import EntityStore, TenantRepository


def _quote(column: str) -> str:
    # Some columns (rank, date) are reserved words in MySQL.
    return f"`{column}`"


class MySQLTenantRepository(TenantRepository):
    def __init__(self, conn_factory: DatabaseConnection, definition: EntityDefinition, institution_id: int):
        self._conn_factory = conn_factory
        self._definition = definition
        self.institution_id = int(institution_id)
        self._select = "SELECT {} FROM {}".format(
            ", ".join(_quote(c) for c in definition.columns),
            _quote(definition.table),
        )

    def _to_db(self, column: str, value: Any) -> Any:
        if column in self._definition.json_columns:
            return encode_json(value)
        if isinstance(value, Decimal):
            return str(value)
        return value

    def _from_row(self, row: dict) -> Any:
        values = dict(row)
        for column in self._definition.json_columns:
            values[column] = decode_json(values.get(column))
        for column in self._definition.bool_columns:
            if values.get(column) is not None:
                values[column] = bool(values[column])
        return self._definition.build(values)

    def _query(self, cur, where: Sequence[str], params: Sequence[Any], *, order: str = "id") -> list:
        clauses = ["institution_id=%s", *where]
        cur.execute(
            f"{self._select} WHERE {' AND '.join(clauses)} ORDER BY {_quote(order)}",
            (self.institution_id, *params),
        )
        return [self._from_row(r) for r in fetchall(cur)]

    def list(self) -> Sequence[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._query(cur, [], [])

    def list_where(self, **filters: Any) -> Sequence[Any]:
        unknown = set(filters) - set(self._definition.columns)
        if unknown:
            raise ValueError(f"Unknown filter columns for {self._definition.table}: {sorted(unknown)}")

        where = [f"{_quote(c)}=%s" for c in filters]
        with db_cursor(self._conn_factory) as (_, cur):
            return self._query(cur, where, list(filters.values()))

    def _get(self, cur, entity_id: int) -> Optional[Any]:
        rows = self._query(cur, ["id=%s"], [int(entity_id)])
        return rows[0] if rows else None

    def get(self, entity_id: int) -> Optional[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._get(cur, entity_id)

    def create(self, values: Mapping[str, Any]) -> Any:
        columns = [c for c in self._definition.writable_columns if c in values]
        names = ", ".join(["institution_id", *(_quote(c) for c in columns)])
        placeholders = ", ".join(["%s"] * (len(columns) + 1))

        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"INSERT INTO {_quote(self._definition.table)}({names}) VALUES({placeholders})",
                    (self.institution_id, *(self._to_db(c, values[c]) for c in columns)),
                )
                return self._get(cur, int(cur.lastrowid))
        except ConflictError as e:
            raise self._definition.duplicate_error(values) from e

    def update(self, entity_id: int, changes: Mapping[str, Any]) -> Optional[Any]:
        columns = [c for c in self._definition.writable_columns if c in changes]

        try:
            with db_cursor(self._conn_factory) as (_, cur):
                if columns:
                    assignments = [f"{_quote(c)}=%s" for c in columns]
                    if "updated_at" in self._definition.columns:
                        assignments.append("updated_at=CURRENT_TIMESTAMP")
                    cur.execute(
                        f"UPDATE {_quote(self._definition.table)} SET {', '.join(assignments)} "
                        "WHERE id=%s AND institution_id=%s",
                        (*(self._to_db(c, changes[c]) for c in columns), int(entity_id), self.institution_id),
                    )
                return self._get(cur, entity_id)
        except ConflictError as e:
            raise self._definition.duplicate_error(changes) from e

    def delete(self, entity_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"DELETE FROM {_quote(self._definition.table)} WHERE id=%s AND institution_id=%s",
                (int(entity_id), self.institution_id),
            )
            return cur.rowcount > 0

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT COUNT(*) AS total FROM {_quote(self._definition.table)} WHERE institution_id=%s",
                (self.institution_id,),
            )
            row = fetchone(cur)
            return int(row["total"]) if row else 0


class MySQLEntityStore(EntityStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def for_tenant(self, definition: EntityDefinition, institution_id: int) -> MySQLTenantRepository:
        return MySQLTenantRepository(self._conn_factory, definition, institution_id)

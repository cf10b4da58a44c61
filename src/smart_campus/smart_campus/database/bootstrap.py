from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import mysql.connector
from werkzeug.security import generate_password_hash

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBTarget:
    host: str
    port: int
    user: str
    password: str
    database: str


def _as_target(db_config: dict) -> DBTarget:
    return DBTarget(
        host=str(db_config.get("host", "localhost")),
        port=int(db_config.get("port", 3306)),
        user=str(db_config.get("user", "root")),
        password=str(db_config.get("password", "")),
        database=str(db_config.get("database", "smart_campus")),
    )


def _connect(target: DBTarget, *, with_database: bool = True):
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql usable regardless of the configured DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal splitter for schema files (ignores ';' inside quotes).
    buf: list[str] = []
    quote: str | None = None

    for ch in sql:
        if quote:
            buf.append(ch)
            if ch == quote:
                quote = None
            continue

        if ch in ("'", '"', "`"):
            quote = ch
            buf.append(ch)
            continue

        if ch == ";":
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    target = _as_target(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)

    sql = Path(schema_path).read_text(encoding="utf-8")
    sql = _strip_comments(_strip_create_db_and_use(sql))

    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied from %s", schema_path)


def ensure_demo_admin(
    db_config: dict,
    *,
    username: str = "admin",
    email: str = "admin@example.edu",
    password: str = "admin123",
    institution_name: str = "Demo Institution",
) -> int:
    """Create (or refresh) a demo admin linked to a configured demo institution.

    Returns the admin user id.
    """

    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor(dictionary=True)

        cur.execute("SELECT id FROM institutions WHERE name=%s", (institution_name,))
        row = cur.fetchone()
        if row:
            institution_id = int(row["id"])
        else:
            cur.execute(
                """
                INSERT INTO institutions(name, type, education_system, location, size, structure, is_configured)
                VALUES(%s,%s,%s,%s,%s,%s,1)
                """,
                (institution_name, "university", "custom", "Main campus", "medium", json.dumps({"faculties": []})),
            )
            institution_id = int(cur.lastrowid)

        password_hash = generate_password_hash(password)
        cur.execute("SELECT id FROM users WHERE email=%s", (email,))
        existing = cur.fetchone()
        if existing:
            user_id = int(existing["id"])
            cur.execute(
                "UPDATE users SET username=%s, password_hash=%s, role='admin', institution_id=%s, is_active=1 WHERE id=%s",
                (username, password_hash, institution_id, user_id),
            )
        else:
            cur.execute(
                """
                INSERT INTO users(username, email, password_hash, role, institution_id)
                VALUES(%s,%s,%s,'admin',%s)
                """,
                (username, email, password_hash, institution_id),
            )
            user_id = int(cur.lastrowid)

        conn.commit()
        return user_id
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()

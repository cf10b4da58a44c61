from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import ConflictError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.IntegrityError as e:
        conn.rollback()
        if e.errno == errorcode.ER_DUP_ENTRY:
            raise ConflictError(_duplicate_message(e)) from e
        raise
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def _duplicate_message(error: mysql.connector.Error) -> str:
    # MySQL: "Duplicate entry 'x' for key 'table.uq_name'"
    msg = getattr(error, "msg", "") or str(error)
    if " for key " in msg:
        key = msg.rsplit(" for key ", 1)[1].strip("'\" ")
        return f"Duplicate value for {key.split('.')[-1]}"
    return "Duplicate value"


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def encode_json(value: Any) -> Optional[str]:
    if value is None:
        return None
    return json.dumps(value)


def decode_json(value: Any) -> Any:
    """Normalize MySQL JSON values across connector implementations.

    mysql-connector can return JSON columns as str, bytes/bytearray or,
    with the C extension, already-decoded Python objects.
    """

    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return json.loads(value)
    return value

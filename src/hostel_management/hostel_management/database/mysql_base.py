from __future__ import annotations

import json
from contextlib import contextmanager
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .connection import MySQLConnector


@contextmanager
def db_cursor(connector: MySQLConnector, *, dictionary: bool = True, with_database: bool = True):
    conn = connector.connect(with_database=with_database)
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def _json_default(value: Any):
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def dump_item(item: Dict[str, Any]) -> str:
    return json.dumps(item, default=_json_default, ensure_ascii=False)


def load_item(value: Any) -> Dict[str, Any]:
    """Normalize a JSON column value across connector implementations.

    mysql-connector can return JSON as ``str``, ``bytes`` or ``bytearray``.
    """

    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return json.loads(value)
    if isinstance(value, dict):
        return value
    raise TypeError(f"Unsupported MySQL JSON value type: {type(value)!r}")

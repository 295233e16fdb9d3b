from __future__ import annotations

import re
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from .connection import DatabaseConnection
from .errors import DuplicateKeyError

_DUP_KEY_RE = re.compile(r"for key '([^']+)'")


def duplicate_key_name(message: str) -> str:
    """Extract the constraint name from a MySQL ER_DUP_ENTRY message.

    MySQL 8 qualifies it with the table (``employees.uq_employees_email``);
    older servers do not.
    """

    m = _DUP_KEY_RE.search(message or "")
    if not m:
        return ""
    return m.group(1).rsplit(".", 1)[-1]


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
            raise DuplicateKeyError(duplicate_key_name(e.msg)) from e
        raise
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

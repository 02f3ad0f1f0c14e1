from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory, *, dictionary: bool = True):
    """Yield (conn, cursor), commit on success, roll back and close on failure.

    Driver errors are re-raised as StoreError so callers above the store
    boundary never depend on mysql.connector types.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.exception("Could not open database connection")
        raise StoreError("Database is unavailable") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        logger.exception("Database operation failed")
        raise StoreError(_describe(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def _describe(error: "mysql.connector.Error") -> str:
    errno = getattr(error, "errno", None)
    if errno == 1062:
        return "A record with the same unique value already exists"
    if errno in {1451, 1452}:
        return "The record is referenced by, or references, a missing record"
    return "Database operation failed"


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])

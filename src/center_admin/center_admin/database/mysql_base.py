from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import DuplicateRecordError, StoreUnavailableError
from .connection import MySQLConnectionFactory

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: MySQLConnectionFactory, *, dictionary: bool = True):
    """One connection and one transaction per repository call.

    A duplicate primary/unique key surfaces as ``DuplicateRecordError``; every
    other driver failure surfaces as ``StoreUnavailableError``.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.error("Cannot connect to MySQL at %s: %s", conn_factory.describe(), e)
        raise StoreUnavailableError("Record store is unavailable") from e

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
            raise DuplicateRecordError(str(e.msg or e)) from e
        logger.error("MySQL integrity error on %s: %s", conn_factory.describe(), e)
        raise StoreUnavailableError("Record store is unavailable") from e
    except mysql.connector.Error as e:
        conn.rollback()
        logger.error("MySQL operation failed on %s: %s", conn_factory.describe(), e)
        raise StoreUnavailableError("Record store is unavailable") from e
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

"""Postgres client library for email-intel-api."""
import logging
from contextlib import closing
from typing import Any, Dict, List, Optional

import psycopg2
from psycopg2.extras import RealDictCursor

from ...config.config import get_postgres_dsn
from ...domain.errors import DatabaseError

logger = logging.getLogger(__name__)


def get_connection():
    """Get a Postgres connection."""
    dsn = get_postgres_dsn()
    return psycopg2.connect(dsn)


def execute_returning(sql: str, params: tuple) -> Optional[Dict[str, Any]]:
    """
    Execute an INSERT/UPDATE with a RETURNING clause and return the row.

    Args:
        sql: SQL statement ending in RETURNING
        params: Parameters for the SQL statement

    Returns:
        Returned row as a dictionary, or None when no row was affected
    """
    try:
        with closing(get_connection()) as conn, conn:
            with conn.cursor(cursor_factory=RealDictCursor) as cursor:
                cursor.execute(sql, params)
                result = cursor.fetchone()
                conn.commit()
                return dict(result) if result else None
    except psycopg2.Error as e:
        logger.error(f"Failed to execute statement: {e}")
        raise DatabaseError(f"Database write failed: {str(e)}") from e


def execute_query(sql: str, params: tuple) -> List[Dict[str, Any]]:
    """
    Execute a SELECT statement and return results.

    Args:
        sql: SQL SELECT statement
        params: Parameters for the SQL statement

    Returns:
        List of rows as dictionaries
    """
    try:
        with closing(get_connection()) as conn, conn:
            with conn.cursor(cursor_factory=RealDictCursor) as cursor:
                cursor.execute(sql, params)
                return [dict(row) for row in cursor.fetchall()]
    except psycopg2.Error as e:
        logger.error(f"Failed to execute query: {e}")
        raise DatabaseError(f"Database query failed: {str(e)}") from e


def execute_update(sql: str, params: tuple) -> int:
    """
    Execute an UPDATE/DELETE statement and return affected rows.

    Args:
        sql: SQL UPDATE/DELETE statement
        params: Parameters for the SQL statement

    Returns:
        Number of affected rows
    """
    try:
        with closing(get_connection()) as conn, conn:
            with conn.cursor(cursor_factory=RealDictCursor) as cursor:
                cursor.execute(sql, params)
                conn.commit()
                return cursor.rowcount
    except psycopg2.Error as e:
        logger.error(f"Failed to execute update: {e}")
        raise DatabaseError(f"Database update failed: {str(e)}") from e

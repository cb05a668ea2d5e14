"""
db/connection.py
----------------
Manages PostgreSQL connections.
Uses psycopg2's ThreadedConnectionPool so repositories can borrow a
connection per statement from any thread, plus a direct connection
factory for bootstrap work that must run before the pool exists.
"""

import threading

import psycopg2
from psycopg2 import pool

from config import (
    DB_CONNECT_TIMEOUT,
    DB_HOST,
    DB_MAINTENANCE_NAME,
    DB_NAME,
    DB_PASS,
    DB_POOL_MAX,
    DB_POOL_MIN,
    DB_PORT,
    DB_USER,
)
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.ThreadedConnectionPool | None = None
# One slot per pooled connection; borrowers block here until one is returned
_slots: threading.BoundedSemaphore | None = None


def _connect_kwargs(dbname: str) -> dict:
    """Connection parameters shared by the pool and direct connections."""
    return {
        "host": DB_HOST,
        "port": DB_PORT,
        "user": DB_USER,
        "password": DB_PASS,
        "dbname": dbname,
        "connect_timeout": DB_CONNECT_TIMEOUT,
    }


def connect_server(select_database: bool = True):
    """
    Open a standalone (non-pooled) connection.

    Args:
        select_database: When False, connect to the maintenance database
            instead of DB_NAME, so DB_NAME itself can be created.

    Returns:
        A psycopg2 connection. The caller is responsible for closing it.
    """
    dbname = DB_NAME if select_database else DB_MAINTENANCE_NAME
    return psycopg2.connect(**_connect_kwargs(dbname))


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX) -> None:
    """
    Initialize the database connection pool.

    Args:
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool, _slots
    if _pool is not None:
        return
    try:
        _pool = pool.ThreadedConnectionPool(min_conn, max_conn, **_connect_kwargs(DB_NAME))
        _slots = threading.BoundedSemaphore(max_conn)
        logger.info(f"Database connection pool initialized ({min_conn}-{max_conn} connections).")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise


def get_connection(timeout: float = DB_CONNECT_TIMEOUT):
    """
    Get a connection from the pool, waiting for one to be released if
    every connection is borrowed.

    Args:
        timeout: Seconds to wait for a free connection.

    Returns:
        A psycopg2 connection object.

    Raises:
        RuntimeError: If the pool has not been initialized.
        psycopg2.pool.PoolError: If no connection was released within `timeout`.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    if not _slots.acquire(timeout=timeout):
        raise pool.PoolError(f"connection pool exhausted (waited {timeout}s)")
    try:
        return _pool.getconn()
    except psycopg2.Error:
        _slots.release()
        raise


def release_connection(conn) -> None:
    """
    Return a connection back to the pool.

    Args:
        conn: The psycopg2 connection to release.
    """
    if _pool is not None:
        _pool.putconn(conn)
        _slots.release()


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool, _slots
    if _pool is not None:
        _pool.closeall()
        _pool = None
        _slots = None
        logger.info("Database connection pool closed.")

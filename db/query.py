"""
db/query.py
-----------
The one place SQL is executed.
Every repository call goes through `execute()`: borrow a pooled connection,
run one parameterized statement, commit, and always give the connection back.
Driver failures are raised as DataAccessError so callers can tell
"no rows" apart from "the query failed".
"""

from dataclasses import dataclass, field
from typing import Literal, Optional, Sequence

import psycopg2

from db.connection import get_connection, release_connection
from db.errors import DataAccessError
from utils.logger import get_logger

logger = get_logger(__name__)

Fetch = Literal["none", "one", "all"]


@dataclass(frozen=True)
class QueryResult:
    """
    Outcome of a single statement.

    Attributes:
        rows: Fetched rows (empty when nothing was fetched or matched).
        rowcount: Rows affected, as reported by the driver.
    """
    rows: list[tuple] = field(default_factory=list)
    rowcount: int = 0

    def first(self) -> Optional[tuple]:
        """Return the first row, or None if there is none."""
        return self.rows[0] if self.rows else None


def execute(
    operation: str,
    sql: str,
    params: Sequence = (),
    fetch: Fetch = "none",
) -> QueryResult:
    """
    Run one parameterized statement on a pooled connection.

    Args:
        operation: Short label used in logs and errors (e.g. 'get_user_profile').
        sql: Statement with %s placeholders.
        params: Values bound to the placeholders.
        fetch: 'none', 'one' or 'all' rows to read back.

    Returns:
        QueryResult with the fetched rows and the affected row count.

    Raises:
        DataAccessError: If no connection can be borrowed, the driver rejects
            the statement or the connection fails.
    """
    try:
        conn = get_connection()
    except (psycopg2.Error, RuntimeError) as e:
        logger.error(f"Error during {operation}: no connection available: {e}")
        raise DataAccessError(operation, e) from e

    try:
        with conn.cursor() as cur:
            cur.execute(sql, tuple(params))
            if fetch == "one":
                row = cur.fetchone()
                rows = [row] if row is not None else []
            elif fetch == "all":
                rows = list(cur.fetchall())
            else:
                rows = []
            rowcount = cur.rowcount
        conn.commit()
        return QueryResult(rows=rows, rowcount=rowcount)
    except psycopg2.Error as e:
        _rollback(conn, operation)
        logger.error(f"Error during {operation}: {e}")
        raise DataAccessError(operation, e) from e
    finally:
        release_connection(conn)


def _rollback(conn, operation: str) -> None:
    """Roll back after a failed statement unless the connection is already gone."""
    if conn.closed:
        return
    try:
        conn.rollback()
    except psycopg2.Error as e:
        logger.warning(f"Rollback after {operation} failed: {e}")

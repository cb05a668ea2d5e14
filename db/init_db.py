"""
db/init_db.py
-------------
Creates the application database and its tables if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

import psycopg2
from psycopg2 import sql

from config import DB_NAME
from db.connection import connect_server, get_connection, init_pool, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

# "user" is a reserved word in PostgreSQL and the camelCase columns keep
# their case only when quoted, so both are always written quoted.
TABLE_STATEMENTS: tuple[str, ...] = (
    """
    -- Dog-owner profiles, one per email
    CREATE TABLE IF NOT EXISTS "user" (
        email           TEXT PRIMARY KEY,
        "dogName"       TEXT,
        breed           TEXT,
        description     TEXT,
        "ownerName"     TEXT,
        "imageLink"     TEXT
    );
    """,
    """
    -- Credentials: bcrypt hash per email
    CREATE TABLE IF NOT EXISTS auth (
        email           TEXT PRIMARY KEY,
        password        TEXT NOT NULL
    );
    """,
    """
    -- Session tokens: at most one active token per email
    CREATE TABLE IF NOT EXISTS token (
        email           TEXT PRIMARY KEY,
        token           TEXT NOT NULL UNIQUE
    );
    """,
)


def ensure_database() -> bool:
    """
    Create DB_NAME on the server if it is missing.

    CREATE DATABASE cannot run inside a transaction block, so this uses a
    standalone autocommit connection to the maintenance database.

    Returns:
        True if the database was created, False if it already existed.
    """
    conn = connect_server(select_database=False)
    try:
        conn.autocommit = True
        with conn.cursor() as cur:
            cur.execute("SELECT 1 FROM pg_database WHERE datname = %s;", (DB_NAME,))
            if cur.fetchone():
                return False
            cur.execute(sql.SQL("CREATE DATABASE {};").format(sql.Identifier(DB_NAME)))
        logger.info(f"Created database '{DB_NAME}'.")
        return True
    finally:
        conn.close()


def create_tables() -> None:
    """
    Execute the table statements in one transaction.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            for statement in TABLE_STATEMENTS:
                cur.execute(statement)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        release_connection(conn)


def bootstrap() -> None:
    """
    Bring the database up from nothing: database, pool, tables.

    Raises:
        psycopg2.Error: If any step fails. The failure is logged first.
    """
    try:
        ensure_database()
    except psycopg2.Error as e:
        logger.error(f"Error initializing database '{DB_NAME}': {e}")
        raise
    init_pool()
    create_tables()


if __name__ == "__main__":
    bootstrap()
    print("Database schema created successfully.")

"""
main.py
-------
Entry point for the dog-profile data layer.

Responsibilities:
    - Create the database and its tables if they are missing.
    - Report the outcome through the process exit status.
"""

import sys

import psycopg2

from db.connection import close_pool
from db.init_db import bootstrap
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> int:
    """Bootstrap the database. Returns the process exit status."""
    logger.info("Initializing database...")
    try:
        bootstrap()
    except psycopg2.Error as e:
        logger.error(f"Database bootstrap failed, aborting: {e}")
        return 1
    finally:
        close_pool()
    logger.info("Database is ready.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
repositories/token_repo.py
---------------------------
Data access layer for session tokens.
"""

from typing import Optional

from db.query import execute
from utils.logger import get_logger

logger = get_logger(__name__)


class TokenRepository:
    """Repository for the token table (one active token per email)."""

    def add(self, email: str, token: str) -> bool:
        """
        Store `token` as the active token for `email`.
        Uses PostgreSQL's ON CONFLICT (upsert) so any previous token is
        replaced atomically.

        Token strings are unique across emails: reusing one that another
        email already holds violates the table's UNIQUE constraint.

        Returns:
            True if exactly one row was written.

        Raises:
            DataAccessError: If `token` is already held by a different email.
        """
        sql = """
            INSERT INTO token (email, token)
            VALUES (%s, %s)
            ON CONFLICT (email) DO UPDATE SET token = EXCLUDED.token;
        """
        result = execute("add_token", sql, (email, token))
        return result.rowcount == 1

    def get_email(self, token: str) -> Optional[str]:
        """Return the email owning `token`, or None."""
        sql = "SELECT email FROM token WHERE token = %s;"
        row = execute("get_email_by_token", sql, (token,), fetch="one").first()
        return row[0] if row else None

    def delete(self, email: str) -> bool:
        """Delete the active token for `email`. True if one was removed."""
        result = execute("delete_token", "DELETE FROM token WHERE email = %s;", (email,))
        deleted = result.rowcount == 1
        if deleted:
            logger.info(f"Revoked token for {email}")
        return deleted

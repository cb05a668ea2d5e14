"""
repositories/auth_repo.py
--------------------------
Data access layer for login credentials.
Only bcrypt hashes are stored; plain passwords never reach the database.
"""

from db.query import execute
from security.passwords import hash_password, verify_password
from utils.logger import get_logger

logger = get_logger(__name__)


class AuthRepository:
    """Repository for CRUD operations on the auth table."""

    def add(self, email: str, password: str) -> bool:
        """
        Register a credential for `email`.

        Returns:
            True if stored, False if the email already has a credential.
        """
        sql = """
            INSERT INTO auth (email, password)
            VALUES (%s, %s)
            ON CONFLICT (email) DO NOTHING;
        """
        result = execute("add_auth_user", sql, (email, hash_password(password)))
        if result.rowcount != 1:
            logger.warning(f"Credential for {email} already exists")
            return False
        return True

    def validate(self, email: str, password: str) -> bool:
        """
        Check `password` against the stored hash for `email`.

        Returns:
            True only on a match. Unknown emails and unreadable hashes give False.
        """
        sql = "SELECT password FROM auth WHERE email = %s;"
        row = execute("validate_user", sql, (email,), fetch="one").first()
        if row is None:
            return False
        try:
            return verify_password(password, row[0])
        except ValueError as e:
            logger.error(f"Stored credential for {email} is not a valid hash: {e}")
            return False

    def delete(self, email: str) -> bool:
        """Delete the credential for `email`. True if exactly one row went away."""
        result = execute("delete_auth_user", "DELETE FROM auth WHERE email = %s;", (email,))
        return result.rowcount == 1

"""
repositories/database.py
-------------------------
Single entry point to every data-access operation.
Callers hold one Database and never touch the repositories directly.

Every operation raises db.errors.DataAccessError when the database cannot
be reached or rejects the statement; "not found" is never an exception.
"""

from typing import Optional

from db.connection import init_pool
from db.init_db import bootstrap as bootstrap_database
from models.profile import Profile
from repositories.auth_repo import AuthRepository
from repositories.profile_repo import ProfileRepository
from repositories.token_repo import TokenRepository


class Database:
    """Facade over the profile, credential and token repositories."""

    def __init__(
        self,
        profiles: Optional[ProfileRepository] = None,
        auth: Optional[AuthRepository] = None,
        tokens: Optional[TokenRepository] = None,
        connect: bool = True,
        bootstrap: bool = False,
    ):
        """
        Args:
            profiles, auth, tokens: Repositories to use instead of the defaults.
            connect: Open the connection pool now (no-op if already open).
            bootstrap: Also create the database and tables if missing.
                Implies `connect`.

        Raises:
            psycopg2.Error: If the pool or the schema cannot be set up.
        """
        if bootstrap:
            bootstrap_database()
        elif connect:
            init_pool()
        self.profiles = profiles or ProfileRepository()
        self.auth = auth or AuthRepository()
        self.tokens = tokens or TokenRepository()

    # ── Profiles ──────────────────────────────────────────

    def add_user_profile(self, profile: Profile) -> bool:
        """Register a new profile. Returns False if the email is already taken."""
        return self.profiles.add(profile)

    def update_user_profile(self, profile: Profile) -> bool:
        """Overwrite a stored profile. Returns False if no profile has that email."""
        return self.profiles.update(profile)

    def get_user_profile(self, email: str) -> Optional[Profile]:
        """
        Fetch a profile by email.

        Returns:
            The Profile, or None if not found.
        """
        return self.profiles.get(email)

    def delete_user_profile(self, email: str) -> bool:
        """Remove a profile. Returns False if no profile has that email."""
        return self.profiles.delete(email)

    # ── Credentials ───────────────────────────────────────

    def add_user_auth(self, email: str, password: str) -> bool:
        """Store a hashed password. Returns False if the email already has one."""
        return self.auth.add(email, password)

    def validate_user_auth(self, email: str, password: str) -> bool:
        """
        Check a login attempt.

        Returns:
            True only for the registered password; False for any other
            password or an unknown email.
        """
        return self.auth.validate(email, password)

    def delete_user_auth(self, email: str) -> bool:
        """Remove a credential. Returns False if the email has none."""
        return self.auth.delete(email)

    # ── Tokens ────────────────────────────────────────────

    def add_token(self, email: str, token: str) -> bool:
        """Make `token` the only active token for `email`. Returns True if written."""
        return self.tokens.add(email, token)

    def get_email_from_token(self, token: str) -> Optional[str]:
        """
        Resolve a session token.

        Returns:
            The owning email, or None if the token is unknown.
        """
        return self.tokens.get_email(token)

    def delete_token(self, email: str) -> bool:
        """Revoke the active token for `email`. Returns False if it had none."""
        return self.tokens.delete(email)

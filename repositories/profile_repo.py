"""
repositories/profile_repo.py
-----------------------------
Data access layer for dog-owner profiles.
All SQL queries related to the `user` table live here.
"""

from typing import Optional

from db.query import execute
from models.profile import Profile
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = 'email, "dogName", breed, description, "ownerName", "imageLink"'


class ProfileRepository:
    """Repository for CRUD operations on the user table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, profile: Profile) -> bool:
        """
        Insert a new profile.

        An existing profile with the same email is left untouched.

        Returns:
            True if the profile was inserted, False if the email is taken.
        """
        sql = f"""
            INSERT INTO "user" ({_COLUMNS})
            VALUES (%s, %s, %s, %s, %s, %s)
            ON CONFLICT (email) DO NOTHING;
        """
        result = execute("add_user_profile", sql, (
            profile.email, profile.dog_name, profile.breed,
            profile.description, profile.owner_name, profile.image_link,
        ))
        if result.rowcount != 1:
            logger.warning(f"Profile for {profile.email} already exists")
            return False
        logger.info(f"Added profile for {profile.email}")
        return True

    # ── READ ──────────────────────────────────────────────

    def get(self, email: str) -> Optional[Profile]:
        """
        Fetch a profile by email.

        Returns:
            A Profile, or None if no profile has that email.
        """
        sql = f'SELECT {_COLUMNS} FROM "user" WHERE email = %s;'
        row = execute("get_user_profile", sql, (email,), fetch="one").first()
        return self._row_to_profile(row) if row else None

    # ── UPDATE ────────────────────────────────────────────

    def update(self, profile: Profile) -> bool:
        """
        Overwrite every field of the profile stored under `profile.email`.

        Returns:
            True if exactly one row was updated.
        """
        sql = """
            UPDATE "user"
            SET "dogName" = %s, breed = %s, description = %s, "ownerName" = %s, "imageLink" = %s
            WHERE email = %s;
        """
        result = execute("update_user_profile", sql, (
            profile.dog_name, profile.breed, profile.description,
            profile.owner_name, profile.image_link, profile.email,
        ))
        return result.rowcount == 1

    # ── DELETE ────────────────────────────────────────────

    def delete(self, email: str) -> bool:
        """
        Delete the profile stored under `email`.

        Returns:
            True if exactly one row was deleted.
        """
        result = execute("delete_user_profile", 'DELETE FROM "user" WHERE email = %s;', (email,))
        deleted = result.rowcount == 1
        if deleted:
            logger.info(f"Deleted profile for {email}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_profile(row: tuple) -> Profile:
        """Convert a database row tuple to a Profile domain object."""
        return Profile(
            email=row[0],
            dog_name=row[1],
            breed=row[2],
            description=row[3],
            owner_name=row[4],
            image_link=row[5],
        )

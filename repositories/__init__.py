"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for one table.
Repositories receive raw rows from the database and return domain model
objects, booleans or scalars. `Database` bundles them behind one object.
"""

from repositories.auth_repo import AuthRepository
from repositories.database import Database
from repositories.profile_repo import ProfileRepository
from repositories.token_repo import TokenRepository

__all__ = ["AuthRepository", "Database", "ProfileRepository", "TokenRepository"]

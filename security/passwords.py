"""
security/passwords.py
---------------------
Salted one-way password hashing with bcrypt.
"""

import bcrypt

from config import BCRYPT_ROUNDS

# bcrypt only looks at the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """
    Hash a password with a fresh salt.

    Args:
        password: Plain text password.
        rounds: bcrypt cost factor.

    Returns:
        The hash as text, ready to store.
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Check a plain password against a stored hash.

    Raises:
        ValueError: If `hashed` is not a bcrypt hash.
    """
    return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))

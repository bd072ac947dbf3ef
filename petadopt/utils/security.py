"""
Password hashing helpers built on bcrypt.
"""

import bcrypt

DEFAULT_ROUNDS = 10


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """
    Hash a plaintext password with a freshly generated salt.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor

    Returns:
        bcrypt hash string (``$2b$`` prefix)
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def check_password(password: str, hashed: str) -> bool:
    """Verify a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False

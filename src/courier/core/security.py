"""Password hashing utilities built on bcrypt."""
from __future__ import annotations

import bcrypt

from courier.core.settings import settings

# bcrypt only considers the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int | None = None) -> str:
    """Return a salted bcrypt hash of ``password``.

    Args:
        password: Plaintext password supplied at registration.
        rounds: Optional cost override; defaults to ``settings.bcrypt_rounds``.

    Returns:
        The modular-crypt encoded hash as text.

    Raises:
        ValueError: If the password exceeds bcrypt's input limit.
    """
    secret = password.encode("utf-8")
    if len(secret) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(secret, salt).decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored bcrypt hash.

    Returns:
        True if the password matches; False on mismatch or a malformed hash.
    """
    secret = password.encode("utf-8")
    if len(secret) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(secret, password_hash.encode("ascii"))
    except ValueError:
        return False

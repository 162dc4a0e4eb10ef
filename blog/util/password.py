"""Password hashing utilities."""

import hashlib

import bcrypt


def _prepare_password(password: str) -> bytes:
    """Encode a password for bcrypt.

    Bcrypt only reads the first 72 bytes, so longer passwords are
    pre-hashed with SHA256.
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > 72:
        return hashlib.sha256(password_bytes).hexdigest().encode("utf-8")
    return password_bytes


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt.

    Args:
        password: Plain text password
        rounds: bcrypt cost factor

    Returns:
        The bcrypt hash as a string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_prepare_password(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a password against its bcrypt hash.

    Returns:
        True if the password matches, False otherwise (including malformed
        hashes)
    """
    try:
        return bcrypt.checkpw(_prepare_password(password), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False

"""
Password hashing helpers (bcrypt)
"""
import bcrypt

from portfolio_api.core.config import settings

# bcrypt only looks at the first 72 bytes and newer releases reject longer input
_MAX_PW_BYTES = 72


def _to_bytes(value: str) -> bytes:
    b = value.encode("utf-8")
    return b[:_MAX_PW_BYTES]


def hash_password(password: str) -> str:
    """
    Hash a password with a per-password salt.

    Args:
        password: Plaintext password

    Returns:
        str: bcrypt hash (salt and work factor embedded)
    """
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_to_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash"""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_to_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash stored for this record
        return False

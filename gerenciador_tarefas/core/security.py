"""Password hashing helpers."""

import bcrypt

# bcrypt only looks at the first 72 bytes; longer inputs raise on bcrypt>=5
MAX_PASSWORD_BYTES = 72


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its stored bcrypt hash."""
    try:
        return bcrypt.checkpw(plain_password.encode(), hashed_password.encode())
    except (ValueError, TypeError):  # malformed hash in the store
        return False


def get_password_hash(password: str) -> str:
    """Hash a password for storage using bcrypt with a fresh salt."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()

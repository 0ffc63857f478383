"""Password hashing with bcrypt."""

from functools import lru_cache

from passlib.context import CryptContext

from src.config import get_settings

# bcrypt only reads this many bytes; longer input would be silently truncated
MAX_PASSWORD_BYTES = 72


@lru_cache
def _pwd_context() -> CryptContext:
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=get_settings().bcrypt_rounds,
    )


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    """Hash a password. Each call uses a fresh salt."""
    if not password:
        raise ValueError("Password must not be empty")
    if password_too_long(password):
        raise ValueError(f"Password must not exceed {MAX_PASSWORD_BYTES} bytes")
    return _pwd_context().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    if not plain_password or not hashed_password or password_too_long(plain_password):
        return False
    try:
        return _pwd_context().verify(plain_password, hashed_password)
    except ValueError:
        # Not a recognisable bcrypt hash
        return False

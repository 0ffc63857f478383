"""JWT bearer tokens identifying a user."""

from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt

from src.config import get_settings
from src.errors import TokenExpiredError, TokenInvalidError


def create_access_token(user_id: int, now: datetime | None = None) -> str:
    """Create a signed access token for ``user_id``."""
    settings = get_settings()
    issued_at = now or datetime.now(UTC)
    expire = issued_at + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> int:
    """Verify a token and return the user id it was issued for.

    Raises TokenExpiredError once the token is past its expiry and
    TokenInvalidError for anything else that fails verification.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as e:
        raise TokenExpiredError("Token has expired") from e
    except JWTError as e:
        raise TokenInvalidError(str(e)) from e

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError) as e:
        raise TokenInvalidError("Token subject is not a user id") from e

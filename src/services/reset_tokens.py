"""Single-use password reset tokens.

The raw token only ever leaves the server inside the reset link. The user row
keeps its SHA-256 digest and an expiry. A fast unsalted digest is enough here
because the token itself is 32 random bytes, and it keeps the digest usable as
a lookup key.
"""

import hashlib
import hmac
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from src.config import get_settings

TOKEN_BYTES = 32


@dataclass(frozen=True)
class ResetToken:
    """Artifacts of a freshly generated reset token."""

    token: str
    token_hash: str
    expires_at: datetime


def hash_reset_token(token: str) -> str:
    """Digest a raw reset token the way it is stored."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def generate_reset_token(now: datetime | None = None) -> ResetToken:
    """Create a random reset token with its digest and expiry."""
    now = now or datetime.now(UTC)
    token = secrets.token_hex(TOKEN_BYTES)
    expires_at = now + timedelta(minutes=get_settings().reset_token_expiration_minutes)
    return ResetToken(token=token, token_hash=hash_reset_token(token), expires_at=expires_at)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is written in UTC
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value


def verify_reset_token(
    presented: str,
    stored_hash: str | None,
    stored_expiry: datetime | None,
    now: datetime | None = None,
) -> bool:
    """Check a presented token against the stored digest and expiry."""
    if not presented or not stored_hash or stored_expiry is None:
        return False
    now = now or datetime.now(UTC)
    if not hmac.compare_digest(hash_reset_token(presented), stored_hash):
        return False
    return _as_utc(now) < _as_utc(stored_expiry)

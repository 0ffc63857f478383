"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.errors import TokenExpiredError, TokenInvalidError, UnauthorizedError
from src.models.user import User
from src.services.auth_service import AuthService
from src.services.email_service import EmailService
from src.services.todo_service import TodoService
from src.services.tokens import decode_access_token

# Missing credentials are rejected in get_current_user with the JSON envelope
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from the bearer token."""
    # HTTPBearer matches the scheme case-insensitively; only "Bearer" is accepted
    if credentials is None or credentials.scheme != "Bearer" or not credentials.credentials:
        raise UnauthorizedError()

    try:
        user_id = decode_access_token(credentials.credentials)
    except TokenExpiredError:
        raise UnauthorizedError("Token has expired") from None
    except TokenInvalidError:
        raise UnauthorizedError() from None

    user = db.get(User, user_id)
    if user is None:
        raise UnauthorizedError("User no longer exists")

    return user


def get_email_service() -> EmailService:
    """Get email service instance."""
    return EmailService()


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    email_service: Annotated[EmailService, Depends(get_email_service)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db, email_service)


def get_todo_service(
    db: Annotated[Session, Depends(get_db)],
) -> TodoService:
    """Get todo service with dependencies."""
    return TodoService(db)

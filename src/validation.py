"""Request validation.

Each ``validate_*`` function checks one field and returns the failures it
found. The ``check_*`` functions run every field validator for a request,
collect all failures, and raise a single ValidationError so the client sees
every problem at once.
"""

from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.errors import FieldError, ValidationError
from src.models.enums import TodoStatus
from src.schemas.auth import (
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
)
from src.schemas.todo import TodoCreate, TodoUpdate
from src.schemas.user import ProfileUpdate
from src.services.passwords import MAX_PASSWORD_BYTES, password_too_long

PASSWORD_MIN_LENGTH = 6
FULLNAME_MIN_LENGTH = 2
FULLNAME_MAX_LENGTH = 100
TITLE_MAX_LENGTH = 200
CONTENT_MAX_LENGTH = 1000

_url_adapter = TypeAdapter(AnyUrl)


def normalize_email(email: str) -> str:
    """Emails are stored and compared lowercase."""
    return email.strip().lower()


def _check_string(
    value: Any,
    field: str,
    label: str,
    *,
    required: bool = True,
    min_length: int | None = None,
    max_length: int | None = None,
) -> list[FieldError]:
    if value is None:
        return [FieldError(field, f"{label} is required")] if required else []
    if not isinstance(value, str):
        return [FieldError(field, f"{label} must be a string")]
    if value == "":
        return [FieldError(field, f"{label} cannot be empty")]
    if min_length is not None and len(value) < min_length:
        plural = "character" if min_length == 1 else "characters"
        return [FieldError(field, f"{label} must be at least {min_length} {plural} long")]
    if max_length is not None and len(value) > max_length:
        return [FieldError(field, f"{label} cannot exceed {max_length} characters")]
    return []


def validate_fullname(value: Any, *, required: bool = True) -> list[FieldError]:
    return _check_string(
        value,
        "fullname",
        "Full name",
        required=required,
        min_length=FULLNAME_MIN_LENGTH,
        max_length=FULLNAME_MAX_LENGTH,
    )


def validate_email_address(
    value: Any, field: str = "email", *, required: bool = True
) -> list[FieldError]:
    errors = _check_string(value, field, "Email", required=required)
    if errors or value is None:
        return errors
    try:
        validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        return [FieldError(field, "Please provide a valid email address")]
    return []


def validate_password(
    value: Any,
    field: str = "password",
    label: str = "Password",
    *,
    min_length: int | None = PASSWORD_MIN_LENGTH,
    enforce_max_bytes: bool = True,
) -> list[FieldError]:
    errors = _check_string(value, field, label, min_length=min_length)
    if not errors and enforce_max_bytes and password_too_long(value):
        errors.append(FieldError(field, f"{label} cannot exceed {MAX_PASSWORD_BYTES} bytes"))
    return errors


def validate_url(value: Any, field: str = "profileImageUrl") -> list[FieldError]:
    """Optional URL; null and empty string mean "no image"."""
    if value is None or value == "":
        return []
    if not isinstance(value, str):
        return [FieldError(field, "Profile image URL must be a valid URL")]
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        return [FieldError(field, "Profile image URL must be a valid URL")]
    return []


def validate_title(value: Any, *, required: bool = True) -> list[FieldError]:
    return _check_string(
        value, "title", "Title", required=required, min_length=1, max_length=TITLE_MAX_LENGTH
    )


def validate_content(value: Any, *, required: bool = True) -> list[FieldError]:
    return _check_string(
        value, "content", "Content", required=required, min_length=1, max_length=CONTENT_MAX_LENGTH
    )


def validate_status(value: Any) -> list[FieldError]:
    if value is None:
        return []
    if not isinstance(value, str) or value not in {s.value for s in TodoStatus}:
        return [FieldError("status", "Status must be either pending or completed")]
    return []


def raise_for_errors(errors: list[FieldError]) -> None:
    if errors:
        raise ValidationError(errors)


def check_register(data: RegisterRequest) -> None:
    raise_for_errors(
        validate_fullname(data.fullname)
        + validate_email_address(data.email)
        + validate_password(data.password)
        + validate_url(data.profile_image_url)
    )


def check_login(data: LoginRequest) -> None:
    raise_for_errors(
        validate_email_address(data.email)
        + validate_password(data.password, min_length=None, enforce_max_bytes=False)
    )


def check_forgot_password(data: ForgotPasswordRequest) -> None:
    raise_for_errors(validate_email_address(data.email))


def check_reset_password(data: ResetPasswordRequest) -> None:
    raise_for_errors(validate_password(data.password))


def check_change_password(data: ChangePasswordRequest) -> None:
    raise_for_errors(
        validate_password(
            data.current_password,
            "currentPassword",
            "Current password",
            min_length=None,
            enforce_max_bytes=False,
        )
        + validate_password(data.new_password, "newPassword", "New password")
    )


def check_profile_update(data: ProfileUpdate) -> None:
    errors: list[FieldError] = []
    if data.fullname is not None:
        if not isinstance(data.fullname, str):
            errors.append(FieldError("fullname", "Full name must be a string"))
        elif not FULLNAME_MIN_LENGTH <= len(data.fullname.strip()) <= FULLNAME_MAX_LENGTH:
            errors.append(
                FieldError("fullname", "Full name must be between 2 and 100 characters")
            )
    errors += validate_email_address(data.email, required=False)
    errors += validate_url(data.profile_image_url)
    raise_for_errors(errors)


def check_todo_create(data: TodoCreate) -> None:
    raise_for_errors(
        validate_title(data.title) + validate_content(data.content) + validate_status(data.status)
    )


def check_todo_update(data: TodoUpdate) -> None:
    raise_for_errors(
        validate_title(data.title, required=False)
        + validate_content(data.content, required=False)
        + validate_status(data.status)
    )

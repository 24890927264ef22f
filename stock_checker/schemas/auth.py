import re

from pydantic import BaseModel, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _check_email(value: str) -> str:
    if not _EMAIL_RE.match(value):
        raise PydanticCustomError("invalid_email", "Invalid email")
    return value


class SignUpForm(BaseModel):
    name: str
    email: str
    password: str
    confirm: str

    @field_validator("name")
    @classmethod
    def name_length(cls, value: str) -> str:
        if len(value) < 2:
            raise PydanticCustomError("name_too_short", "Name is too short")
        return value

    @field_validator("email")
    @classmethod
    def valid_email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("password")
    @classmethod
    def password_length(cls, value: str) -> str:
        if len(value) < 8:
            raise PydanticCustomError("password_too_short", "Min 8 characters")
        return value

    @field_validator("confirm")
    @classmethod
    def passwords_match(cls, value: str, info: ValidationInfo) -> str:
        password = info.data.get("password")
        if password is not None and value != password:
            raise PydanticCustomError("password_mismatch", "Passwords must match")
        return value


class SignInForm(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def valid_email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("password")
    @classmethod
    def password_present(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("password_required", "Password required")
        return value


def form_errors(exc: ValidationError) -> dict[str, str]:
    """First message per field; errors without a field location go under ``form``."""
    out: dict[str, str] = {}
    for issue in exc.errors():
        loc = issue.get("loc") or ()
        key = str(loc[0]) if loc else "form"
        out.setdefault(key, issue["msg"])
    return out

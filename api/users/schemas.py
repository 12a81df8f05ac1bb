"""
User API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from core.schemas import ApiModel

from .security import MAX_PASSWORD_BYTES

# users.email is varchar(150).
MAX_EMAIL_LENGTH = 150


def _check_email_length(value: str | None) -> str | None:
    if value is not None and len(value) > MAX_EMAIL_LENGTH:
        raise ValueError(f"Email must be at most {MAX_EMAIL_LENGTH} characters.")
    return value


def _check_password_bytes(value: str | None) -> str | None:
    if value is not None and len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes once UTF-8 encoded.")
    return value


class UserCreate(ApiModel):
    first_name: str = Field(..., min_length=1, max_length=80)
    last_name: str = Field(..., min_length=1, max_length=80)
    phone_number: str | None = Field(default=None, max_length=40)
    email: EmailStr
    user_picture: str | None = Field(default=None, max_length=500)
    password: str = Field(..., min_length=6, max_length=50)
    id_theme: int | None = Field(default=None, ge=1, le=10)
    id_language: int | None = Field(default=None, ge=1, le=10)
    is_admin: int = Field(default=0, ge=0, le=1)

    @field_validator("email")
    @classmethod
    def email_fits_column(cls, value: str | None) -> str | None:
        return _check_email_length(value)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str | None) -> str | None:
        return _check_password_bytes(value)


class UserUpdate(ApiModel):
    not_null_fields = frozenset({"first_name", "last_name", "email", "password", "is_admin"})

    first_name: str | None = Field(default=None, min_length=1, max_length=80)
    last_name: str | None = Field(default=None, min_length=1, max_length=80)
    phone_number: str | None = Field(default=None, max_length=40)
    email: EmailStr | None = None
    user_picture: str | None = Field(default=None, max_length=500)
    password: str | None = Field(default=None, min_length=6, max_length=50)
    id_theme: int | None = Field(default=None, ge=1, le=10)
    id_language: int | None = Field(default=None, ge=1, le=10)
    is_admin: int | None = Field(default=None, ge=0, le=1)

    @field_validator("email")
    @classmethod
    def email_fits_column(cls, value: str | None) -> str | None:
        return _check_email_length(value)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str | None) -> str | None:
        return _check_password_bytes(value)


class UserResponse(ApiModel):
    id: int
    first_name: str
    last_name: str
    phone_number: str | None = None
    email: str
    user_picture: str | None = None
    id_theme: int | None = None
    id_language: int | None = None
    is_admin: int = 0
    registration_date: datetime | None = None

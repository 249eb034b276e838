from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from zimcommon.domain.users.entities import User, normalize_identity

_EMAIL = re.compile(r"^\S+@\S+\.\S+$")


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _require_utf8(value: str) -> str:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise PydanticCustomError(
            "password_encoding",
            "Password contains characters that cannot be stored.",
        ) from exc
    return value


class RegisterRequestDTO(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    email: str = Field(min_length=1, max_length=254)
    # Strength rules are enforced by the credential manager, not here.
    password: str = Field(min_length=1)

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_whitespace(cls, value: Any) -> Any:
        return _strip(value)

    @field_validator("password")
    @classmethod
    def validate_password_text(cls, value: str) -> str:
        return _require_utf8(value)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if not _EMAIL.match(value):
            raise PydanticCustomError(
                "email_invalid",
                "Please enter a valid email address.",
                {"pattern": _EMAIL.pattern},
            )
        return normalize_identity(value)


class LoginRequestDTO(BaseModel):
    email: str = Field(min_length=1, max_length=254)
    password: str = Field(min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def strip_whitespace(cls, value: Any) -> Any:
        return _strip(value)

    @field_validator("password")
    @classmethod
    def validate_password_text(cls, value: str) -> str:
        return _require_utf8(value)


class UserDTO(BaseModel):
    id: int
    name: str
    email: str
    role: str

    @classmethod
    def from_domain(cls, user: User) -> UserDTO:
        return cls.model_validate(user.public_view())


class AuthSuccessDTO(BaseModel):
    token: str
    user: UserDTO


class CurrentUserDTO(BaseModel):
    user: UserDTO

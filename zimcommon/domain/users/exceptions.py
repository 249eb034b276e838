# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from http import HTTPStatus

from zimcommon.shared.errors.base import DomainError, InfrastructureError


class DuplicateIdentityError(Exception):
    """Raised by a user repository when the unique email constraint fires."""

    def __init__(self, email: str) -> None:
        super().__init__(f"identity already stored: {email}")
        self.email = email


class CorruptCredentialError(Exception):
    """A stored password hash that cannot be checked."""


class WeakSecretError(DomainError):
    default_code = "weak_password"

    def __init__(self, violations: Sequence[str]) -> None:
        super().__init__(
            f"Password is too weak. {' '.join(violations)}",
            context={"violations": list(violations)},
        )
        self.violations = list(violations)


class IdentityTakenError(DomainError):
    default_code = "user_already_exists"
    default_message = "User already exists with this email"


class InvalidCredentialsError(DomainError):
    default_code = "invalid_credentials"
    default_message = "Invalid credentials"


class MissingTokenError(DomainError):
    default_code = "unauthorized"
    default_status = HTTPStatus.UNAUTHORIZED
    default_message = "Authentication required"


class InvalidTokenError(DomainError):
    default_code = "invalid_token"
    default_status = HTTPStatus.FORBIDDEN
    default_message = "Invalid token"


class ExpiredTokenError(DomainError):
    default_code = "token_expired"
    default_status = HTTPStatus.FORBIDDEN
    default_message = "Token has expired"


class SigningKeyMissingError(RuntimeError):
    """The process has no token signing key configured."""


class UnexpectedAuthError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__("internal_error")

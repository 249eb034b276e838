# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Role, TokenClaims, User, normalize_identity
from .exceptions import (
    CorruptCredentialError,
    DuplicateIdentityError,
    ExpiredTokenError,
    IdentityTakenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    SigningKeyMissingError,
    UnexpectedAuthError,
    WeakSecretError,
)
from .repositories import PasswordHasher, TokenService, UserRepository

__all__ = [
    "CorruptCredentialError",
    "DuplicateIdentityError",
    "ExpiredTokenError",
    "IdentityTakenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "PasswordHasher",
    "Role",
    "SigningKeyMissingError",
    "TokenClaims",
    "TokenService",
    "UnexpectedAuthError",
    "User",
    "UserRepository",
    "WeakSecretError",
    "normalize_identity",
]

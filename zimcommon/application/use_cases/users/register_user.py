# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from zimcommon.domain.users.entities import Role, User, normalize_identity
from zimcommon.domain.users.exceptions import DuplicateIdentityError, IdentityTakenError
from zimcommon.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from zimcommon.shared.logging import logger

from .boundary import auth_boundary


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    @auth_boundary("auth.register")
    def execute(self, name: str, email: str, password: str) -> tuple[User, str]:
        email = normalize_identity(email)
        if self._users.find_by_email(email):
            raise IdentityTakenError()

        hashed = self._password_hasher.validate_and_hash(password)
        user = User(
            id=0,
            name=name.strip(),
            email=email,
            password_hash=hashed,
            role=Role.STUDENT,
            created_at=datetime.now(UTC),
        )
        try:
            persisted = self._users.add(user)
        except DuplicateIdentityError as exc:
            logger.info(f"auth.register: lost race for an existing identity ({exc.email})")
            raise IdentityTakenError() from exc

        token = self._tokens.issue(persisted.id)
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return persisted, token

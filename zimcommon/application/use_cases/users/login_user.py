# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from zimcommon.domain.users.entities import User, normalize_identity
from zimcommon.domain.users.exceptions import InvalidCredentialsError
from zimcommon.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from zimcommon.shared.logging import logger

from .boundary import auth_boundary


class LoginUserUseCase:
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

    @auth_boundary("auth.login")
    def execute(self, email: str, password: str) -> tuple[User, str]:
        user = self._users.find_by_email(normalize_identity(email))

        if user is None:
            # Unknown accounts cost one bcrypt check, like a wrong password.
            self._password_hasher.burn_verification(password)
            logger.warning("auth.login: invalid credentials")
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.warning("auth.login: invalid credentials")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id)
        logger.info(f"auth.login: ok user_id={user.id}")
        return user, token

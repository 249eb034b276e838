# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from zimcommon.domain.users.entities import User
from zimcommon.domain.users.exceptions import InvalidTokenError
from zimcommon.domain.users.repositories import UserRepository
from zimcommon.shared.logging import logger

from .boundary import auth_boundary


class GetCurrentUserUseCase:
    """Resolve the account named by a verified token subject."""

    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    @auth_boundary("auth.me")
    def execute(self, subject: str) -> User:
        try:
            user_id = int(subject)
        except ValueError as exc:
            raise InvalidTokenError() from exc

        user = self._users.find_by_id(user_id)
        if user is None:
            logger.warning(f"auth.me: token subject {user_id} has no account")
            raise InvalidTokenError()
        return user

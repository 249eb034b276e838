# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-bounded bearer tokens."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from zimcommon.domain.users.entities import TokenClaims
from zimcommon.domain.users.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    SigningKeyMissingError,
)
from zimcommon.shared.config import AuthConfig

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SessionTokenService:
    """Issues and verifies HS256 JWTs carrying ``sub``, ``iat`` and ``exp``.

    Tokens are stateless: one stays valid until ``exp`` passes or the signing
    key changes.
    """

    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = ("sub", "iat", "exp")

    def __init__(self, config: AuthConfig, *, clock: Clock | None = None) -> None:
        if not config.jwt_secret:
            msg = "JWT_SECRET is not configured"
            raise SigningKeyMissingError(msg)

        self._secret_key = config.jwt_secret
        self._ttl = timedelta(days=config.token_ttl_days)
        self._clock = clock or _utcnow

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, subject: str | int) -> str:
        # JWT timestamps are whole seconds.
        issued_at = self._clock().replace(microsecond=0)
        payload = {
            "sub": str(subject),
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": list(self.REQUIRED_CLAIMS),
                },
            )
            subject = payload["sub"]
            issued_at = datetime.fromtimestamp(int(payload["iat"]), tz=UTC)
            expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=UTC)
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError() from exc
        except (KeyError, TypeError, ValueError, OverflowError) as exc:
            raise InvalidTokenError() from exc

        if not isinstance(subject, str) or not subject:
            raise InvalidTokenError()

        # Expiry is checked against the injected clock rather than by PyJWT.
        if self._clock() >= expires_at:
            raise ExpiredTokenError()

        return TokenClaims(subject=subject, issued_at=issued_at, expires_at=expires_at)


__all__ = ["Clock", "SessionTokenService"]

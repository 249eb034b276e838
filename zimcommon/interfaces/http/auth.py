# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from zimcommon.domain.users.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from zimcommon.domain.users.repositories import TokenService
from zimcommon.shared.logging import logger


def extract_bearer_token(header: str | None) -> str | None:
    if not header:
        return None
    scheme, _, token = header.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


class BearerAuth:
    """Guards views behind ``Authorization: Bearer <token>``."""

    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def required(self, view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            token = extract_bearer_token(request.headers.get("Authorization"))
            if token is None:
                logger.warning(f"No bearer token on {request.method} {request.path}")
                raise MissingTokenError()

            try:
                claims = self._tokens.verify(token)
            except (InvalidTokenError, ExpiredTokenError) as exc:
                logger.warning(f"Auth failed ({exc.code}) on {request.method} {request.path}")
                raise

            g.user_id = claims.subject
            g.token_claims = claims
            logger.debug(f"Auth OK: user={claims.subject} {request.method} {request.path}")
            return view(*args, **kwargs)

        return inner


__all__ = ["BearerAuth", "extract_bearer_token"]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Re-classification of unexpected failures leaving the auth use cases."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from zimcommon.domain.users.exceptions import UnexpectedAuthError
from zimcommon.shared.errors.base import AppError
from zimcommon.shared.logging import logger

P = ParamSpec("P")
R = TypeVar("R")


def auth_boundary(operation: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Let typed application errors through; turn anything else into ``UnexpectedAuthError``."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return func(*args, **kwargs)
            except AppError:
                raise
            except Exception as exc:
                logger.opt(exception=exc).error(
                    f"{operation}: unexpected {type(exc).__name__}"
                )
                raise UnexpectedAuthError() from exc

        return wrapper

    return decorator

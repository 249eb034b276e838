# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import (
    AssistantNotConfiguredError,
    AssistantServiceError,
    AssistantUnavailableError,
    EmptyMessageError,
)

__all__ = [
    "AssistantNotConfiguredError",
    "AssistantServiceError",
    "AssistantUnavailableError",
    "EmptyMessageError",
]

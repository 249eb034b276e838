# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from zimcommon.shared.errors.base import DomainError, InfrastructureError


class EmptyMessageError(DomainError):
    default_code = "message_required"
    default_message = "Message is required."


class AssistantNotConfiguredError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__(
            "ai_not_configured",
            message="Server configuration error: AI API key missing.",
        )


class AssistantServiceError(InfrastructureError):
    def __init__(self, detail: str) -> None:
        super().__init__(
            "ai_service_error",
            message=f"Google AI service error: {detail}",
            context={"detail": detail},
        )
        self.detail = detail


class AssistantUnavailableError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__(
            "ai_unavailable",
            message="An internal error occurred while contacting the Google AI service.",
        )

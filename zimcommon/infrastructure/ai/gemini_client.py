# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

import httpx

from zimcommon.application.interfaces import AssistantPort
from zimcommon.domain.chat import (
    AssistantNotConfiguredError,
    AssistantServiceError,
    AssistantUnavailableError,
)
from zimcommon.shared.config import AIConfig
from zimcommon.shared.logging import logger

_INVALID_KEY = "Invalid API key or permission denied."
_RATE_LIMITED = "Rate limit exceeded or quota insufficient."
_UNAVAILABLE = "Service temporarily unavailable."
_GENERIC = "Check server logs for details."


def translate_error(status_code: int, body: str) -> str:
    """Map a failed generateContent response onto a user-facing detail."""
    upper = body.upper()
    if status_code in (401, 403) or "API_KEY_INVALID" in upper or "PERMISSION_DENIED" in upper:
        return _INVALID_KEY
    if status_code == 429 or "QUOTA" in upper or "RESOURCE_EXHAUSTED" in upper:
        return _RATE_LIMITED
    if status_code == 503 or "UNAVAILABLE" in upper:
        return _UNAVAILABLE
    return _GENERIC


def extract_text(payload: dict[str, Any]) -> str:
    candidates = payload.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(str(part.get("text", "")) for part in parts if isinstance(part, dict))


class GeminiAssistant(AssistantPort):
    """Google Generative Language REST client for single-turn prompts."""

    def __init__(self, config: AIConfig, *, transport: httpx.BaseTransport | None = None):
        self._config = config
        self._transport = transport

    def _endpoint(self) -> str:
        base = self._config.base_url.rstrip("/")
        return f"{base}/models/{self._config.model}:generateContent"

    def generate(self, prompt: str) -> str:
        if not self._config.api_key:
            logger.error("ai.gemini: GOOGLE_AI_API_KEY is not configured")
            raise AssistantNotConfiguredError()

        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        try:
            with httpx.Client(timeout=self._config.timeout, transport=self._transport) as http:
                response = http.post(
                    self._endpoint(),
                    headers={"x-goog-api-key": self._config.api_key},
                    json=payload,
                )
        except httpx.HTTPError as exc:
            logger.opt(exception=exc).error(f"ai.gemini: transport failure {type(exc).__name__}")
            raise AssistantUnavailableError() from exc

        if response.status_code != 200:
            logger.error(
                f"ai.gemini: request failed code={response.status_code} body={response.text[:200]}"
            )
            raise AssistantServiceError(translate_error(response.status_code, response.text))

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("ai.gemini: response body is not JSON")
            raise AssistantServiceError(_GENERIC) from exc

        return extract_text(data) if isinstance(data, dict) else ""

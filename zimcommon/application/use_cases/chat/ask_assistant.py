# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from zimcommon.application.interfaces import AssistantPort
from zimcommon.domain.chat import AssistantUnavailableError, EmptyMessageError
from zimcommon.shared.logging import logger

PROMPT_TEMPLATE = """\
You are a helpful assistant for Zimbabwean students seeking information about schools, \
education, and scholarships in Zimbabwe.
The user has asked: "{message}"
Provide a relevant and informative response based on your knowledge. Be concise and helpful.
Do not make up specific school names, websites, or scholarship details unless you are very confident.
If unsure, advise checking official sources.
Output the response directly, without markdown or extra text.
"""


def build_prompt(message: str) -> str:
    return PROMPT_TEMPLATE.format(message=message)


class AskAssistantUseCase:
    def __init__(self, *, assistant: AssistantPort) -> None:
        self._assistant = assistant

    def execute(self, message: str) -> str:
        message = message.strip()
        if not message:
            raise EmptyMessageError()

        logger.info(f"ai.chat: sending message preview={message[:30]!r}")
        reply = self._assistant.generate(build_prompt(message)).strip()
        if not reply:
            logger.error("ai.chat: empty reply from assistant")
            raise AssistantUnavailableError()

        logger.info(f"ai.chat: reply generated preview={reply[:100]!r}")
        return reply

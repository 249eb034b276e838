# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .ask_assistant import AskAssistantUseCase, build_prompt

__all__ = ["AskAssistantUseCase", "build_prompt"]

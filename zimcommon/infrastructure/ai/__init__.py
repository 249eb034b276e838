# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .gemini_client import GeminiAssistant, extract_text, translate_error

__all__ = ["GeminiAssistant", "extract_text", "translate_error"]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol


class AssistantPort(Protocol):
    def generate(self, prompt: str) -> str: ...

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .credentials import CredentialManager, check_strength, validate_strength
from .session_tokens import SessionTokenService

__all__ = ["CredentialManager", "SessionTokenService", "check_strength", "validate_strength"]

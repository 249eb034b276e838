# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password strength rules and bcrypt credential storage."""

from __future__ import annotations

import base64
import hashlib
import hmac
import re
import secrets
from functools import cached_property

import bcrypt

from zimcommon.domain.users.exceptions import CorruptCredentialError, WeakSecretError
from zimcommon.shared.config import AuthConfig
from zimcommon.shared.logging import logger

MIN_LENGTH = 8
MAX_LENGTH = 128

# bcrypt ignores input past 72 bytes; the digest keeps every byte significant.
_PREHASH_KEY = b"zimcommon.credentials.v1"

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(r"[^A-Za-z0-9]")


def check_strength(password: str) -> list[str]:
    """Return every rule the password violates; an empty list means it is strong."""
    violations: list[str] = []

    if len(password) < MIN_LENGTH:
        violations.append(f"Must be at least {MIN_LENGTH} characters.")
    elif len(password) > MAX_LENGTH:
        violations.append(f"Cannot exceed {MAX_LENGTH} characters.")
    if not _UPPER.search(password):
        violations.append("Must contain at least one uppercase letter (A-Z).")
    if not _LOWER.search(password):
        violations.append("Must contain at least one lowercase letter (a-z).")
    if not _DIGIT.search(password):
        violations.append("Must contain at least one number (0-9).")
    if not _SPECIAL.search(password):
        violations.append("Must contain at least one special character (e.g., !@#$%^&*).")

    return violations


def validate_strength(password: str) -> None:
    violations = check_strength(password)
    if violations:
        raise WeakSecretError(violations)


class CredentialManager:
    """Validates, hashes and verifies account passwords.

    The work factor comes from ``AuthConfig.bcrypt_rounds``; every hash gets a
    fresh salt, so two hashes of one password never compare equal and
    verification must go through :meth:`verify`.
    """

    def __init__(self, config: AuthConfig) -> None:
        self._rounds = config.bcrypt_rounds

    @staticmethod
    def _prehash(password: str) -> bytes:
        digest = hmac.new(_PREHASH_KEY, password.encode("utf-8"), hashlib.sha256).digest()
        return base64.b64encode(digest)

    def validate_strength(self, password: str) -> None:
        validate_strength(password)

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(self._prehash(password), salt).decode("utf-8")

    def validate_and_hash(self, password: str) -> str:
        self.validate_strength(password)
        return self.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        """Return whether ``password`` matches ``hashed``.

        A mismatch is ``False``. A missing or unreadable stored hash raises
        :class:`CorruptCredentialError`; it is a server fault, not a bad login.
        """
        try:
            candidate = self._prehash(password)
        except UnicodeEncodeError:
            # No stored hash can come from text that is not valid UTF-8.
            logger.warning("credentials.verify: candidate is not encodable")
            return False

        if not isinstance(hashed, str) or not hashed:
            raise CorruptCredentialError("stored hash is missing")
        try:
            return bcrypt.checkpw(candidate, hashed.encode("utf-8"))
        except ValueError as exc:
            raise CorruptCredentialError("stored hash is malformed") from exc

    @cached_property
    def _dummy_hash(self) -> str:
        return self.hash(secrets.token_urlsafe(16))

    def burn_verification(self, password: str) -> bool:
        """Spend one verification's worth of CPU for an unknown account."""
        self.verify(password, self._dummy_hash)
        return False


__all__ = [
    "CredentialManager",
    "MAX_LENGTH",
    "MIN_LENGTH",
    "check_strength",
    "validate_strength",
]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import TokenClaims, User


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def add(self, user: User) -> User: ...


class PasswordHasher(Protocol):
    def validate_and_hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
    def burn_verification(self, password: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, subject: str | int) -> str: ...
    def verify(self, token: str) -> TokenClaims: ...

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class Role(StrEnum):
    STUDENT = "student"
    ADMIN = "admin"


def normalize_identity(email: str) -> str:
    """Lookup key for an account: trimmed and lower-cased."""
    return email.strip().lower()


@dataclass(slots=True, frozen=True)
class User:

    id: int
    name: str
    email: str
    password_hash: str
    role: Role = Role.STUDENT
    created_at: datetime | None = None

    def public_view(self) -> dict[str, object]:
        return {"id": self.id, "name": self.name, "email": self.email, "role": self.role.value}


@dataclass(slots=True, frozen=True)
class TokenClaims:

    subject: str
    issued_at: datetime
    expires_at: datetime

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from zimcommon.domain.users.entities import Role, normalize_identity
from zimcommon.domain.users.entities import User as DomainUser
from zimcommon.domain.users.exceptions import DuplicateIdentityError
from zimcommon.domain.users.repositories import UserRepository
from zimcommon.infrastructure.db.models import User
from zimcommon.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
        role=Role(row.role),
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.email == normalize_identity(email)).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        email = normalize_identity(user.email)
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    name=user.name,
                    email=email,
                    password_hash=user.password_hash,
                    role=user.role.value,
                )
                if user.created_at is not None:
                    row.created_at = user.created_at
                session.add(row)
                session.flush()
                persisted = _to_domain(row)
        except IntegrityError as exc:
            raise DuplicateIdentityError(email) from exc
        return persisted

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from zimcommon.domain.schools import DuplicateSchoolError, SchoolRepository
from zimcommon.domain.schools import School as DomainSchool
from zimcommon.infrastructure.db.models import School
from zimcommon.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: School) -> DomainSchool:
    return DomainSchool(
        id=row.id,
        name=row.name,
        type=row.type,
        location=row.location,
        description=row.description,
        website=row.website,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemySchoolRepository(SchoolRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[DomainSchool]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = session.query(School).order_by(School.name.asc()).all()
            return [_to_domain(row) for row in rows]

    def find_by_id(self, school_id: int) -> DomainSchool | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(School, school_id)
            return _to_domain(row) if row else None

    def find_many(self, school_ids: Iterable[int]) -> Sequence[DomainSchool]:
        ids = list(school_ids)
        if not ids:
            return []
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(School)
                .filter(School.id.in_(ids))
                .order_by(School.name.asc())
                .all()
            )
            return [_to_domain(row) for row in rows]

    def add(self, school: DomainSchool) -> DomainSchool:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = School(
                    name=school.name,
                    location=school.location,
                    type=school.type.value,
                    description=school.description,
                    website=school.website,
                )
                session.add(row)
                session.flush()
                persisted = _to_domain(row)
        except IntegrityError as exc:
            raise DuplicateSchoolError(school.name) from exc
        return persisted

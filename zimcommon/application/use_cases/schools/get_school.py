# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from zimcommon.domain.schools import (
    InvalidSchoolIdError,
    School,
    SchoolNotFoundError,
    SchoolRepository,
)


def parse_school_id(raw: object) -> int | None:
    """Catalog ids are positive integers; anything else is not an id."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw > 0 else None
    if isinstance(raw, str) and raw.strip().isdigit():
        value = int(raw.strip())
        return value if value > 0 else None
    return None


class GetSchoolUseCase:
    def __init__(self, *, schools: SchoolRepository) -> None:
        self._schools = schools

    def execute(self, raw_id: str) -> School:
        school_id = parse_school_id(raw_id)
        if school_id is None:
            raise InvalidSchoolIdError()
        school = self._schools.find_by_id(school_id)
        if school is None:
            raise SchoolNotFoundError(context={"school_id": school_id})
        return school

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from zimcommon.domain.schools import (
    ComparisonRequestError,
    NotEnoughSchoolsError,
    SchoolRepository,
)
from zimcommon.shared.logging import logger

from .get_school import parse_school_id

MIN_SCHOOLS = 2


@dataclass(slots=True, frozen=True)
class ComparisonSelection:
    school_ids: list[int]
    school_names: list[str]


class CompareSchoolsUseCase:
    """Prepare a side-by-side comparison of catalog entries."""

    def __init__(self, *, schools: SchoolRepository) -> None:
        self._schools = schools

    def execute(self, raw_ids: Sequence[object]) -> ComparisonSelection:
        if len(raw_ids) < MIN_SCHOOLS:
            raise ComparisonRequestError()

        valid_ids: list[int] = []
        for raw in raw_ids:
            school_id = parse_school_id(raw)
            if school_id is not None and school_id not in valid_ids:
                valid_ids.append(school_id)

        found = self._schools.find_many(valid_ids)
        if len(found) < MIN_SCHOOLS:
            raise NotEnoughSchoolsError()

        logger.info(f"schools.compare: {len(found)} schools selected")
        return ComparisonSelection(
            school_ids=valid_ids,
            school_names=[school.name for school in found],
        )

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from zimcommon.domain.schools import School, SchoolRepository
from zimcommon.shared.logging import logger


class ListSchoolsUseCase:
    def __init__(self, *, schools: SchoolRepository) -> None:
        self._schools = schools

    def execute(self) -> Sequence[School]:
        schools = self._schools.list_all()
        logger.info(f"schools.list: fetched {len(schools)} schools")
        return schools

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .compare_schools import CompareSchoolsUseCase, ComparisonSelection
from .get_school import GetSchoolUseCase, parse_school_id
from .list_schools import ListSchoolsUseCase

__all__ = [
    "CompareSchoolsUseCase",
    "ComparisonSelection",
    "GetSchoolUseCase",
    "ListSchoolsUseCase",
    "parse_school_id",
]

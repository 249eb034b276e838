# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import DEFAULT_LOCATION, School, SchoolType
from .exceptions import (
    ComparisonRequestError,
    DuplicateSchoolError,
    InvalidSchoolIdError,
    NotEnoughSchoolsError,
    SchoolNotFoundError,
)
from .repositories import SchoolRepository

__all__ = [
    "DEFAULT_LOCATION",
    "ComparisonRequestError",
    "DuplicateSchoolError",
    "InvalidSchoolIdError",
    "NotEnoughSchoolsError",
    "School",
    "SchoolNotFoundError",
    "SchoolRepository",
    "SchoolType",
]

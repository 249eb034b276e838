# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from zimcommon.shared.errors.base import DomainError


class DuplicateSchoolError(Exception):
    def __init__(self, name: str) -> None:
        super().__init__(f"school already stored: {name}")
        self.name = name


class InvalidSchoolIdError(DomainError):
    default_code = "invalid_school_id"
    default_message = "Invalid school ID format"


class SchoolNotFoundError(DomainError):
    default_code = "school_not_found"
    default_status = HTTPStatus.NOT_FOUND
    default_message = "School not found"


class ComparisonRequestError(DomainError):
    default_code = "invalid_comparison"
    default_message = "Please provide an array of at least 2 school IDs to compare."


class NotEnoughSchoolsError(DomainError):
    default_code = "invalid_comparison"
    default_message = "Could not find enough valid schools to compare."

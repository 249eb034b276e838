# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""School catalog entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from zimcommon.domain.exceptions import InvariantViolation

DEFAULT_LOCATION = "Zimbabwe"


class SchoolType(StrEnum):
    NURSERY = "Nursery"
    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    COLLEGE = "College"
    UNIVERSITY = "University"
    OTHER = "Other"


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(slots=True, frozen=True)
class School:
    """A catalog entry; names are unique across the catalog."""

    id: int
    name: str
    type: SchoolType = SchoolType.PRIMARY
    location: str = DEFAULT_LOCATION
    description: str | None = None
    website: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        name = _clean(self.name)
        if not name:
            raise InvariantViolation("school name is required", field="name")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "location", _clean(self.location) or DEFAULT_LOCATION)
        object.__setattr__(self, "description", _clean(self.description))
        object.__setattr__(self, "website", _clean(self.website))
        try:
            object.__setattr__(self, "type", SchoolType(self.type))
        except ValueError as exc:
            raise InvariantViolation(f"unknown school type {self.type!r}", field="type") from exc

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "location": self.location,
            "type": self.type.value,
            "description": self.description,
            "website": self.website,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

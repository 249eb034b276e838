# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bulk import of schools from a JSON file."""

from __future__ import annotations

import argparse
import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from zimcommon.domain import InvariantViolation
from zimcommon.domain.schools import (
    DEFAULT_LOCATION,
    DuplicateSchoolError,
    School,
    SchoolRepository,
    SchoolType,
)
from zimcommon.infrastructure.db import Database
from zimcommon.infrastructure.repositories.schools.sqlalchemy_school_repository import (
    SqlAlchemySchoolRepository,
)
from zimcommon.shared.config import load_config
from zimcommon.shared.logging import logger, setup_logging

DEFAULT_SOURCE = Path("zim_schools.json")


@dataclass(slots=True)
class ImportReport:
    attempted: int = 0
    inserted: int = 0
    duplicates: list[str] = field(default_factory=list)
    invalid: list[str] = field(default_factory=list)


def load_records(path: Path) -> list[Mapping[str, Any]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list) or not data:
        msg = f"Invalid or empty data in {path.name}"
        raise ValueError(msg)
    return data


def _text(record: Mapping[str, Any], key: str) -> str | None:
    value = record.get(key)
    if value is None or isinstance(value, str):
        return value
    raise InvariantViolation(f"expected text, got {type(value).__name__}", field=key)


def _to_school(record: Mapping[str, Any]) -> School:
    if not isinstance(record, Mapping):
        raise InvariantViolation("record must be an object")
    return School(
        id=0,
        name=_text(record, "name") or "",
        type=_text(record, "type") or SchoolType.PRIMARY,
        location=_text(record, "location") or DEFAULT_LOCATION,
        description=_text(record, "description"),
        website=_text(record, "website"),
    )


def import_schools(
    records: Iterable[Mapping[str, Any]], repository: SchoolRepository
) -> ImportReport:
    """Insert every valid record; duplicates and invalid rows are skipped, not fatal."""
    report = ImportReport()
    for index, record in enumerate(records):
        report.attempted += 1
        try:
            school = _to_school(record)
        except InvariantViolation as exc:
            report.invalid.append(f"#{index}: {exc}")
            continue
        try:
            repository.add(school)
        except DuplicateSchoolError as exc:
            report.duplicates.append(exc.name)
            continue
        report.inserted += 1
    return report


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Import schools from a JSON array")
    parser.add_argument(
        "source",
        type=Path,
        default=DEFAULT_SOURCE,
        nargs="?",
        help="Path to the JSON file",
    )
    args = parser.parse_args(argv)

    config = load_config()
    setup_logging(debug_mode=config.debug_logging)

    records = load_records(args.source)
    print(f"Found {len(records)} potential schools in {args.source}")

    database = Database(config.database)
    try:
        database.init_db()
        report = import_schools(records, SqlAlchemySchoolRepository(database.session_factory))
    finally:
        database.dispose()

    print(f"Inserted {report.inserted} of {report.attempted} schools")
    if report.duplicates:
        print(f"Skipped {len(report.duplicates)} duplicates")
    if report.invalid:
        print(f"Skipped {len(report.invalid)} invalid entries")
        for line in report.invalid:
            logger.warning(f"populate: {line}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

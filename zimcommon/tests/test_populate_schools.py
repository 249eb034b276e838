from __future__ import annotations

import json
from pathlib import Path

import pytest

from zimcommon.domain.schools import SchoolType
from zimcommon.scripts.populate_schools import import_schools, load_records
from zimcommon.tests.fakes import InMemorySchoolRepository


def test_import_inserts_valid_records() -> None:
    repository = InMemorySchoolRepository()
    records = [
        {"name": "Gateway High School", "type": "Secondary", "location": "Harare"},
        {"name": "Ruzawi School", "website": "https://ruzawi.com"},
    ]

    report = import_schools(records, repository)

    assert report.attempted == 2
    assert report.inserted == 2
    stored = {school.name: school for school in repository.list_all()}
    assert stored["Gateway High School"].type is SchoolType.SECONDARY
    assert stored["Ruzawi School"].type is SchoolType.PRIMARY
    assert stored["Ruzawi School"].location == "Zimbabwe"


def test_import_skips_duplicates_and_invalid_rows() -> None:
    repository = InMemorySchoolRepository()
    records = [
        {"name": "Gateway High School"},
        {"name": "Gateway High School", "type": "Secondary"},
        {"name": ""},
        {"name": "Odd", "type": "Spaceport"},
        "not a record",
    ]

    report = import_schools(records, repository)  # type: ignore[arg-type]

    assert report.attempted == 5
    assert report.inserted == 1
    assert report.duplicates == ["Gateway High School"]
    assert len(report.invalid) == 3
    assert report.invalid[0].startswith("#2: name:")


def test_load_records(tmp_path: Path) -> None:
    source = tmp_path / "schools.json"
    source.write_text(json.dumps([{"name": "Ruzawi School"}]), encoding="utf-8")

    assert load_records(source) == [{"name": "Ruzawi School"}]


@pytest.mark.parametrize("content", ["[]", "{}", '"schools"'])
def test_load_records_rejects_empty_or_non_list(tmp_path: Path, content: str) -> None:
    source = tmp_path / "schools.json"
    source.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid or empty data"):
        load_records(source)


@pytest.mark.parametrize(
    "record",
    [
        {"name": "Gateway High School", "location": 42},
        {"name": "Gateway High School", "description": ["boarding"]},
        {"name": "Gateway High School", "website": {"url": "https://gateway.ac.zw"}},
        {"name": 7},
    ],
)
def test_import_skips_rows_with_non_text_fields(record: dict[str, object]) -> None:
    repository = InMemorySchoolRepository()

    report = import_schools([record, {"name": "Ruzawi School"}], repository)

    assert report.inserted == 1
    assert len(report.invalid) == 1
    assert report.invalid[0].startswith("#0: ")

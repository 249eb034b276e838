from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from zimcommon.application.use_cases.schools import (
    CompareSchoolsUseCase,
    GetSchoolUseCase,
    ListSchoolsUseCase,
    parse_school_id,
)
from zimcommon.domain.schools import (
    ComparisonRequestError,
    InvalidSchoolIdError,
    NotEnoughSchoolsError,
    School,
    SchoolNotFoundError,
)
from zimcommon.infrastructure.container import Container
from zimcommon.tests.fakes import InMemorySchoolRepository


@pytest.fixture()
def schools() -> InMemorySchoolRepository:
    return InMemorySchoolRepository(
        [
            School(id=0, name="Prince Edward School", type="Secondary", location="Harare"),
            School(id=0, name="Chisipite Junior School"),
            School(id=0, name="University of Zimbabwe", type="University"),
        ]
    )


@pytest.fixture()
def seeded(container: Container, app: Flask) -> list[School]:
    repository = container.school_repository
    return [
        repository.add(School(id=0, name="Prince Edward School", type="Secondary")),
        repository.add(School(id=0, name="Chisipite Junior School")),
        repository.add(School(id=0, name="University of Zimbabwe", type="University")),
    ]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (3, 3),
        ("12", 12),
        (" 7 ", 7),
        (0, None),
        (-1, None),
        ("abc", None),
        ("1.5", None),
        (True, None),
        (None, None),
    ],
)
def test_parse_school_id(raw: object, expected: int | None) -> None:
    assert parse_school_id(raw) == expected


def test_list_schools_sorted_by_name(schools: InMemorySchoolRepository) -> None:
    names = [school.name for school in ListSchoolsUseCase(schools=schools).execute()]

    assert names == ["Chisipite Junior School", "Prince Edward School", "University of Zimbabwe"]


def test_get_school(schools: InMemorySchoolRepository) -> None:
    school = GetSchoolUseCase(schools=schools).execute("1")

    assert school.name == "Prince Edward School"


def test_get_school_errors(schools: InMemorySchoolRepository) -> None:
    use_case = GetSchoolUseCase(schools=schools)

    with pytest.raises(InvalidSchoolIdError):
        use_case.execute("abc")
    with pytest.raises(SchoolNotFoundError) as excinfo:
        use_case.execute("99")

    assert excinfo.value.status == 404


def test_compare_deduplicates_ids(schools: InMemorySchoolRepository) -> None:
    selection = CompareSchoolsUseCase(schools=schools).execute([1, "1", 3, "junk"])

    assert selection.school_ids == [1, 3]
    assert selection.school_names == ["Prince Edward School", "University of Zimbabwe"]


@pytest.mark.parametrize("raw_ids", [[], [1]])
def test_compare_needs_two_ids(schools: InMemorySchoolRepository, raw_ids: list[object]) -> None:
    with pytest.raises(ComparisonRequestError):
        CompareSchoolsUseCase(schools=schools).execute(raw_ids)


@pytest.mark.parametrize("raw_ids", [[1, 1], [1, 99], ["x", "y"]])
def test_compare_needs_two_known_schools(
    schools: InMemorySchoolRepository, raw_ids: list[object]
) -> None:
    with pytest.raises(NotEnoughSchoolsError):
        CompareSchoolsUseCase(schools=schools).execute(raw_ids)


def test_http_list_schools(client: FlaskClient, seeded: list[School]) -> None:
    response = client.get("/api/schools")

    assert response.status_code == 200
    payload = response.get_json()
    assert [entry["name"] for entry in payload] == [
        "Chisipite Junior School",
        "Prince Edward School",
        "University of Zimbabwe",
    ]
    assert payload[0]["createdAt"]


def test_http_list_schools_empty(client: FlaskClient) -> None:
    response = client.get("/api/schools")

    assert response.status_code == 200
    assert response.get_json() == []


def test_http_get_school(client: FlaskClient, seeded: list[School]) -> None:
    response = client.get(f"/api/schools/{seeded[0].id}")

    assert response.status_code == 200
    assert response.get_json()["name"] == "Prince Edward School"
    assert response.get_json()["type"] == "Secondary"


def test_http_get_school_bad_id(client: FlaskClient) -> None:
    response = client.get("/api/schools/abc")

    assert response.status_code == 400
    assert response.get_json() == {
        "error": "invalid_school_id",
        "message": "Invalid school ID format",
    }


def test_http_get_school_missing(client: FlaskClient) -> None:
    response = client.get("/api/schools/42")

    assert response.status_code == 404
    assert response.get_json()["error"] == "school_not_found"


def test_http_compare_requires_token(client: FlaskClient, seeded: list[School]) -> None:
    response = client.post("/api/compare", json={"schoolIds": [1, 2]})

    assert response.status_code == 401


def test_http_compare(
    client: FlaskClient, seeded: list[School], auth_headers: dict[str, str]
) -> None:
    ids = [seeded[2].id, seeded[0].id]

    response = client.post("/api/compare", json={"schoolIds": ids}, headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json() == {
        "message": "Schools selected for comparison.",
        "schoolIds": ids,
        "schoolNames": ["Prince Edward School", "University of Zimbabwe"],
    }


@pytest.mark.parametrize(
    "body", [{}, {"schoolIds": [1]}, {"schoolIds": "1,2"}, {"schoolIds": [{"id": 1}, 2]}]
)
def test_http_compare_rejects_bad_payload(
    client: FlaskClient, seeded: list[School], auth_headers: dict[str, str], body: object
) -> None:
    response = client.post("/api/compare", json=body, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["message"] == (
        "Please provide an array of at least 2 school IDs to compare."
    )


def test_http_compare_unknown_schools(
    client: FlaskClient, seeded: list[School], auth_headers: dict[str, str]
) -> None:
    response = client.post("/api/compare", json={"schoolIds": [1, 404]}, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["message"] == "Could not find enough valid schools to compare."

import pytest

from zimcommon.domain import InvariantViolation
from zimcommon.domain.schools import School, SchoolType
from zimcommon.domain.users import Role, User, normalize_identity


def test_school_trims_fields_and_defaults_location() -> None:
    school = School(
        id=1,
        name="  Prince Edward School ",
        type="Secondary",
        location="   ",
        description="  ",
        website=" https://pes.ac.zw ",
    )

    assert school.name == "Prince Edward School"
    assert school.type is SchoolType.SECONDARY
    assert school.location == "Zimbabwe"
    assert school.description is None
    assert school.website == "https://pes.ac.zw"


def test_school_requires_name() -> None:
    with pytest.raises(InvariantViolation) as excinfo:
        School(id=1, name="   ")

    assert excinfo.value.field == "name"


def test_school_rejects_unknown_type() -> None:
    with pytest.raises(InvariantViolation) as excinfo:
        School(id=1, name="Hogwarts", type="Wizarding")

    assert excinfo.value.field == "type"
    assert str(excinfo.value).startswith("type: ")


def test_school_to_dict_uses_camel_case_timestamps() -> None:
    payload = School(id=3, name="Ruzawi").to_dict()

    assert payload == {
        "id": 3,
        "name": "Ruzawi",
        "location": "Zimbabwe",
        "type": "Primary",
        "description": None,
        "website": None,
        "createdAt": None,
        "updatedAt": None,
    }


def test_normalize_identity() -> None:
    assert normalize_identity("  Tendai@Example.COM ") == "tendai@example.com"


def test_user_public_view_hides_password_hash() -> None:
    user = User(id=5, name="Tendai", email="t@example.com", password_hash="$2b$secret")

    assert user.public_view() == {
        "id": 5,
        "name": "Tendai",
        "email": "t@example.com",
        "role": Role.STUDENT.value,
    }

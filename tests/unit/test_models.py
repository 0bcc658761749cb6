from __future__ import annotations

import pytest
from pydantic import ValidationError

from synthload.domain.models import Address, Country, Resident, Vehicle

VEHICLE = {
    "type": "suv",
    "make": "GM",
    "model": "Tahoe",
    "class": "4WheelDrive",
    "color": "black",
    "value": 41486.9,
    "tax": 1132.59,
    "paid": False,
}


def _resident(**overrides) -> dict:
    values = {
        "country_id": 1,
        "ssn": 5,
        "zipcode": "00501",
        "lastname": "Lee",
        "firstname": "Ann",
        "gender": "female",
        "license": b"S00000001",
        "phoneinfo": {"home": "313-837-0001"},
        "address": Address(number=1, street="Elm", unit=-1, city="Holtsville", state="NY", zip=501),
        "vehicleinfo": [Vehicle(**VEHICLE)],
    }
    values.update(overrides)
    return values


def test_resident_row_uses_column_names() -> None:
    row = Resident(**_resident()).to_row()
    assert row["vehicleinfo"][0]["class"] == "4WheelDrive"
    assert "vehicle_class" not in row["vehicleinfo"][0]
    assert row["address"]["zip"] == 501


def test_country_row() -> None:
    assert Country(country_id=1, country_code="AF", country_name="Afghanistan").to_row() == {
        "country_id": 1,
        "country_code": "AF",
        "country_name": "Afghanistan",
    }


@pytest.mark.parametrize(
    "overrides",
    [
        {"zipcode": "1234"},
        {"gender": "unknown"},
        {"license": b"S1"},
        {"vehicleinfo": []},
        {"ssn": 10**9},
    ],
)
def test_invalid_resident_is_rejected(overrides) -> None:
    with pytest.raises(ValidationError):
        Resident(**_resident(**overrides))


def test_models_are_frozen() -> None:
    country = Country(country_id=1, country_code="AF", country_name="Afghanistan")
    with pytest.raises(ValidationError):
        country.country_name = "changed"

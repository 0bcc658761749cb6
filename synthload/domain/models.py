"""
Domain models for synthload.

Typed, immutable counterparts of the rows described in `synthload.domain.schema`.
The synthesizer builds these models so that Pydantic validates every value as
it is assembled; `to_row()` produces the plain mapping handed to the store.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field

_FROZEN = {
    "frozen": True,
    "populate_by_name": True,
    "arbitrary_types_allowed": False,
}


class Country(BaseModel):
    """
    Representation of a single row in the `countries` parent table.
    """

    country_id: int = Field(..., ge=1, description="1-based position in the country pool.")
    country_code: str = Field(..., min_length=2, max_length=2)
    country_name: str = Field(..., min_length=1)

    model_config = _FROZEN

    def to_row(self) -> Dict[str, Any]:
        return self.model_dump()


class Address(BaseModel):
    number: int = Field(..., ge=0)
    street: str
    unit: int = Field(..., ge=-1)
    city: str
    state: str = Field(..., min_length=2, max_length=2)
    zip: int = Field(..., ge=0, le=99999)

    model_config = _FROZEN


class Vehicle(BaseModel):
    type: str
    make: str
    model: str
    vehicle_class: str = Field(..., alias="class")
    color: str
    value: float = Field(..., gt=0)
    tax: float = Field(..., gt=0)
    paid: bool

    model_config = _FROZEN


class Resident(BaseModel):
    """
    Representation of a single row in the `countries.residents` child table.
    """

    country_id: int = Field(..., ge=1, description="Inherited parent key.")
    ssn: int = Field(..., ge=0, le=999_999_999)
    zipcode: str = Field(..., pattern=r"^[0-9]{5}$")
    lastname: str
    firstname: str
    gender: Literal["male", "female"]
    license: bytes = Field(..., min_length=9, max_length=9)
    phoneinfo: Dict[str, str]
    address: Address
    vehicleinfo: List[Vehicle] = Field(..., min_length=1)

    model_config = _FROZEN

    def to_row(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


__all__ = ["Address", "Country", "Resident", "Vehicle"]

"""
Nested record synthesizer.

Builds one schema-conformant row per call from the reference pools. Most fields
are independent draws; the exceptions are:

- vehicle model: drawn from the sub-pool keyed by the already drawn (type, make),
  falling back to the default make's list for undeclared pairs;
- vehicle value and tax: value = multiplier(type) * BASE_VEHICLE_VALUE + delta
  with delta in [0, 1), and tax = value * VEHICLE_TAX_RATE;
- zip code: the top-level `zipcode` and `address.zip` carry the same draw;
- first name: drawn from the pool matching the drawn gender.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping

from synthload.domain.models import Address, Country, Resident, Vehicle
from synthload.domain.schema import COUNTRIES, RESIDENTS, TableDescriptor
from synthload.generator.pools import DEFAULT_POOLS, CountryEntry, ReferencePools
from synthload.generator.reference_data import BASE_VEHICLE_VALUE, VEHICLE_TAX_RATE
from synthload.generator.sampler import Sampler

ZIPCODE_DIGITS = 5
SSN_DIGITS = 9
LICENSE_LENGTH = 9
LICENSE_PREFIX = "S"
PHONE_SUFFIX_DIGITS = 4
MAX_STREET_NUMBER = 99998
MIN_UNIT, MAX_UNIT = -1, 9
MIN_VEHICLES, MAX_VEHICLES = 1, 3


def vehicle_value(multiplier: float, delta: float) -> float:
    return multiplier * BASE_VEHICLE_VALUE + delta


def vehicle_tax(value: float) -> float:
    return value * VEHICLE_TAX_RATE


class RecordSynthesizer:
    """
    Produces rows for the `countries` and `countries.residents` tables.

    Parameters
    ----------
    sampler : Sampler
        Source of randomness; pass `Sampler.seeded(n)` for reproducible output.
    pools : ReferencePools
        Sampling pools; defaults to the full static reference data.
    """

    def __init__(self, sampler: Sampler, pools: ReferencePools = DEFAULT_POOLS) -> None:
        self.sampler = sampler
        self.pools = pools

    # Parent rows are fully determined by the reference entry.
    def country(self, entry: CountryEntry) -> Country:
        return Country(country_id=entry.country_id, country_code=entry.code, country_name=entry.name)

    def countries(self) -> Iterator[Country]:
        for entry in self.pools.countries():
            yield self.country(entry)

    def new_ssn(self) -> int:
        return int(self.sampler.sample_digits(SSN_DIGITS))

    def license(self) -> bytes:
        return self.sampler.sample_digits(LICENSE_LENGTH, prefix=LICENSE_PREFIX).encode("ascii")

    def phone_numbers(self) -> Dict[str, str]:
        s, pools = self.sampler, self.pools
        return {
            phone_type: "-".join(
                (
                    s.choice(pools.area_codes),
                    s.choice(pools.exchanges),
                    s.sample_digits(PHONE_SUFFIX_DIGITS),
                )
            )
            for phone_type in pools.phone_types
        }

    def address(self, zipcode: str) -> Address:
        s, pools = self.sampler, self.pools
        return Address(
            number=s.sample_range(0, MAX_STREET_NUMBER),
            street=s.choice(pools.street_names),
            unit=s.sample_range(MIN_UNIT, MAX_UNIT),
            city=s.choice(pools.city_names),
            state=s.choice(pools.states),
            zip=int(zipcode),
        )

    def vehicle(self) -> Vehicle:
        s, pools = self.sampler, self.pools
        vehicle_type = s.choice(pools.vehicle_types)
        make = s.choice(pools.vehicle_makes)
        model = s.choice(pools.models_for(vehicle_type, make))
        value = vehicle_value(pools.value_multipliers[vehicle_type], s.sample_unit())
        return Vehicle(
            type=vehicle_type,
            make=make,
            model=model,
            vehicle_class=s.choice(pools.vehicle_classes),
            color=s.choice(pools.vehicle_colors),
            value=value,
            tax=vehicle_tax(value),
            paid=s.coin(),
        )

    def vehicles(self) -> List[Vehicle]:
        count = self.sampler.sample_range(MIN_VEHICLES, MAX_VEHICLES)
        return [self.vehicle() for _ in range(count)]

    def resident(self, country_id: int) -> Resident:
        s, pools = self.sampler, self.pools
        zipcode = s.sample_digits(ZIPCODE_DIGITS)
        if s.coin():
            gender, firstname = "male", s.choice(pools.first_names_male)
        else:
            gender, firstname = "female", s.choice(pools.first_names_female)
        return Resident(
            country_id=country_id,
            ssn=self.new_ssn(),
            zipcode=zipcode,
            lastname=s.choice(pools.last_names),
            firstname=firstname,
            gender=gender,
            license=self.license(),
            phoneinfo=self.phone_numbers(),
            address=self.address(zipcode),
            vehicleinfo=self.vehicles(),
        )

    def synthesize(self, descriptor: TableDescriptor, inherited: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Row for `descriptor`, with inherited parent key values taken from `inherited`.
        """
        if descriptor is RESIDENTS:
            return self.resident(country_id=inherited["country_id"]).to_row()
        if descriptor is COUNTRIES:
            country_id = inherited["country_id"]
            entries = {e.country_id: e for e in self.pools.countries()}
            return self.country(entries[country_id]).to_row()
        raise ValueError(f"No synthesizer for table '{descriptor.name}'")

    def regenerate(self, descriptor: TableDescriptor, field_name: str) -> Any:
        """Fresh value for a mutable key field, used by collision resolution."""
        if descriptor is RESIDENTS and field_name == "ssn":
            return self.new_ssn()
        raise ValueError(f"'{field_name}' of '{descriptor.name}' cannot be regenerated")


__all__ = ["RecordSynthesizer", "vehicle_tax", "vehicle_value"]

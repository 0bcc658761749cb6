"""
Reference pools: the sampling sources for every synthesized field.

`ReferencePools` bundles the static tables from `reference_data` into one
immutable object that can be swapped for smaller pools in tests. Construction
fails fast with EmptyPoolError when any pool is empty, and with
ConfigurationError when a vehicle type has no model list for the fallback make.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping, Tuple

from synthload.errors import ConfigurationError, EmptyPoolError
from synthload.generator import reference_data as ref


@dataclass(frozen=True)
class CountryEntry:
    country_id: int
    code: str
    name: str


@dataclass(frozen=True)
class ReferencePools:
    last_names: Tuple[str, ...] = ref.LAST_NAMES
    first_names_female: Tuple[str, ...] = ref.FIRST_NAMES_FEMALE
    first_names_male: Tuple[str, ...] = ref.FIRST_NAMES_MALE
    phone_types: Tuple[str, ...] = ref.PHONE_TYPES
    area_codes: Tuple[str, ...] = ref.AREA_CODES
    exchanges: Tuple[str, ...] = ref.EXCHANGES
    street_names: Tuple[str, ...] = ref.STREET_NAMES
    city_names: Tuple[str, ...] = ref.CITY_NAMES
    states: Tuple[str, ...] = ref.STATE_ABBREVIATIONS
    vehicle_types: Tuple[str, ...] = ref.VEHICLE_TYPES
    vehicle_makes: Tuple[str, ...] = ref.VEHICLE_MAKES
    vehicle_classes: Tuple[str, ...] = ref.VEHICLE_CLASSES
    vehicle_colors: Tuple[str, ...] = ref.VEHICLE_COLORS
    vehicle_models: Mapping[Tuple[str, str], Tuple[str, ...]] = field(
        default_factory=lambda: dict(ref.VEHICLE_MODELS)
    )
    value_multipliers: Mapping[str, float] = field(
        default_factory=lambda: dict(ref.VEHICLE_VALUE_MULTIPLIERS)
    )
    country_codes: Tuple[str, ...] = ref.COUNTRY_CODES
    country_names: Tuple[str, ...] = ref.COUNTRY_NAMES

    def __post_init__(self) -> None:
        for name in (
            "last_names",
            "first_names_female",
            "first_names_male",
            "phone_types",
            "area_codes",
            "exchanges",
            "street_names",
            "city_names",
            "states",
            "vehicle_types",
            "vehicle_makes",
            "vehicle_classes",
            "vehicle_colors",
            "country_codes",
        ):
            if not getattr(self, name):
                raise EmptyPoolError(name)
        for key, models in self.vehicle_models.items():
            if not models:
                raise EmptyPoolError(f"vehicle_models{key}")
        if len(self.country_codes) != len(self.country_names):
            raise ConfigurationError(
                f"country_codes ({len(self.country_codes)}) and country_names "
                f"({len(self.country_names)}) must have the same length"
            )
        for vtype in self.vehicle_types:
            if (vtype, self.default_make) not in self.vehicle_models:
                raise ConfigurationError(
                    f"No model list for fallback make '{self.default_make}' and type '{vtype}'"
                )
            if vtype not in self.value_multipliers:
                raise ConfigurationError(f"No value multiplier for vehicle type '{vtype}'")

    @property
    def default_make(self) -> str:
        """The make whose model list backs undeclared (type, make) pairs."""
        return self.vehicle_makes[0]

    def models_for(self, vehicle_type: str, make: str) -> Tuple[str, ...]:
        """
        Model sub-pool for a (type, make) pair.

        Pairs without a dedicated list fall back to the default make's list for
        the same type.
        """
        models = self.vehicle_models.get((vehicle_type, make))
        if models is None:
            models = self.vehicle_models[(vehicle_type, self.default_make)]
        return models

    def countries(self) -> Iterator[CountryEntry]:
        """Country entries in pool order; ids are 1-based pool positions."""
        for index, (code, name) in enumerate(zip(self.country_codes, self.country_names)):
            yield CountryEntry(country_id=index + 1, code=code, name=name)


DEFAULT_POOLS = ReferencePools()


def pool_sizes(pools: ReferencePools) -> Dict[str, int]:
    """Cardinality of every pool, for `synthload info`."""
    sizes = {
        name: len(getattr(pools, name))
        for name in (
            "last_names",
            "first_names_female",
            "first_names_male",
            "street_names",
            "city_names",
            "states",
            "country_codes",
        )
    }
    sizes["vehicle_models"] = sum(len(m) for m in pools.vehicle_models.values())
    return sizes


__all__ = ["CountryEntry", "DEFAULT_POOLS", "ReferencePools", "pool_sizes"]

"""
Domain package for synthload.

Exports the table descriptors and the typed row models. Keep this package
focused on data definitions and validation concerns.
"""

from synthload.domain.models import Address, Country, Resident, Vehicle
from synthload.domain.schema import (
    COUNTRIES,
    HIERARCHY,
    RESIDENTS,
    FieldKind,
    FieldSpec,
    IndexSpec,
    TableDescriptor,
)

__all__ = [
    "Address",
    "COUNTRIES",
    "Country",
    "FieldKind",
    "FieldSpec",
    "HIERARCHY",
    "IndexSpec",
    "RESIDENTS",
    "Resident",
    "TableDescriptor",
    "Vehicle",
]

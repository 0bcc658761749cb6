"""
Schema descriptors for the tables synthload populates.

A `TableDescriptor` is a static declaration of a table: its fields (primitive,
enum, fixed binary, map, nested record, array), its shard and primary keys and,
for child tables, the parent whose key prefixes its own. Descriptors render the
canonical DDL text and check synthesized rows for conformance.

Two descriptors are defined:

    countries            PRIMARY KEY (SHARD(country_id))
    countries.residents  PRIMARY KEY (ssn), inheriting country_id from countries

so the full key of a resident is (country_id, ssn).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

INT_MIN, INT_MAX = -(2**31), 2**31 - 1
LONG_MIN, LONG_MAX = -(2**63), 2**63 - 1


class FieldKind(str, Enum):
    STRING = "STRING"
    INTEGER = "INTEGER"
    LONG = "LONG"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    BOOLEAN = "BOOLEAN"
    ENUM = "ENUM"
    BINARY = "BINARY"
    MAP = "MAP"
    RECORD = "RECORD"
    ARRAY = "ARRAY"

    @property
    def is_nested(self) -> bool:
        return self in (FieldKind.MAP, FieldKind.RECORD, FieldKind.ARRAY)


@dataclass(frozen=True)
class FieldSpec:
    """
    One field of a table or nested record.

    `symbols` applies to ENUM, `size` to BINARY, `element` to MAP values and
    ARRAY elements, `fields` to RECORD.
    """

    name: str
    kind: FieldKind
    symbols: Tuple[str, ...] = ()
    size: Optional[int] = None
    element: Optional["FieldSpec"] = None
    fields: Tuple["FieldSpec", ...] = ()

    def type_ddl(self) -> str:
        if self.kind is FieldKind.ENUM:
            return f"ENUM({','.join(self.symbols)})"
        if self.kind is FieldKind.BINARY:
            return f"BINARY({self.size})"
        if self.kind in (FieldKind.MAP, FieldKind.ARRAY):
            assert self.element is not None
            return f"{self.kind.value}({self.element.type_ddl()})"
        if self.kind is FieldKind.RECORD:
            inner = ", ".join(f"{f.name} {f.type_ddl()}" for f in self.fields)
            return f"RECORD({inner})"
        return self.kind.value

    def problems(self, value: Any, path: str) -> List[str]:
        """Return a description of every way `value` violates this field."""
        kind = self.kind
        if value is None:
            return [f"{path}: missing value"]
        if kind is FieldKind.STRING:
            return [] if isinstance(value, str) else [f"{path}: expected string"]
        if kind in (FieldKind.INTEGER, FieldKind.LONG):
            low, high = (INT_MIN, INT_MAX) if kind is FieldKind.INTEGER else (LONG_MIN, LONG_MAX)
            if not isinstance(value, int) or isinstance(value, bool):
                return [f"{path}: expected {kind.value.lower()}"]
            return [] if low <= value <= high else [f"{path}: {value} out of {kind.value} range"]
        if kind in (FieldKind.FLOAT, FieldKind.DOUBLE):
            if isinstance(value, float):
                return []
            return [f"{path}: expected {kind.value.lower()}"]
        if kind is FieldKind.BOOLEAN:
            return [] if isinstance(value, bool) else [f"{path}: expected boolean"]
        if kind is FieldKind.ENUM:
            return [] if value in self.symbols else [f"{path}: '{value}' not in {self.symbols}"]
        if kind is FieldKind.BINARY:
            if not isinstance(value, (bytes, bytearray)):
                return [f"{path}: expected bytes"]
            if self.size is not None and len(value) != self.size:
                return [f"{path}: expected {self.size} bytes, got {len(value)}"]
            return []

        assert kind.is_nested
        found: List[str] = []
        if kind is FieldKind.MAP:
            if not isinstance(value, Mapping):
                return [f"{path}: expected map"]
            for key, item in value.items():
                if not isinstance(key, str):
                    found.append(f"{path}: map key {key!r} is not a string")
                found.extend(self.element.problems(item, f"{path}[{key!r}]"))
        elif kind is FieldKind.ARRAY:
            if not isinstance(value, (list, tuple)):
                return [f"{path}: expected array"]
            for i, item in enumerate(value):
                found.extend(self.element.problems(item, f"{path}[{i}]"))
        else:
            if not isinstance(value, Mapping):
                return [f"{path}: expected record"]
            found.extend(_record_problems(self.fields, value, path))
        return found


def _record_problems(fields: Tuple[FieldSpec, ...], row: Mapping[str, Any], path: str) -> List[str]:
    found: List[str] = []
    declared = {f.name for f in fields}
    for spec in fields:
        found.extend(spec.problems(row.get(spec.name), f"{path}.{spec.name}" if path else spec.name))
    for extra in sorted(set(row) - declared):
        found.append(f"{path + '.' if path else ''}{extra}: undeclared field")
    return found


@dataclass(frozen=True)
class IndexSpec:
    name: str
    fields: Tuple[str, ...]


@dataclass(frozen=True)
class TableDescriptor:
    """
    Static declaration of a table.

    Attributes
    ----------
    name : str
        Logical name; child tables are qualified by their parent ("countries.residents").
    fields : tuple[FieldSpec, ...]
        Fields declared by this table, excluding inherited parent key fields.
    primary_key : tuple[str, ...]
        This table's own primary key fields, in order.
    shard_key : tuple[str, ...]
        Leading primary key fields used for partitioning. Child tables inherit
        their parent's shard key and must leave this empty.
    parent : TableDescriptor | None
        Parent table whose full primary key prefixes this table's key.
    mutable_key_field : str | None
        Trailing key field re-sampled when a generated key collides.
    indexes : tuple[IndexSpec, ...]
        Secondary indexes declared with the table.
    """

    name: str
    fields: Tuple[FieldSpec, ...]
    primary_key: Tuple[str, ...]
    shard_key: Tuple[str, ...] = ()
    parent: Optional["TableDescriptor"] = None
    mutable_key_field: Optional[str] = None
    indexes: Tuple[IndexSpec, ...] = ()

    def __post_init__(self) -> None:
        own = {f.name for f in self.fields}
        missing = [k for k in self.primary_key if k not in own]
        if missing:
            raise ValueError(f"{self.name}: primary key fields {missing} are not declared")
        if self.parent is not None and self.shard_key:
            raise ValueError(f"{self.name}: child tables inherit the parent shard key")
        if self.shard_key and self.primary_key[: len(self.shard_key)] != self.shard_key:
            raise ValueError(f"{self.name}: shard key must be a prefix of the primary key")
        if self.mutable_key_field is not None and self.mutable_key_field not in self.primary_key:
            raise ValueError(f"{self.name}: mutable key field must be an own key field")
        if self.mutable_key_field is not None and self.mutable_key_field in self.full_shard_key:
            raise ValueError(f"{self.name}: mutable key field cannot be part of the shard key")

    @property
    def physical_name(self) -> str:
        return self.name.replace(".", "_")

    @property
    def full_primary_key(self) -> Tuple[str, ...]:
        inherited = self.parent.full_primary_key if self.parent is not None else ()
        return inherited + self.primary_key

    @property
    def full_shard_key(self) -> Tuple[str, ...]:
        if self.parent is not None:
            return self.parent.full_shard_key
        return self.shard_key or self.primary_key[:1]

    @property
    def inherited_fields(self) -> Tuple[FieldSpec, ...]:
        if self.parent is None:
            return ()
        return tuple(self.parent.field(name) for name in self.parent.full_primary_key)

    @property
    def all_fields(self) -> Tuple[FieldSpec, ...]:
        return self.inherited_fields + self.fields

    def field(self, name: str) -> FieldSpec:
        for spec in self.all_fields:
            if spec.name == name:
                return spec
        raise KeyError(f"{self.name} has no field '{name}'")

    def key_of(self, row: Mapping[str, Any]) -> Tuple[Any, ...]:
        """Composite key of `row`, in declared key order."""
        return tuple(row[name] for name in self.full_primary_key)

    def key_dict(self, key: Tuple[Any, ...]) -> Dict[str, Any]:
        if len(key) != len(self.full_primary_key):
            raise ValueError(f"{self.name}: key {key!r} does not match {self.full_primary_key}")
        return dict(zip(self.full_primary_key, key))

    def problems(self, row: Mapping[str, Any]) -> List[str]:
        return _record_problems(self.all_fields, row, "")

    def validate(self, row: Mapping[str, Any]) -> None:
        """Raise ValueError listing every schema violation in `row`."""
        found = self.problems(row)
        if found:
            raise ValueError(f"Row does not conform to {self.name}: " + "; ".join(found))

    def create_statement(self) -> str:
        columns = ", ".join(f"{f.name} {f.type_ddl()}" for f in self.fields)
        key_parts = list(self.primary_key)
        if self.shard_key:
            shard = ", ".join(self.shard_key)
            key_parts = [f"SHARD({shard})"] + key_parts[len(self.shard_key) :]
        return (
            f"CREATE TABLE IF NOT EXISTS {self.name} "
            f"({columns}, PRIMARY KEY ({', '.join(key_parts)}))"
        )

    def index_statements(self) -> List[str]:
        return [
            f"CREATE INDEX IF NOT EXISTS {idx.name} ON {self.name}({', '.join(idx.fields)})"
            for idx in self.indexes
        ]

    def drop_statements(self) -> List[str]:
        drops = [f"DROP INDEX IF EXISTS {idx.name} ON {self.name}" for idx in self.indexes]
        drops.append(f"DROP TABLE IF EXISTS {self.name}")
        return drops


def _string(name: str) -> FieldSpec:
    return FieldSpec(name, FieldKind.STRING)


COUNTRIES = TableDescriptor(
    name="countries",
    fields=(
        FieldSpec("country_id", FieldKind.INTEGER),
        _string("country_code"),
        _string("country_name"),
    ),
    primary_key=("country_id",),
    shard_key=("country_id",),
)

ADDRESS = FieldSpec(
    "address",
    FieldKind.RECORD,
    fields=(
        FieldSpec("number", FieldKind.INTEGER),
        _string("street"),
        FieldSpec("unit", FieldKind.INTEGER),
        _string("city"),
        _string("state"),
        FieldSpec("zip", FieldKind.INTEGER),
    ),
)

VEHICLE = FieldSpec(
    "",
    FieldKind.RECORD,
    fields=(
        _string("type"),
        _string("make"),
        _string("model"),
        _string("class"),
        _string("color"),
        FieldSpec("value", FieldKind.FLOAT),
        FieldSpec("tax", FieldKind.DOUBLE),
        FieldSpec("paid", FieldKind.BOOLEAN),
    ),
)

RESIDENTS = TableDescriptor(
    name="countries.residents",
    fields=(
        FieldSpec("ssn", FieldKind.LONG),
        _string("zipcode"),
        _string("lastname"),
        _string("firstname"),
        FieldSpec("gender", FieldKind.ENUM, symbols=("male", "female")),
        FieldSpec("license", FieldKind.BINARY, size=9),
        FieldSpec("phoneinfo", FieldKind.MAP, element=_string("")),
        ADDRESS,
        FieldSpec("vehicleinfo", FieldKind.ARRAY, element=VEHICLE),
    ),
    primary_key=("ssn",),
    parent=COUNTRIES,
    mutable_key_field="ssn",
    indexes=(IndexSpec("firstlast", ("firstname", "lastname")),),
)

# Parents before children; teardown walks this in reverse.
HIERARCHY: Tuple[TableDescriptor, ...] = (COUNTRIES, RESIDENTS)


__all__ = [
    "COUNTRIES",
    "FieldKind",
    "FieldSpec",
    "HIERARCHY",
    "IndexSpec",
    "RESIDENTS",
    "TableDescriptor",
]

from __future__ import annotations

from typing import Any, Dict, List

import pytest

from synthload.domain.schema import COUNTRIES, RESIDENTS
from synthload.errors import KeyResolutionError
from synthload.generator.keys import KeyResolver
from synthload.infrastructure.memory import InMemoryTableStore
from synthload.infrastructure.store import WriteMode, WriteOutcome

COLLIDING_SSNS = [111, 222]
FREE_SSN = 333


class _RacingStore(InMemoryTableStore):
    """Another writer claims the key between the existence check and the write."""

    def __init__(self, competitor: Dict[str, Any]) -> None:
        super().__init__()
        self._competitor = competitor

    def write(self, descriptor, row, mode):
        if self._competitor is not None and descriptor is RESIDENTS and mode is WriteMode.INSERT_IF_ABSENT:
            competitor, self._competitor = self._competitor, None
            super().write(descriptor, competitor, WriteMode.INSERT)
        return super().write(descriptor, row, mode)


def _row(ssn: int, country_id: int = 1, **fields: Any) -> Dict[str, Any]:
    row = {"country_id": country_id, "ssn": ssn, "lastname": "Original"}
    row.update(fields)
    return row


def _seed(store: InMemoryTableStore, *ssns: int) -> None:
    store.write(COUNTRIES, {"country_id": 1, "country_code": "US", "country_name": "United States"}, WriteMode.UPSERT)
    for ssn in ssns:
        store.write(RESIDENTS, _row(ssn, lastname="Existing"), WriteMode.INSERT)


def _regenerator(values: List[int]):
    pending = list(values)
    return lambda: pending.pop(0)


def test_free_key_is_written_without_collisions(memory_store: InMemoryTableStore) -> None:
    _seed(memory_store)
    resolver = KeyResolver(memory_store, RESIDENTS, regenerate=_regenerator([]))

    resolution = resolver.resolve_and_write(_row(FREE_SSN))

    assert resolution.outcome is WriteOutcome.WRITTEN
    assert resolution.key == (1, FREE_SSN)
    assert resolution.collisions == 0


def test_colliding_key_regenerates_only_the_mutable_field(memory_store: InMemoryTableStore) -> None:
    _seed(memory_store, *COLLIDING_SSNS)
    resolver = KeyResolver(memory_store, RESIDENTS, regenerate=_regenerator([COLLIDING_SSNS[1], FREE_SSN]))
    row = _row(COLLIDING_SSNS[0], lastname="Kept")

    resolution = resolver.resolve_and_write(row)

    assert resolution.collisions == 2
    assert resolution.key == (1, FREE_SSN)
    assert row["ssn"] == FREE_SSN
    stored = memory_store.get(RESIDENTS, (1, FREE_SSN))
    assert stored["lastname"] == "Kept"
    # The pre-existing rows are untouched.
    assert memory_store.get(RESIDENTS, (1, COLLIDING_SSNS[0]))["lastname"] == "Existing"


def test_same_ssn_under_another_parent_is_not_a_collision(memory_store: InMemoryTableStore) -> None:
    _seed(memory_store, FREE_SSN)
    memory_store.write(COUNTRIES, {"country_id": 2, "country_code": "FR", "country_name": "France"}, WriteMode.UPSERT)
    resolver = KeyResolver(memory_store, RESIDENTS, regenerate=_regenerator([]))

    resolution = resolver.resolve_and_write(_row(FREE_SSN, country_id=2))

    assert resolution.collisions == 0
    assert resolution.outcome is WriteOutcome.WRITTEN


def test_key_claimed_by_concurrent_writer_is_skipped() -> None:
    store = _RacingStore(_row(FREE_SSN, lastname="Competitor"))
    for descriptor in (COUNTRIES, RESIDENTS):
        for statement in store.create_statements(descriptor):
            store.execute_statement(statement)
    _seed(store)
    resolver = KeyResolver(store, RESIDENTS, regenerate=_regenerator([]))

    resolution = resolver.resolve_and_write(_row(FREE_SSN, lastname="Late"))

    assert resolution.outcome is WriteOutcome.SKIPPED_DUPLICATE
    assert store.get(RESIDENTS, (1, FREE_SSN))["lastname"] == "Competitor"


def test_exhausted_retry_budget_raises(memory_store: InMemoryTableStore) -> None:
    _seed(memory_store, *COLLIDING_SSNS)
    resolver = KeyResolver(
        memory_store, RESIDENTS, regenerate=lambda: COLLIDING_SSNS[0], max_attempts=5
    )
    with pytest.raises(KeyResolutionError) as excinfo:
        resolver.resolve(_row(COLLIDING_SSNS[0]))
    assert excinfo.value.attempts == 5


def test_resolver_requires_a_mutable_key_field(memory_store: InMemoryTableStore) -> None:
    with pytest.raises(ValueError):
        KeyResolver(memory_store, COUNTRIES, regenerate=lambda: 1)

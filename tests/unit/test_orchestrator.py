from __future__ import annotations

import json
from pathlib import Path

import pytest

from synthload.domain.schema import COUNTRIES, RESIDENTS
from synthload.errors import ConfigurationError, SchemaStatementError
from synthload.generator.pools import ReferencePools
from synthload.generator.sampler import Sampler
from synthload.generator.synthesizer import RecordSynthesizer
from synthload.infrastructure.memory import InMemoryTableStore
from synthload.infrastructure.store import StatementResult, StatementStatus
from synthload.orchestrator import (
    LoadDriver,
    Phase,
    check_statement,
    drop_tables,
    ensure_schema,
    run_teardown,
)

PARENT_COUNT = 5
RECORD_COUNT = 100
SEED = 2024


def _driver(store, pools: ReferencePools, records: int = RECORD_COUNT, seed: int = SEED, **kwargs) -> LoadDriver:
    return LoadDriver(store, RecordSynthesizer(Sampler.seeded(seed), pools), records=records, **kwargs)


def test_full_run_loads_parents_then_children(small_pools: ReferencePools) -> None:
    store = InMemoryTableStore()
    session = _driver(store, small_pools).run()

    assert session.history == [
        Phase.PENDING,
        Phase.SCHEMA,
        Phase.PARENT_LOAD,
        Phase.CHILD_LOAD,
        Phase.REPORT,
        Phase.DONE,
    ]
    assert store.count(COUNTRIES) == PARENT_COUNT
    assert store.count(RESIDENTS) == RECORD_COUNT
    assert session.inserted == PARENT_COUNT + RECORD_COUNT
    assert session.deleted == 0

    child_report = session.report_for(Phase.CHILD_LOAD)[0]
    assert child_report.written + child_report.skipped == RECORD_COUNT
    keys = list(store.iter_keys(RESIDENTS))
    assert len(keys) == len(set(keys)) == RECORD_COUNT
    assert len({country_id for country_id, _ in keys}) <= PARENT_COUNT


def test_children_reference_existing_parents(small_pools: ReferencePools) -> None:
    store = InMemoryTableStore()
    _driver(store, small_pools).run()

    parent_keys = set(store.iter_keys(COUNTRIES))
    last_names = set()
    for row in store.iter_rows(RESIDENTS):
        assert (row["country_id"],) in parent_keys
        assert RESIDENTS.problems(row) == []
        last_names.add(row["lastname"])
    assert last_names <= set(small_pools.last_names)


def test_parent_load_is_idempotent_and_children_accumulate(small_pools: ReferencePools) -> None:
    store = InMemoryTableStore()
    _driver(store, small_pools).run()
    parents_before = list(store.iter_rows(COUNTRIES))
    # Same seed: the first child row regenerates an identical key and must be re-keyed.
    second = _driver(store, small_pools).run()

    assert store.count(COUNTRIES) == PARENT_COUNT
    assert list(store.iter_rows(COUNTRIES)) == parents_before
    assert store.count(RESIDENTS) == 2 * RECORD_COUNT
    child_report = second.report_for(Phase.CHILD_LOAD)[0]
    assert child_report.written == RECORD_COUNT
    assert child_report.collisions >= 1
    assert child_report.skipped == 0


def test_teardown_deletes_children_before_parents(small_pools: ReferencePools) -> None:
    store = InMemoryTableStore()
    _driver(store, small_pools).run()

    session = _driver(store, small_pools, records=0, delete_existing=True).run()

    teardown = session.report_for(Phase.TEARDOWN)
    assert [r.table for r in teardown] == ["countries.residents", "countries"]
    assert [r.deleted for r in teardown] == [RECORD_COUNT, PARENT_COUNT]
    assert session.deleted == RECORD_COUNT + PARENT_COUNT
    # Zero records still reloads the parent table.
    assert store.count(COUNTRIES) == PARENT_COUNT
    assert store.count(RESIDENTS) == 0


def test_zero_records_writes_only_parents(small_pools: ReferencePools) -> None:
    store = InMemoryTableStore()
    session = _driver(store, small_pools, records=0).run()

    child_report = session.report_for(Phase.CHILD_LOAD)[0]
    assert child_report.outcomes == 0
    assert store.count(COUNTRIES) == PARENT_COUNT


def test_negative_record_count_is_rejected(small_pools: ReferencePools) -> None:
    with pytest.raises(ConfigurationError):
        _driver(InMemoryTableStore(), small_pools, records=-1)


def test_child_load_before_parent_load_is_rejected(small_pools: ReferencePools) -> None:
    driver = _driver(InMemoryTableStore(), small_pools)
    driver.ensure_schema()
    with pytest.raises(RuntimeError):
        driver.load_children()


def test_phases_cannot_repeat(small_pools: ReferencePools) -> None:
    driver = _driver(InMemoryTableStore(), small_pools)
    driver.run()
    with pytest.raises(RuntimeError):
        driver.load_parents()


def test_run_persists_report(small_pools: ReferencePools, tmp_path: Path) -> None:
    store = InMemoryTableStore()
    _driver(store, small_pools, records=10, results_dir=tmp_path).run()

    payload = json.loads((tmp_path / "latest.json").read_text(encoding="utf-8"))
    assert payload["store"] == "memory"
    assert payload["inserted"] == PARENT_COUNT + 10
    assert [p["phase"] for p in payload["phases"]] == ["parent_load", "child_load"]
    assert len(list(tmp_path.glob("run-*.json"))) == 1


def test_run_teardown_counts_rows(small_pools: ReferencePools) -> None:
    store = InMemoryTableStore()
    _driver(store, small_pools, records=20).run()
    assert run_teardown(store) == {"countries.residents": 20, "countries": PARENT_COUNT}
    assert run_teardown(store) == {"countries.residents": 0, "countries": 0}


def test_drop_tables_removes_schema(memory_store: InMemoryTableStore) -> None:
    assert drop_tables(memory_store) == 3
    assert not memory_store.has_table("countries")
    assert not memory_store.has_table("countries.residents")


def test_ensure_schema_is_repeatable(memory_store: InMemoryTableStore) -> None:
    ensure_schema(memory_store)
    assert memory_store.has_table("countries.residents")


@pytest.mark.parametrize("status", [StatementStatus.FAILED, StatementStatus.CANCELLED, StatementStatus.IN_PROGRESS])
def test_check_statement_rejects_unsuccessful_statements(status: StatementStatus) -> None:
    with pytest.raises(SchemaStatementError) as excinfo:
        check_statement(StatementResult("CREATE TABLE x", status, error_message="boom"))
    assert status.value.upper() in str(excinfo.value)
    assert "CREATE TABLE x" in str(excinfo.value)


def test_check_statement_tolerates_existing_objects() -> None:
    check_statement(StatementResult("CREATE TABLE x", StatementStatus.FAILED, already_exists=True))
    check_statement(StatementResult("CREATE TABLE x", StatementStatus.SUCCEEDED))


def test_phase_reports_omit_traced_allocations_by_default(small_pools: ReferencePools) -> None:
    session = _driver(InMemoryTableStore(), small_pools, records=10).run()
    for report in session.reports:
        assert report.to_dict()["peak_traced_bytes"] is None


def test_trace_allocations_reports_peak_traced_bytes(small_pools: ReferencePools) -> None:
    session = _driver(InMemoryTableStore(), small_pools, records=10, trace_allocations=True).run()
    child_report = session.report_for(Phase.CHILD_LOAD)[0]
    assert child_report.peak_traced_bytes is not None
    assert child_report.peak_traced_bytes > 0
    assert session.to_dict()["phases"][-1]["peak_traced_bytes"] == child_report.peak_traced_bytes

"""
Hierarchical load driver: schema setup, teardown, parent load, child load, report.

Usage (example from CLI):
    from synthload.orchestrator import LoadDriver

    driver = LoadDriver(store, RecordSynthesizer(Sampler()), records=100, delete_existing=True)
    session = driver.run()
    print(session.to_dict())

Phases always run in this order, each at most once:

    SCHEMA -> TEARDOWN (optional) -> PARENT_LOAD -> CHILD_LOAD -> REPORT -> DONE

The parent load completes before any child row is generated, and children draw
their parent key from the keys actually present in the parent table. Reports are
saved to `results/` when a results directory is given:
- `results/latest.json` (last run)
- `results/run-<timestamp>.json` (timestamped archive)
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from synthload.domain.schema import COUNTRIES, HIERARCHY, RESIDENTS, TableDescriptor
from synthload.errors import ConfigurationError, SchemaStatementError
from synthload.generator.keys import DEFAULT_MAX_ATTEMPTS, KeyResolver
from synthload.generator.synthesizer import RecordSynthesizer
from synthload.infrastructure.store import (
    StatementResult,
    StatementStatus,
    TableStore,
    WriteMode,
    WriteOutcome,
)
from synthload.utils.logging import get_logger
from synthload.utils.profiler import ProfileStats, profile_block

log = get_logger(__name__)


class Phase(str, Enum):
    PENDING = "pending"
    SCHEMA = "schema"
    TEARDOWN = "teardown"
    PARENT_LOAD = "parent_load"
    CHILD_LOAD = "child_load"
    REPORT = "report"
    DONE = "done"


# Phases each phase may directly follow.
_PREDECESSORS = {
    Phase.SCHEMA: (Phase.PENDING,),
    Phase.TEARDOWN: (Phase.SCHEMA,),
    Phase.PARENT_LOAD: (Phase.SCHEMA, Phase.TEARDOWN),
    Phase.CHILD_LOAD: (Phase.PARENT_LOAD,),
    Phase.REPORT: (Phase.CHILD_LOAD,),
    Phase.DONE: (Phase.REPORT,),
}


def _round_float(value: float, decimals: int = 2) -> float:
    """Round a float to specified decimal places for human-readable output."""
    return round(value, decimals)


@dataclass
class PhaseReport:
    phase: Phase
    table: str
    written: int = 0
    skipped: int = 0
    failed: int = 0
    deleted: int = 0
    collisions: int = 0
    duration_seconds: float = 0.0
    throughput_rows_per_sec: float = 0.0
    peak_rss_bytes: Optional[int] = None
    peak_traced_bytes: Optional[int] = None
    cpu_percent: Optional[float] = None

    @property
    def outcomes(self) -> int:
        return self.written + self.skipped + self.failed

    def record(self, outcome: WriteOutcome) -> None:
        if outcome is WriteOutcome.WRITTEN:
            self.written += 1
        elif outcome is WriteOutcome.SKIPPED_DUPLICATE:
            self.skipped += 1
        else:
            self.failed += 1

    def absorb(self, stats: ProfileStats) -> None:
        self.duration_seconds = _round_float(stats.duration_seconds, 3)
        self.throughput_rows_per_sec = _round_float(stats.throughput_rows_per_sec)
        self.peak_rss_bytes = stats.peak_rss_bytes
        self.peak_traced_bytes = stats.peak_traced_bytes
        self.cpu_percent = _round_float(stats.cpu_percent, 1) if stats.cpu_percent else None

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["phase"] = self.phase.value
        return payload


@dataclass
class LoadSession:
    """
    Ephemeral state of one run, owned by the driver.
    """

    target_records: int
    delete_existing: bool
    store: str
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    history: List[Phase] = field(default_factory=lambda: [Phase.PENDING])
    reports: List[PhaseReport] = field(default_factory=list)

    @property
    def phase(self) -> Phase:
        return self.history[-1]

    def report_for(self, phase: Phase) -> List[PhaseReport]:
        return [r for r in self.reports if r.phase is phase]

    def _total(self, attr: str) -> int:
        return sum(getattr(r, attr) for r in self.reports)

    @property
    def inserted(self) -> int:
        return self._total("written")

    @property
    def deleted(self) -> int:
        return self._total("deleted")

    @property
    def skipped(self) -> int:
        return self._total("skipped")

    @property
    def elapsed_seconds(self) -> float:
        if self.started_at is None or self.finished_at is None:
            return 0.0
        return (self.finished_at - self.started_at).total_seconds()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "store": self.store,
            "target_records": self.target_records,
            "delete_existing": self.delete_existing,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "finished_at": self.finished_at.isoformat() if self.finished_at else None,
            "elapsed_seconds": _round_float(self.elapsed_seconds, 3),
            "inserted": self.inserted,
            "deleted": self.deleted,
            "skipped": self.skipped,
            "phases": [r.to_dict() for r in self.reports],
        }


def check_statement(result: StatementResult) -> None:
    """
    Log a schema statement outcome; raise unless it succeeded or only found an
    existing object.
    """
    if result.status is StatementStatus.SUCCEEDED:
        log.info("Schema statement succeeded", extra={"statement": result.statement, "info": result.info})
        return
    if result.already_exists:
        log.info("Schema object already exists", extra={"statement": result.statement})
        return
    log.error(
        f"Schema statement {result.status.value.upper()}",
        extra={"statement": result.statement, "error": result.error_message, "info": result.info},
    )
    raise SchemaStatementError(result.statement, result.status.value, result.error_message or result.info)


def ensure_schema(store: TableStore, tables: Sequence[TableDescriptor] = HIERARCHY) -> None:
    """Create tables (parents first) and their indexes if they do not exist."""
    for descriptor in tables:
        for statement in store.create_statements(descriptor):
            check_statement(store.execute_statement(statement))


def drop_tables(store: TableStore, tables: Sequence[TableDescriptor] = HIERARCHY) -> int:
    """Drop indexes and tables, children first. Returns the number of statements run."""
    executed = 0
    for descriptor in reversed(tables):
        for statement in store.drop_statements(descriptor):
            check_statement(store.execute_statement(statement))
            executed += 1
    return executed


def _persist_results(payload: dict, results_dir: Path) -> Path:
    results_dir.mkdir(parents=True, exist_ok=True)
    latest_path = results_dir / "latest.json"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    archive_path = results_dir / f"run-{timestamp}.json"

    for path in (latest_path, archive_path):
        with path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, sort_keys=True)

    log.info("Results persisted", extra={"latest": str(latest_path), "archive": str(archive_path)})
    return latest_path


class LoadDriver:
    """
    Two-level load driver for the countries / countries.residents hierarchy.

    Parameters
    ----------
    store : TableStore
        Open store; the driver does not close it.
    synthesizer : RecordSynthesizer
        Row source; its sampler also picks the parent key of each child row.
    records : int
        Number of child rows to generate.
    delete_existing : bool
        Run the teardown phase before loading.
    max_key_attempts : int
        Collision retry budget per child row.
    results_dir : Path | None
        Where to persist the JSON report; None disables persistence.
    trace_allocations : bool
        Track peak Python allocations per phase with tracemalloc (slower).
    """

    def __init__(
        self,
        store: TableStore,
        synthesizer: RecordSynthesizer,
        records: int,
        delete_existing: bool = False,
        max_key_attempts: int = DEFAULT_MAX_ATTEMPTS,
        results_dir: Optional[Path] = None,
        trace_allocations: bool = False,
        parent: TableDescriptor = COUNTRIES,
        child: TableDescriptor = RESIDENTS,
    ) -> None:
        if records < 0:
            raise ConfigurationError(f"records must be >= 0, got {records}")
        if child.parent is not parent:
            raise ConfigurationError(f"'{child.name}' is not a child of '{parent.name}'")
        self.store = store
        self.synthesizer = synthesizer
        self.parent = parent
        self.child = child
        self.results_dir = results_dir
        self.trace_allocations = trace_allocations
        self.session = LoadSession(
            target_records=records, delete_existing=delete_existing, store=store.name
        )
        self.resolver = KeyResolver(
            store,
            child,
            regenerate=lambda: synthesizer.regenerate(child, child.mutable_key_field),
            max_attempts=max_key_attempts,
        )

    @property
    def tables(self) -> Sequence[TableDescriptor]:
        return (self.parent, self.child)

    def _profile(self, label: str):
        return profile_block(label, enable_tracemalloc=self.trace_allocations)

    def _absorb(self, report: PhaseReport, stats: ProfileStats) -> None:
        report.absorb(stats)
        log.debug("Phase profile", extra=stats.as_dict())

    def _enter(self, phase: Phase) -> None:
        current = self.session.phase
        if current not in _PREDECESSORS.get(phase, ()):
            raise RuntimeError(f"Cannot enter phase {phase.value} after {current.value}")
        self.session.history.append(phase)
        log.info(f"[PHASE] {phase.value.upper()}", extra={"phase": phase.value})

    def ensure_schema(self) -> None:
        self._enter(Phase.SCHEMA)
        ensure_schema(self.store, self.tables)

    def teardown(self) -> List[PhaseReport]:
        """Delete every row, child table first."""
        self._enter(Phase.TEARDOWN)
        reports = []
        for descriptor in reversed(self.tables):
            report = PhaseReport(Phase.TEARDOWN, descriptor.name)
            with self._profile(f"teardown:{descriptor.name}") as stats:
                for key in self.store.iter_keys(descriptor):
                    if self.store.delete(descriptor, key):
                        report.deleted += 1
                        stats.rows += 1
            self._absorb(report, stats)
            log.info(
                f"{report.deleted} records deleted",
                extra={"table": descriptor.name, "deleted": report.deleted},
            )
            reports.append(report)
        self.session.reports.extend(reports)
        return reports

    def load_parents(self) -> PhaseReport:
        """One upserted row per reference entry; re-running rewrites identical rows."""
        self._enter(Phase.PARENT_LOAD)
        report = PhaseReport(Phase.PARENT_LOAD, self.parent.name)
        with self._profile(f"load:{self.parent.name}") as stats:
            for country in self.synthesizer.countries():
                row = country.to_row()
                self.parent.validate(row)
                report.record(self.store.write(self.parent, row, WriteMode.UPSERT))
                stats.rows += 1
        self._absorb(report, stats)
        log.info(
            "Parent load complete",
            extra={"table": self.parent.name, "written": report.written, "failed": report.failed},
        )
        self.session.reports.append(report)
        return report

    def load_children(self) -> PhaseReport:
        self._enter(Phase.CHILD_LOAD)
        report = PhaseReport(Phase.CHILD_LOAD, self.child.name)
        records = self.session.target_records
        parent_keys = list(self.store.iter_keys(self.parent)) if records else []
        if records and not parent_keys:
            raise ConfigurationError(f"Parent table '{self.parent.name}' is empty")

        sampler = self.synthesizer.sampler
        with self._profile(f"load:{self.child.name}") as stats:
            for _ in range(records):
                inherited = self.parent.key_dict(sampler.choice(parent_keys))
                row = self.synthesizer.synthesize(self.child, inherited)
                self.child.validate(row)
                resolution = self.resolver.resolve_and_write(row)
                report.record(resolution.outcome)
                report.collisions += resolution.collisions
                stats.rows += 1
        self._absorb(report, stats)
        log.info(
            f"{report.written} new records added",
            extra={
                "table": self.child.name,
                "written": report.written,
                "skipped": report.skipped,
                "failed": report.failed,
                "collisions": report.collisions,
                "throughput_rps": report.throughput_rows_per_sec,
            },
        )
        self.session.reports.append(report)
        return report

    def report(self) -> LoadSession:
        self._enter(Phase.REPORT)
        self.session.finished_at = datetime.now(timezone.utc)
        if self.results_dir is not None:
            _persist_results(self.session.to_dict(), Path(self.results_dir))
        self._enter(Phase.DONE)
        return self.session

    def run(self) -> LoadSession:
        self.session.started_at = datetime.now(timezone.utc)
        self.ensure_schema()
        if self.session.delete_existing:
            self.teardown()
        self.load_parents()
        self.load_children()
        return self.report()


def run_teardown(store: TableStore, tables: Sequence[TableDescriptor] = HIERARCHY) -> Dict[str, int]:
    """Delete all rows of `tables` (children first) without loading anything."""
    deleted: Dict[str, int] = {}
    for descriptor in reversed(tables):
        count = 0
        for key in store.iter_keys(descriptor):
            if store.delete(descriptor, key):
                count += 1
        deleted[descriptor.name] = count
        log.info(f"{count} records deleted", extra={"table": descriptor.name, "deleted": count})
    return deleted


__all__ = [
    "LoadDriver",
    "LoadSession",
    "Phase",
    "PhaseReport",
    "check_statement",
    "drop_tables",
    "ensure_schema",
    "run_teardown",
]

from __future__ import annotations

import json
from pathlib import Path

import psycopg
from typer.testing import CliRunner

from synthload import main
from synthload.errors import CONNECTION_GUIDANCE, StoreOperationError
from synthload.infrastructure import db_factory
from synthload.infrastructure.memory import InMemoryTableStore

runner = CliRunner()

DRY_RUN_RECORDS = 5


def test_schema_prints_parent_before_child() -> None:
    result = runner.invoke(main.app, ["schema"])
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines[0].startswith("CREATE TABLE IF NOT EXISTS countries (")
    assert lines[1].startswith("CREATE TABLE IF NOT EXISTS countries.residents (")
    assert lines[2] == "CREATE INDEX IF NOT EXISTS firstlast ON countries.residents(firstname, lastname)"


def test_info_masks_password(isolated_env) -> None:
    result = runner.invoke(main.app, ["info"])
    assert result.exit_code == 0
    assert "STORE=postgres:********@localhost:5432/kvstore" in result.output
    assert "postgres@" not in result.output


def test_load_dry_run_reports_and_persists(isolated_env, tmp_path: Path) -> None:
    result = runner.invoke(main.app, ["load", "--dry-run", "--nops", str(DRY_RUN_RECORDS), "--seed", "7"])

    assert result.exit_code == 0, result.output
    assert f"Loading records={DRY_RUN_RECORDS} into memory (dry run)" in result.output
    payload = json.loads((tmp_path / "results" / "latest.json").read_text(encoding="utf-8"))
    child = [p for p in payload["phases"] if p["phase"] == "child_load"][0]
    assert child["written"] == DRY_RUN_RECORDS


def test_load_dry_run_show_prints_rows(isolated_env) -> None:
    result = runner.invoke(main.app, ["load", "--dry-run", "--nops", "2", "--seed", "7", "--show"])
    assert result.exit_code == 0, result.output
    assert '"license"' in result.output
    assert '"vehicleinfo"' in result.output


def test_load_rejects_negative_record_count(isolated_env) -> None:
    result = runner.invoke(main.app, ["load", "--dry-run", "--nops=-1"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_load_unreachable_store_prints_guidance(isolated_env, monkeypatch) -> None:
    def refuse(conninfo: str):
        raise psycopg.OperationalError("connection refused")

    monkeypatch.setattr(db_factory, "_connect", refuse)

    result = runner.invoke(main.app, ["load", "--nops", "1"])

    assert result.exit_code == 1
    assert CONNECTION_GUIDANCE in result.output


def test_load_interrupted_exits_130(isolated_env, monkeypatch) -> None:
    def interrupt(settings, dry_run=False):
        raise KeyboardInterrupt

    monkeypatch.setattr(main, "open_store", interrupt)

    result = runner.invoke(main.app, ["load", "--dry-run"])

    assert result.exit_code == 130
    assert "Cancelled by user." in result.output


def test_show_rejects_unknown_table(isolated_env) -> None:
    result = runner.invoke(main.app, ["show", "--table", "planets"])
    assert result.exit_code == 2


def test_drop_requires_confirmation(isolated_env) -> None:
    result = runner.invoke(main.app, ["drop"], input="n\n")
    assert result.exit_code == 1


class _FailingStore(InMemoryTableStore):
    """Memory store whose row writes raise the given error."""

    def __init__(self, error: Exception) -> None:
        super().__init__()
        self._error = error

    def write(self, descriptor, row, mode):
        raise self._error


def _open_failing_store(monkeypatch, error: Exception) -> None:
    def open_failing(settings, dry_run=False):
        return _FailingStore(error)

    monkeypatch.setattr(main, "open_store", open_failing)


def test_load_driver_fault_is_reported(isolated_env, monkeypatch) -> None:
    _open_failing_store(monkeypatch, psycopg.errors.InsufficientPrivilege("permission denied for table countries"))

    result = runner.invoke(main.app, ["load", "--nops", "1"])

    assert result.exit_code == 1
    assert "Error: store operation failed: permission denied for table countries" in result.output


def test_load_store_operation_error_is_reported(isolated_env, monkeypatch) -> None:
    _open_failing_store(monkeypatch, StoreOperationError("countries", "write", "value too long"))

    result = runner.invoke(main.app, ["load", "--nops", "1"])

    assert result.exit_code == 1
    assert "Error: Store write on 'countries' failed: value too long" in result.output


def test_lost_connection_names_overridden_target(isolated_env, monkeypatch) -> None:
    _open_failing_store(monkeypatch, psycopg.OperationalError("server closed the connection unexpectedly"))

    result = runner.invoke(main.app, ["load", "--nops", "1", "--host", "other.example", "--port", "6000"])

    assert result.exit_code == 1
    assert "Unable to connect to store at other.example:6000/kvstore" in result.output
    assert "localhost:5432" not in result.output
    assert CONNECTION_GUIDANCE in result.output

from __future__ import annotations

import json

from rich.console import Console

from synthload.reporter import print_report, print_rows, row_to_json


def _console() -> Console:
    return Console(record=True, width=200)


def test_row_to_json_renders_ascii_bytes_as_text() -> None:
    payload = json.loads(row_to_json({"ssn": 1, "license": b"S12345678"}))
    assert payload == {"ssn": 1, "license": "S12345678"}


def test_row_to_json_base64_encodes_other_bytes() -> None:
    payload = json.loads(row_to_json({"blob": b"\xff\x00"}))
    assert payload["blob"] == "/wA="


def test_print_rows_counts_rows() -> None:
    console = _console()
    assert print_rows([{"a": 1}, {"a": 2}], console=console) == 2
    assert print_rows([], console=console) == 0
    assert "No rows to display." in console.export_text()


def test_print_report_renders_each_phase() -> None:
    console = _console()
    print_report(
        {
            "store": "memory",
            "target_records": 100,
            "inserted": 105,
            "deleted": 0,
            "skipped": 0,
            "elapsed_seconds": 0.5,
            "phases": [
                {"phase": "parent_load", "table": "countries", "written": 5},
                {"phase": "child_load", "table": "countries.residents", "written": 100, "collisions": 1},
            ],
        },
        console=console,
    )
    output = console.export_text()
    assert "parent_load" in output
    assert "countries.residents" in output
    assert "inserted=105" in output


def test_print_report_without_phases() -> None:
    console = _console()
    print_report({"phases": []}, console=console)
    assert "No phases to display." in console.export_text()


def test_print_report_shows_traced_allocations() -> None:
    console = _console()
    print_report(
        {
            "store": "memory",
            "phases": [
                {"phase": "child_load", "table": "countries.residents", "peak_traced_bytes": 3 * 1024 * 1024},
                {"phase": "parent_load", "table": "countries", "peak_traced_bytes": None},
            ],
        },
        console=console,
    )
    output = console.export_text()
    assert "Peak Traced (MB)" in output
    assert "3.00" in output

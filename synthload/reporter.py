from __future__ import annotations

import base64
import json
from typing import Any, Dict, Iterable, Optional

from rich import box
from rich.console import Console
from rich.table import Table


def _bytes_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        try:
            return raw.decode("ascii")
        except UnicodeDecodeError:
            return base64.b64encode(raw).decode("ascii")
    return str(value)


def row_to_json(row: Dict[str, Any]) -> str:
    """
    Render one stored row as a JSON line.

    Binary values are shown as text when they are plain ASCII (a license number)
    and base64 otherwise.
    """
    return json.dumps(row, default=_bytes_default, sort_keys=True)


def print_rows(rows: Iterable[Dict[str, Any]], console: Optional[Console] = None) -> int:
    console = console or Console()
    shown = 0
    for row in rows:
        console.print_json(row_to_json(row))
        shown += 1
    if not shown:
        console.print("[yellow]No rows to display.[/yellow]")
    return shown


def print_report(report: Dict[str, Any], console: Optional[Console] = None) -> None:
    """
    Render a load report (see `LoadSession.to_dict`) as a rich table.

    One line per phase and table, followed by run totals in the caption.
    """
    console = console or Console()

    phases = report.get("phases") or []
    if not phases:
        console.print("[yellow]No phases to display.[/yellow]")
        return

    title = f"synthload: {report.get('target_records', 0):,} records -> {report.get('store', '?')}"
    table = Table(
        title=title,
        box=box.ROUNDED,
        caption=(
            f"inserted={report.get('inserted', 0):,} deleted={report.get('deleted', 0):,} "
            f"skipped={report.get('skipped', 0):,} elapsed={report.get('elapsed_seconds', 0.0):.3f}s"
        ),
    )

    table.add_column("Phase", style="cyan", no_wrap=True)
    table.add_column("Table", style="blue", no_wrap=True)
    table.add_column("Written", justify="right", style="magenta")
    table.add_column("Skipped", justify="right")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Deleted", justify="right")
    table.add_column("Collisions", justify="right")
    table.add_column("Duration (s)", justify="right", style="green")
    table.add_column("Throughput (rows/s)", justify="right", style="bold green")
    table.add_column("Peak Memory (MB)", justify="right", style="yellow")
    table.add_column("Peak Traced (MB)", justify="right", style="yellow")

    for phase in phases:
        mem_bytes = phase.get("peak_rss_bytes") or 0
        traced_bytes = phase.get("peak_traced_bytes")
        table.add_row(
            phase.get("phase", "?"),
            phase.get("table", "?"),
            f"{phase.get('written', 0):,}",
            f"{phase.get('skipped', 0):,}",
            f"{phase.get('failed', 0):,}",
            f"{phase.get('deleted', 0):,}",
            f"{phase.get('collisions', 0):,}",
            f"{phase.get('duration_seconds', 0.0):.3f}",
            f"{phase.get('throughput_rows_per_sec', 0.0):,.2f}",
            f"{mem_bytes / (1024 * 1024):.2f}",
            f"{traced_bytes / (1024 * 1024):.2f}" if traced_bytes is not None else "-",
        )

    console.print(table)


__all__ = ["print_report", "print_rows", "row_to_json"]

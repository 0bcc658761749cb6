from __future__ import annotations

import sys
from contextlib import contextmanager
from itertools import islice
from pathlib import Path
from typing import Iterator, Optional

import psycopg
import typer

from synthload.config import Settings, get_settings, validate_settings
from synthload.domain.schema import HIERARCHY, TableDescriptor
from synthload.errors import StoreConnectionError, SynthloadError
from synthload.generator.pools import DEFAULT_POOLS, pool_sizes
from synthload.generator.sampler import Sampler
from synthload.generator.synthesizer import RecordSynthesizer
from synthload.infrastructure.db_factory import open_store
from synthload.orchestrator import LoadDriver, drop_tables, ensure_schema, run_teardown
from synthload.reporter import print_report, print_rows
from synthload.utils.logging import configure_logging

app = typer.Typer(help="Synthetic hierarchical record generator and bulk loader.")

_TABLES = {descriptor.name: descriptor for descriptor in HIERARCHY}


@contextmanager
def _cli_errors(settings: Optional[Settings] = None) -> Iterator[None]:
    """Map run failures onto exit codes: 1 for errors, 130 for Ctrl-C.

    `settings` are the effective (CLI-overridden) settings, used to name the store
    when the connection drops mid-run.
    """
    try:
        yield
    except StoreConnectionError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    except psycopg.OperationalError as exc:
        target = (settings or get_settings()).target
        typer.echo(str(StoreConnectionError(target, exc)), err=True)
        raise typer.Exit(code=1) from exc
    except psycopg.DatabaseError as exc:
        typer.echo(f"Error: store operation failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except SynthloadError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        raise typer.Exit(code=130) from None


def _settings(**overrides) -> Settings:
    settings = validate_settings(get_settings(), **overrides)
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    return settings


def _table(name: str) -> TableDescriptor:
    try:
        return _TABLES[name]
    except KeyError:
        raise typer.BadParameter(f"unknown table '{name}' (choose from {', '.join(_TABLES)})") from None


StoreOption = typer.Option(None, "--store", help="Store (database) name.")
HostOption = typer.Option(None, "--host", help="Store host.")
PortOption = typer.Option(None, "--port", help="Store port.")
SecurityOption = typer.Option(None, "--security", help="Path to a credentials (libpq passfile) file.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    with _cli_errors():
        settings = get_settings()
    password = "(passfile)" if settings.security_file else "*" * len(settings.store_password)
    typer.echo(
        f"STORE={settings.store_user}:{password}@{settings.target} | "
        f"records={settings.records} delete={settings.delete_existing} "
        f"seed={settings.seed} max_key_attempts={settings.max_key_attempts}"
    )
    typer.echo("Pools: " + ", ".join(f"{name}={size}" for name, size in pool_sizes(DEFAULT_POOLS).items()))


@app.command()
def schema() -> None:
    """
    Print the table and index definitions, parents first.
    """
    for descriptor in HIERARCHY:
        typer.echo(descriptor.create_statement())
        for statement in descriptor.index_statements():
            typer.echo(statement)


@app.command()
def load(
    store: Optional[str] = StoreOption,
    host: Optional[str] = HostOption,
    port: Optional[int] = PortOption,
    nops: Optional[int] = typer.Option(
        None, "--nops", "-n", help="Number of child records to generate (default from settings)."
    ),
    security: Optional[Path] = SecurityOption,
    delete: bool = typer.Option(False, "--delete", help="Delete existing rows before loading."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Load into an in-memory store."),
    show: bool = typer.Option(False, "--show", help="Print the stored child rows after loading."),
    trace_allocations: bool = typer.Option(
        False, "--trace-allocations", help="Report peak Python allocations per phase (slower)."
    ),
) -> None:
    """
    Create the tables if needed, then load parents and generated child records.
    """
    with _cli_errors():
        settings = _settings(
            store_name=store,
            store_host=host,
            store_port=port,
            records=nops,
            security_file=security,
            delete_existing=True if delete else None,
            seed=seed,
            trace_allocations=True if trace_allocations else None,
        )
    with _cli_errors(settings):
        typer.echo(
            f"Loading records={settings.records} into "
            f"{'memory (dry run)' if dry_run else settings.target} "
            f"(delete={settings.delete_existing}, seed={settings.seed})."
        )
        table_store = open_store(settings, dry_run=dry_run)
        try:
            driver = LoadDriver(
                table_store,
                RecordSynthesizer(Sampler.seeded(settings.seed)),
                records=settings.records,
                delete_existing=settings.delete_existing,
                max_key_attempts=settings.max_key_attempts,
                results_dir=settings.results_dir,
                trace_allocations=settings.trace_allocations,
            )
            session = driver.run()
            print_report(session.to_dict())
            if show:
                print_rows(table_store.iter_rows(driver.child))
        finally:
            table_store.close()


@app.command("delete")
def delete_rows(
    store: Optional[str] = StoreOption,
    host: Optional[str] = HostOption,
    port: Optional[int] = PortOption,
    security: Optional[Path] = SecurityOption,
) -> None:
    """
    Delete every row, child table first, without loading anything.
    """
    with _cli_errors():
        settings = _settings(store_name=store, store_host=host, store_port=port, security_file=security)
    with _cli_errors(settings):
        table_store = open_store(settings)
        try:
            ensure_schema(table_store)
            deleted = run_teardown(table_store)
        finally:
            table_store.close()
    for name, count in deleted.items():
        typer.echo(f"{name}: {count} records deleted")


@app.command()
def show(
    table: str = typer.Option("countries.residents", "--table", "-t", help="Table to print."),
    limit: int = typer.Option(10, "--limit", "-l", min=1, help="Maximum number of rows."),
    store: Optional[str] = StoreOption,
    host: Optional[str] = HostOption,
    port: Optional[int] = PortOption,
    security: Optional[Path] = SecurityOption,
) -> None:
    """
    Print stored rows as JSON.
    """
    descriptor = _table(table)
    with _cli_errors():
        settings = _settings(store_name=store, store_host=host, store_port=port, security_file=security)
    with _cli_errors(settings):
        table_store = open_store(settings)
        try:
            print_rows(islice(table_store.iter_rows(descriptor), limit))
        finally:
            table_store.close()


@app.command()
def drop(
    store: Optional[str] = StoreOption,
    host: Optional[str] = HostOption,
    port: Optional[int] = PortOption,
    security: Optional[Path] = SecurityOption,
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
) -> None:
    """
    Drop the indexes and tables, children first.
    """
    if not yes:
        typer.confirm("Drop all synthload tables and their data?", abort=True)
    with _cli_errors():
        settings = _settings(store_name=store, store_host=host, store_port=port, security_file=security)
    with _cli_errors(settings):
        table_store = open_store(settings)
        try:
            executed = drop_tables(table_store)
        finally:
            table_store.close()
    typer.echo(f"{executed} drop statements executed.")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()

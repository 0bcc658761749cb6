"""
PostgreSQL-backed TableStore.

Maps table descriptors onto PostgreSQL:
- logical names become physical names ("countries.residents" -> countries_residents);
- ENUM columns are TEXT with a CHECK constraint, BINARY(n) is BYTEA with a length
  CHECK, MAP/RECORD/ARRAY values are stored as JSONB;
- a child table carries its parent's key columns and a FOREIGN KEY to the parent;
- insert-if-absent is `INSERT ... ON CONFLICT DO NOTHING`, which the server
  executes atomically, and upsert is `ON CONFLICT (pk) DO UPDATE`.

The connection runs in autocommit mode: every write is its own transaction, so a
failed row never poisons the rest of the load.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

import psycopg
from psycopg import Connection, sql
from psycopg.types.json import Jsonb

from synthload.domain.schema import FieldKind, FieldSpec, TableDescriptor
from synthload.errors import StoreOperationError
from synthload.infrastructure.store import (
    Key,
    Row,
    StatementResult,
    StatementStatus,
    WriteMode,
    WriteOutcome,
)
from synthload.utils.logging import get_logger

log = get_logger(__name__)

_SCALAR_TYPES = {
    FieldKind.STRING: "TEXT",
    FieldKind.INTEGER: "INTEGER",
    FieldKind.LONG: "BIGINT",
    # FLOAT is widened so values read back compare equal to what was written.
    FieldKind.FLOAT: "DOUBLE PRECISION",
    FieldKind.DOUBLE: "DOUBLE PRECISION",
    FieldKind.BOOLEAN: "BOOLEAN",
    FieldKind.ENUM: "TEXT",
    FieldKind.BINARY: "BYTEA",
    FieldKind.MAP: "JSONB",
    FieldKind.RECORD: "JSONB",
    FieldKind.ARRAY: "JSONB",
}


def _column_def(spec: FieldSpec) -> sql.Composable:
    column = sql.Identifier(spec.name)
    parts = [column, sql.SQL(_SCALAR_TYPES[spec.kind]), sql.SQL("NOT NULL")]
    if spec.kind is FieldKind.ENUM:
        symbols = sql.SQL(", ").join(sql.Literal(s) for s in spec.symbols)
        parts.append(sql.SQL("CHECK ({} IN ({}))").format(column, symbols))
    elif spec.kind is FieldKind.BINARY and spec.size is not None:
        parts.append(sql.SQL("CHECK (octet_length({}) = {})").format(column, sql.Literal(spec.size)))
    return sql.SQL(" ").join(parts)


def _columns(names: Tuple[str, ...]) -> sql.Composable:
    return sql.SQL(", ").join(sql.Identifier(n) for n in names)


@contextmanager
def _row_errors(descriptor: TableDescriptor, operation: str) -> Iterator[None]:
    """Surface server-side row failures as StoreOperationError; lost connections propagate."""
    try:
        yield
    except psycopg.OperationalError:
        raise
    except psycopg.DatabaseError as exc:
        raise StoreOperationError(descriptor.name, operation, str(exc).strip()) from exc


class PostgresTableStore:
    name: str = "postgres"

    def __init__(self, conn: Connection) -> None:
        self._conn = conn
        self._notices: List[str] = []
        self._write_sql: Dict[Tuple[str, WriteMode], sql.Composed] = {}
        conn.add_notice_handler(lambda diag: self._notices.append(diag.message_primary or ""))

    # Schema

    def _table(self, descriptor: TableDescriptor) -> sql.Identifier:
        return sql.Identifier(descriptor.physical_name)

    def create_statements(self, descriptor: TableDescriptor) -> List[str]:
        body: List[sql.Composable] = [_column_def(f) for f in descriptor.all_fields]
        body.append(sql.SQL("PRIMARY KEY ({})").format(_columns(descriptor.full_primary_key)))
        if descriptor.parent is not None:
            parent_key = descriptor.parent.full_primary_key
            body.append(
                sql.SQL("FOREIGN KEY ({}) REFERENCES {} ({})").format(
                    _columns(parent_key), self._table(descriptor.parent), _columns(parent_key)
                )
            )
        statements = [
            sql.SQL("CREATE TABLE IF NOT EXISTS {} ({})").format(
                self._table(descriptor), sql.SQL(", ").join(body)
            )
        ]
        for index in descriptor.indexes:
            statements.append(
                sql.SQL("CREATE INDEX IF NOT EXISTS {} ON {} ({})").format(
                    sql.Identifier(f"{descriptor.physical_name}_{index.name}"),
                    self._table(descriptor),
                    _columns(index.fields),
                )
            )
        return [s.as_string(self._conn) for s in statements]

    def drop_statements(self, descriptor: TableDescriptor) -> List[str]:
        statements = [
            sql.SQL("DROP INDEX IF EXISTS {}").format(
                sql.Identifier(f"{descriptor.physical_name}_{index.name}")
            )
            for index in descriptor.indexes
        ]
        statements.append(sql.SQL("DROP TABLE IF EXISTS {}").format(self._table(descriptor)))
        return [s.as_string(self._conn) for s in statements]

    def execute_statement(self, statement: str) -> StatementResult:
        self._notices.clear()
        try:
            with self._conn.cursor() as cur:
                cur.execute(statement)  # type: ignore[arg-type]
                info = "; ".join(filter(None, [cur.statusmessage, *self._notices]))
        except psycopg.errors.QueryCanceled as exc:
            return StatementResult(statement, StatementStatus.CANCELLED, error_message=str(exc))
        except (psycopg.errors.DuplicateTable, psycopg.errors.DuplicateObject) as exc:
            return StatementResult(
                statement, StatementStatus.FAILED, error_message=str(exc), already_exists=True
            )
        except psycopg.OperationalError:
            raise
        except psycopg.DatabaseError as exc:
            return StatementResult(statement, StatementStatus.FAILED, error_message=str(exc))
        return StatementResult(statement, StatementStatus.SUCCEEDED, info=info or None)

    # Rows

    def _insert_sql(self, descriptor: TableDescriptor, mode: WriteMode) -> sql.Composed:
        cache_key = (descriptor.name, mode)
        if cache_key not in self._write_sql:
            names = tuple(f.name for f in descriptor.all_fields)
            query = sql.SQL("INSERT INTO {} ({}) VALUES ({})").format(
                self._table(descriptor),
                _columns(names),
                sql.SQL(", ").join(sql.Placeholder() * len(names)),
            )
            pk = _columns(descriptor.full_primary_key)
            if mode is WriteMode.INSERT_IF_ABSENT:
                query += sql.SQL(" ON CONFLICT ({}) DO NOTHING").format(pk)
            elif mode is WriteMode.UPSERT:
                updates = sql.SQL(", ").join(
                    sql.SQL("{0} = EXCLUDED.{0}").format(sql.Identifier(n))
                    for n in names
                    if n not in descriptor.full_primary_key
                )
                query += sql.SQL(" ON CONFLICT ({}) DO UPDATE SET {}").format(pk, updates)
            self._write_sql[cache_key] = query
        return self._write_sql[cache_key]

    @staticmethod
    def _adapt(descriptor: TableDescriptor, row: Mapping[str, Any]) -> List[Any]:
        values = []
        for spec in descriptor.all_fields:
            value = row[spec.name]
            values.append(Jsonb(value) if spec.kind.is_nested else value)
        return values

    def write(self, descriptor: TableDescriptor, row: Mapping[str, Any], mode: WriteMode) -> WriteOutcome:
        query = self._insert_sql(descriptor, mode)
        with _row_errors(descriptor, "write"):
            try:
                with self._conn.cursor() as cur:
                    cur.execute(query, self._adapt(descriptor, row))
                    written = cur.rowcount
            except psycopg.errors.UniqueViolation:
                return WriteOutcome.FAILED
            except psycopg.errors.ForeignKeyViolation as exc:
                log.warning(
                    "Parent row missing",
                    extra={"table": descriptor.name, "error": str(exc)},
                )
                return WriteOutcome.FAILED
        if written == 0:
            return WriteOutcome.SKIPPED_DUPLICATE
        return WriteOutcome.WRITTEN

    def _key_filter(self, descriptor: TableDescriptor) -> sql.Composable:
        return sql.SQL(" AND ").join(
            sql.SQL("{} = %s").format(sql.Identifier(n)) for n in descriptor.full_primary_key
        )

    def get(self, descriptor: TableDescriptor, key: Key) -> Optional[Row]:
        query = sql.SQL("SELECT * FROM {} WHERE {}").format(
            self._table(descriptor), self._key_filter(descriptor)
        )
        with _row_errors(descriptor, "read"), self._conn.cursor() as cur:
            cur.execute(query, list(key))
            row = cur.fetchone()
        return dict(row) if row is not None else None

    def _stream(self, descriptor: TableDescriptor, columns: sql.Composable, label: str) -> Iterator[Any]:
        query = sql.SQL("SELECT {} FROM {} ORDER BY {}").format(
            columns, self._table(descriptor), _columns(descriptor.full_primary_key)
        )
        # WITH HOLD keeps the server-side cursor usable in autocommit mode and
        # while the caller deletes the rows it has already seen.
        cursor_name = f"synthload_{label}_{descriptor.physical_name}"
        with _row_errors(descriptor, "scan"), self._conn.cursor(name=cursor_name, withhold=True) as cur:
            cur.execute(query)
            yield from cur

    def iter_keys(self, descriptor: TableDescriptor) -> Iterator[Key]:
        for row in self._stream(descriptor, _columns(descriptor.full_primary_key), "keys"):
            yield tuple(row[n] for n in descriptor.full_primary_key)

    def iter_rows(self, descriptor: TableDescriptor) -> Iterator[Row]:
        for row in self._stream(descriptor, sql.SQL("*"), "rows"):
            yield dict(row)

    def delete(self, descriptor: TableDescriptor, key: Key) -> bool:
        query = sql.SQL("DELETE FROM {} WHERE {}").format(
            self._table(descriptor), self._key_filter(descriptor)
        )
        with _row_errors(descriptor, "delete"), self._conn.cursor() as cur:
            cur.execute(query, list(key))
            return cur.rowcount > 0

    def count(self, descriptor: TableDescriptor) -> int:
        with _row_errors(descriptor, "count"), self._conn.cursor() as cur:
            cur.execute(sql.SQL("SELECT count(*) AS n FROM {}").format(self._table(descriptor)))
            row = cur.fetchone()
        return int(row["n"]) if row else 0

    def close(self) -> None:
        self._conn.close()


__all__ = ["PostgresTableStore"]

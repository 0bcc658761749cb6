"""
In-memory TableStore.

Backs `--dry-run` loads and the unit tests. It keeps the contract of the
PostgreSQL store: tables must be created before use, child rows must reference
an existing parent row, parent rows with children cannot be deleted, and
insert-if-absent is atomic with respect to other writers.
"""

from __future__ import annotations

import copy
import re
import threading
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set, Tuple

from synthload.domain.schema import TableDescriptor
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

_CREATE_TABLE = re.compile(r"^CREATE TABLE IF NOT EXISTS ([\w.]+)\s*\(", re.IGNORECASE)
_CREATE_INDEX = re.compile(r"^CREATE INDEX IF NOT EXISTS (\w+) ON ([\w.]+)\s*\(", re.IGNORECASE)
_DROP_INDEX = re.compile(r"^DROP INDEX IF EXISTS (\w+) ON ([\w.]+)$", re.IGNORECASE)
_DROP_TABLE = re.compile(r"^DROP TABLE IF EXISTS ([\w.]+)$", re.IGNORECASE)


class InMemoryTableStore:
    name: str = "memory"

    def __init__(self) -> None:
        self._tables: Dict[str, Dict[Key, Row]] = {}
        self._indexes: Set[Tuple[str, str]] = set()
        self._lock = threading.Lock()
        self.closed = False

    # Schema

    def create_statements(self, descriptor: TableDescriptor) -> List[str]:
        return [descriptor.create_statement(), *descriptor.index_statements()]

    def drop_statements(self, descriptor: TableDescriptor) -> List[str]:
        return descriptor.drop_statements()

    def has_table(self, name: str) -> bool:
        return name in self._tables

    def execute_statement(self, statement: str) -> StatementResult:
        text = statement.strip()
        with self._lock:
            match = _CREATE_TABLE.match(text)
            if match:
                table = match.group(1)
                parent, _, _ = table.rpartition(".")
                if parent and parent not in self._tables:
                    return self._failed(text, f"Parent table '{parent}' does not exist")
                self._tables.setdefault(table, {})
                return StatementResult(text, StatementStatus.SUCCEEDED)

            match = _CREATE_INDEX.match(text)
            if match:
                index, table = match.groups()
                if table not in self._tables:
                    return self._failed(text, f"Table '{table}' does not exist")
                self._indexes.add((table, index))
                return StatementResult(text, StatementStatus.SUCCEEDED)

            match = _DROP_INDEX.match(text)
            if match:
                index, table = match.groups()
                self._indexes.discard((table, index))
                return StatementResult(text, StatementStatus.SUCCEEDED)

            match = _DROP_TABLE.match(text)
            if match:
                table = match.group(1)
                children = [t for t in self._tables if t.startswith(table + ".")]
                if children:
                    return self._failed(text, f"Table '{table}' has child tables {children}")
                self._tables.pop(table, None)
                self._indexes = {(t, i) for t, i in self._indexes if t != table}
                return StatementResult(text, StatementStatus.SUCCEEDED)

        return self._failed(text, "Invalid statement")

    @staticmethod
    def _failed(statement: str, error: str) -> StatementResult:
        return StatementResult(statement, StatementStatus.FAILED, error_message=error)

    # Rows

    def _table(self, descriptor: TableDescriptor) -> Dict[Key, Row]:
        try:
            return self._tables[descriptor.name]
        except KeyError:
            raise LookupError(f"Table '{descriptor.name}' does not exist") from None

    def write(self, descriptor: TableDescriptor, row: Mapping[str, Any], mode: WriteMode) -> WriteOutcome:
        table = self._table(descriptor)
        key = descriptor.key_of(row)
        with self._lock:
            if descriptor.parent is not None:
                parent_key = key[: len(descriptor.parent.full_primary_key)]
                if parent_key not in self._table(descriptor.parent):
                    log.warning(
                        "Parent row missing",
                        extra={"table": descriptor.name, "parent_key": list(parent_key)},
                    )
                    return WriteOutcome.FAILED
            exists = key in table
            if exists and mode is WriteMode.INSERT_IF_ABSENT:
                return WriteOutcome.SKIPPED_DUPLICATE
            if exists and mode is WriteMode.INSERT:
                return WriteOutcome.FAILED
            table[key] = copy.deepcopy(dict(row))
            return WriteOutcome.WRITTEN

    def get(self, descriptor: TableDescriptor, key: Key) -> Optional[Row]:
        row = self._table(descriptor).get(tuple(key))
        return copy.deepcopy(row) if row is not None else None

    def iter_keys(self, descriptor: TableDescriptor) -> Iterator[Key]:
        # Snapshot so callers may delete while iterating.
        yield from sorted(self._table(descriptor))

    def iter_rows(self, descriptor: TableDescriptor) -> Iterator[Row]:
        table = self._table(descriptor)
        for key in sorted(table):
            row = table.get(key)
            if row is not None:
                yield copy.deepcopy(row)

    def delete(self, descriptor: TableDescriptor, key: Key) -> bool:
        table = self._table(descriptor)
        key = tuple(key)
        with self._lock:
            for child_name, rows in self._tables.items():
                if child_name.startswith(descriptor.name + ".") and any(
                    k[: len(key)] == key for k in rows
                ):
                    raise RuntimeError(
                        f"Cannot delete {descriptor.name} row {key!r}: rows in '{child_name}' reference it"
                    )
            return table.pop(key, None) is not None

    def count(self, descriptor: TableDescriptor) -> int:
        return len(self._table(descriptor))

    def close(self) -> None:
        self.closed = True


__all__ = ["InMemoryTableStore"]

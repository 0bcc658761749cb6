"""
Table store interface and result contracts.

Concrete stores (PostgreSQL, in-memory) implement the TableStore protocol so the
load driver and the key resolver stay independent of the backend. Rows are plain
mappings from field name to value; keys are tuples in the descriptor's full
primary key order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Protocol, Tuple, runtime_checkable

from synthload.domain.schema import TableDescriptor

Key = Tuple[Any, ...]
Row = Dict[str, Any]


class WriteMode(str, Enum):
    INSERT = "insert"
    UPSERT = "upsert"
    INSERT_IF_ABSENT = "insert_if_absent"


class WriteOutcome(str, Enum):
    WRITTEN = "written"
    SKIPPED_DUPLICATE = "skipped_duplicate"
    FAILED = "failed"


class StatementStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"
    IN_PROGRESS = "in_progress"


@dataclass(frozen=True)
class StatementResult:
    """
    Outcome of one schema statement.

    `already_exists` marks failures that only report a redundant create; the
    driver treats those as success.
    """

    statement: str
    status: StatementStatus
    error_message: Optional[str] = None
    info: Optional[str] = None
    already_exists: bool = False

    @property
    def is_successful(self) -> bool:
        return self.status is StatementStatus.SUCCEEDED or self.already_exists


@runtime_checkable
class TableStore(Protocol):
    """
    Common interface all table stores must implement.

    Attributes
    ----------
    name : str
        Short identifier used in logs and reports.
    """

    name: str

    def create_statements(self, descriptor: TableDescriptor) -> List[str]:
        """Statements (table, then indexes) that create `descriptor` idempotently."""
        ...

    def drop_statements(self, descriptor: TableDescriptor) -> List[str]:
        ...

    def execute_statement(self, statement: str) -> StatementResult:
        ...

    def write(self, descriptor: TableDescriptor, row: Mapping[str, Any], mode: WriteMode) -> WriteOutcome:
        ...

    def get(self, descriptor: TableDescriptor, key: Key) -> Optional[Row]:
        ...

    def iter_keys(self, descriptor: TableDescriptor) -> Iterator[Key]:
        """Lazily iterate every primary key of the table, in key order."""
        ...

    def iter_rows(self, descriptor: TableDescriptor) -> Iterator[Row]:
        ...

    def delete(self, descriptor: TableDescriptor, key: Key) -> bool:
        """Delete by key; False when no row had that key."""
        ...

    def close(self) -> None:
        ...


__all__ = [
    "Key",
    "Row",
    "StatementResult",
    "StatementStatus",
    "TableStore",
    "WriteMode",
    "WriteOutcome",
]

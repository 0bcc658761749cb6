"""
Infrastructure package for synthload.

Centralizes store concerns: the TableStore contract, its PostgreSQL and
in-memory implementations, and connection setup. Keep this layer focused on I/O
and resource management, decoupled from generation and driver logic.
"""

from synthload.infrastructure.db_factory import build_conninfo, get_sync_connection, open_store
from synthload.infrastructure.memory import InMemoryTableStore
from synthload.infrastructure.postgres import PostgresTableStore
from synthload.infrastructure.store import (
    StatementResult,
    StatementStatus,
    TableStore,
    WriteMode,
    WriteOutcome,
)

__all__ = [
    "InMemoryTableStore",
    "PostgresTableStore",
    "StatementResult",
    "StatementStatus",
    "TableStore",
    "WriteMode",
    "WriteOutcome",
    "build_conninfo",
    "get_sync_connection",
    "open_store",
]

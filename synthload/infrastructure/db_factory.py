"""
Store connection factory for synthload.

One PostgreSQL connection is opened per run. Transient connection failures are
retried with tenacity; if the store stays unreachable the failure surfaces as a
StoreConnectionError carrying guidance for the operator.
"""

from __future__ import annotations

from typing import Optional

import psycopg
from psycopg import Connection
from psycopg.conninfo import make_conninfo
from psycopg.rows import dict_row
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from synthload.config import Settings, get_settings
from synthload.errors import StoreConnectionError
from synthload.infrastructure.memory import InMemoryTableStore
from synthload.infrastructure.postgres import PostgresTableStore
from synthload.infrastructure.store import TableStore
from synthload.utils.logging import get_logger

log = get_logger(__name__)


def build_conninfo(settings: Optional[Settings] = None) -> str:
    """
    Compose a libpq connection string from settings.

    When a security file is configured it is passed as the libpq `passfile` and
    no password is embedded, so the credentials come from that file.
    """
    settings = settings or get_settings()
    params = {
        "host": settings.store_host,
        "port": settings.store_port,
        "dbname": settings.store_name,
        "user": settings.store_user,
        "connect_timeout": settings.connect_timeout,
        "application_name": "synthload",
    }
    if settings.security_file is not None:
        params["passfile"] = str(settings.security_file)
    else:
        params["password"] = settings.store_password
    return make_conninfo(**params)


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type((psycopg.OperationalError, psycopg.InterfaceError)),
    reraise=True,
)
def _connect(conninfo: str) -> Connection:
    return psycopg.connect(conninfo, autocommit=True, row_factory=dict_row)


def get_sync_connection(settings: Optional[Settings] = None) -> Connection:
    """
    Open the run's store connection, retrying up to 3 times with exponential backoff.

    Raises
    ------
    StoreConnectionError
        If the connection still fails after all retry attempts.
    """
    settings = settings or get_settings()
    log.debug("Connecting to store", extra={"target": settings.target})
    try:
        return _connect(build_conninfo(settings))
    except (psycopg.OperationalError, psycopg.InterfaceError) as exc:
        raise StoreConnectionError(settings.target, exc) from exc


def open_store(settings: Optional[Settings] = None, dry_run: bool = False) -> TableStore:
    """
    Open the table store for one run.

    A dry run uses an in-memory store and never touches the network.
    """
    if dry_run:
        return InMemoryTableStore()
    return PostgresTableStore(get_sync_connection(settings))


__all__ = ["build_conninfo", "get_sync_connection", "open_store"]

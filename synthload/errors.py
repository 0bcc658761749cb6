"""
Exception hierarchy for synthload.

Errors are grouped by how the CLI must react to them:
- ConfigurationError: bad run parameters or reference data, raised before any
  store interaction.
- StoreConnectionError: the store could not be reached or refused the login.
- SchemaStatementError: a DDL statement failed for a reason other than the
  object already existing.
- KeyResolutionError: the collision retry budget was exhausted.
- StoreOperationError: the store rejected a row operation (permissions,
  constraint or data errors) after the connection was established.
"""

from __future__ import annotations

from typing import Optional

CONNECTION_GUIDANCE = (
    "Please make sure the store is running and reachable. "
    "If the store requires authentication, check the user/password settings "
    "or point SYNTHLOAD_SECURITY_FILE (or --security) at a valid passfile."
)


class SynthloadError(Exception):
    """Base class for all errors raised by synthload."""


class ConfigurationError(SynthloadError):
    """Invalid run parameters or reference data."""


class EmptyPoolError(ConfigurationError):
    """A reference pool that must be sampled from has no entries."""

    def __init__(self, pool: str) -> None:
        super().__init__(f"Reference pool '{pool}' is empty")
        self.pool = pool


class StoreConnectionError(SynthloadError):
    """
    The store could not be opened.

    The message always carries actionable guidance instead of a bare driver error.
    """

    def __init__(self, target: str, cause: Optional[BaseException] = None) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Unable to connect to store at {target}{detail}\n{CONNECTION_GUIDANCE}")
        self.target = target
        self.cause = cause


class SchemaStatementError(SynthloadError):
    """A schema statement did not complete successfully."""

    def __init__(self, statement: str, status: str, error: Optional[str] = None) -> None:
        message = f"Schema statement {status.upper()}:\n\t{statement}"
        if error:
            message += f"\nERROR:\n\t{error}"
        super().__init__(message)
        self.statement = statement
        self.status = status
        self.error = error


class KeyResolutionError(SynthloadError):
    """No free primary key was found within the retry budget."""

    def __init__(self, table: str, attempts: int) -> None:
        super().__init__(f"Could not find a free primary key in '{table}' after {attempts} attempts")
        self.table = table
        self.attempts = attempts


class StoreOperationError(SynthloadError):
    """A row operation failed inside the store."""

    def __init__(self, table: str, operation: str, error: str) -> None:
        super().__init__(f"Store {operation} on '{table}' failed: {error}")
        self.table = table
        self.operation = operation
        self.error = error


__all__ = [
    "CONNECTION_GUIDANCE",
    "ConfigurationError",
    "EmptyPoolError",
    "KeyResolutionError",
    "SchemaStatementError",
    "StoreConnectionError",
    "StoreOperationError",
    "SynthloadError",
]

"""
synthload - synthetic hierarchical record generator and idempotent bulk loader.

Generates schema-conformant rows for a two-level table hierarchy (countries and
their residents) from static reference pools and loads them into a store:

- Parent rows are upserted, so repeated runs converge on the same parent table
- Child rows are inserted only if absent, re-sampling the mutable key field
  (the resident's ssn) on collision
- Child rows always reference a parent key read back from the store
- Optional teardown deletes child rows before parent rows
"""

from __future__ import annotations

__version__ = "0.1.0"

# Public API exports
from synthload.config import Settings, get_settings
from synthload.domain.schema import COUNTRIES, HIERARCHY, RESIDENTS, TableDescriptor
from synthload.errors import (
    ConfigurationError,
    SchemaStatementError,
    StoreConnectionError,
    StoreOperationError,
    SynthloadError,
)
from synthload.generator import KeyResolver, RecordSynthesizer, ReferencePools, Sampler
from synthload.infrastructure import InMemoryTableStore, TableStore, open_store
from synthload.orchestrator import LoadDriver, LoadSession, Phase
from synthload.utils.logging import configure_logging, get_logger
from synthload.utils.profiler import ProfileStats, profile_block

__all__ = [
    # Version info
    "__version__",
    # Configuration
    "Settings",
    "get_settings",
    # Schema
    "COUNTRIES",
    "HIERARCHY",
    "RESIDENTS",
    "TableDescriptor",
    # Errors
    "ConfigurationError",
    "SchemaStatementError",
    "StoreConnectionError",
    "StoreOperationError",
    "SynthloadError",
    # Generation
    "KeyResolver",
    "RecordSynthesizer",
    "ReferencePools",
    "Sampler",
    # Stores
    "InMemoryTableStore",
    "TableStore",
    "open_store",
    # Driver
    "LoadDriver",
    "LoadSession",
    "Phase",
    # Logging
    "configure_logging",
    "get_logger",
    # Profiling
    "ProfileStats",
    "profile_block",
]

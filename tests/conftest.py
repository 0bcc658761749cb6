"""
Pytest configuration for synthload.

Provides fixtures for:
- Seeded samplers and small reference pools for deterministic generation
- In-memory stores with the schema already created
- Settings isolated from the developer's environment
- A PostgreSQL-backed store for integration tests
"""

from __future__ import annotations

import logging
import os
from typing import Generator

import pytest

from synthload import config
from synthload.config import Settings
from synthload.domain.schema import HIERARCHY
from synthload.generator.pools import ReferencePools
from synthload.generator.sampler import Sampler
from synthload.generator.synthesizer import RecordSynthesizer
from synthload.infrastructure.memory import InMemoryTableStore
from synthload.orchestrator import ensure_schema

TEST_SEED = 1234

_SYNTHLOAD_ENV = (
    "SYNTHLOAD_STORE_NAME",
    "SYNTHLOAD_HOST",
    "SYNTHLOAD_PORT",
    "SYNTHLOAD_USER",
    "SYNTHLOAD_PASSWORD",
    "SYNTHLOAD_SECURITY_FILE",
    "SYNTHLOAD_CONNECT_TIMEOUT",
    "SYNTHLOAD_RECORDS",
    "SYNTHLOAD_DELETE_EXISTING",
    "SYNTHLOAD_SEED",
    "SYNTHLOAD_MAX_KEY_ATTEMPTS",
    "SYNTHLOAD_RESULTS_DIR",
    "LOG_LEVEL",
    "LOG_JSON",
)


@pytest.fixture
def sampler() -> Sampler:
    return Sampler.seeded(TEST_SEED)


@pytest.fixture
def small_pools() -> ReferencePools:
    """
    Five countries and five last names, the rest of the pools at full size.
    """
    return ReferencePools(
        last_names=("Smith", "Jones", "Brown", "Lee", "Garcia"),
        country_codes=("US", "FR", "DE", "JP", "BR"),
        country_names=("United States", "France", "Germany", "Japan", "Brazil"),
    )


@pytest.fixture
def synthesizer(sampler: Sampler) -> RecordSynthesizer:
    return RecordSynthesizer(sampler)


@pytest.fixture
def memory_store() -> InMemoryTableStore:
    store = InMemoryTableStore()
    ensure_schema(store, HIERARCHY)
    return store


@pytest.fixture
def isolated_env(monkeypatch, tmp_path) -> Generator[None, None, None]:
    """
    Clear synthload variables, run from an empty directory (no .env) and reset
    the settings cache before and after the test.
    """
    for name in _SYNTHLOAD_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()
    # CLI runs bind the root handler to the runner's stream, which is closed by now.
    logging.getLogger().handlers.clear()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings for integration tests; override via environment variables in CI.
    """
    return Settings(
        store_host=os.getenv("SYNTHLOAD_HOST", "localhost"),
        store_port=int(os.getenv("SYNTHLOAD_PORT", "5432")),
        store_user=os.getenv("SYNTHLOAD_USER", "postgres"),
        store_password=os.getenv("SYNTHLOAD_PASSWORD", "postgres"),
        store_name=os.getenv("SYNTHLOAD_STORE_NAME", "kvstore"),
        log_level="DEBUG",
    )

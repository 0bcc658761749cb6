from __future__ import annotations

from pathlib import Path

import pytest

from synthload import config
from synthload.errors import ConfigurationError

DEFAULT_PORT = 5432
DEFAULT_RECORDS = 10
OVERRIDE_RECORDS = 250


def test_get_settings_defaults(isolated_env) -> None:
    settings = config.get_settings()
    assert settings.store_name == "kvstore"
    assert settings.store_host == "localhost"
    assert settings.store_port == DEFAULT_PORT
    assert settings.records == DEFAULT_RECORDS
    assert settings.delete_existing is False
    assert settings.seed is None
    assert settings.security_file is None
    assert settings.trace_allocations is False
    assert settings.target == f"localhost:{DEFAULT_PORT}/kvstore"


def test_get_settings_reads_environment(isolated_env, monkeypatch) -> None:
    monkeypatch.setenv("SYNTHLOAD_HOST", "db.internal")
    monkeypatch.setenv("SYNTHLOAD_RECORDS", "42")
    monkeypatch.setenv("SYNTHLOAD_DELETE_EXISTING", "true")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("SYNTHLOAD_TRACE_ALLOCATIONS", "1")

    settings = config.get_settings()

    assert settings.store_host == "db.internal"
    assert settings.records == 42
    assert settings.delete_existing is True
    assert settings.log_level == "DEBUG"
    assert settings.trace_allocations is True


def test_get_settings_rejects_negative_records(isolated_env, monkeypatch) -> None:
    monkeypatch.setenv("SYNTHLOAD_RECORDS", "-1")
    with pytest.raises(ConfigurationError):
        config.get_settings()


def test_get_settings_rejects_unknown_log_level(isolated_env, monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ConfigurationError):
        config.get_settings()


def test_validate_settings_applies_overrides(isolated_env) -> None:
    settings = config.validate_settings(
        config.get_settings(),
        records=OVERRIDE_RECORDS,
        security_file=Path("/etc/synthload/passfile"),
        store_host=None,
    )
    assert settings.records == OVERRIDE_RECORDS
    assert settings.security_file == Path("/etc/synthload/passfile")
    assert settings.store_host == "localhost"


def test_validate_settings_overrides_beat_environment(isolated_env, monkeypatch) -> None:
    monkeypatch.setenv("SYNTHLOAD_PORT", "6543")
    settings = config.validate_settings(config.get_settings(), store_port=7000)
    assert settings.store_port == 7000


@pytest.mark.parametrize("overrides", [{"records": -5}, {"store_port": 0}, {"max_key_attempts": 0}])
def test_validate_settings_rejects_invalid_overrides(isolated_env, overrides) -> None:
    with pytest.raises(ConfigurationError):
        config.validate_settings(config.get_settings(), **overrides)

from __future__ import annotations

import json
import logging

from synthload.utils.logging import JsonFormatter, _json_formatter, configure_logging, get_logger

EXPECTED_WRITTEN = 10
EXPECTED_COLLISIONS = 3


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.written = EXPECTED_WRITTEN
    record.table = "countries.residents"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["written"] == EXPECTED_WRITTEN
    assert payload["table"] == "countries.residents"


def test_json_formatter_supports_nested_extra_field() -> None:
    record = _record()
    record.extra = {"collisions": EXPECTED_COLLISIONS}

    payload = json.loads(_json_formatter(record))

    assert payload["collisions"] == EXPECTED_COLLISIONS


def test_json_formatter_stringifies_unserializable_values() -> None:
    record = _record()
    record.license = b"S12345678"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["license"] == str(b"S12345678")


def test_configure_logging_sets_root_level_and_quiets_driver() -> None:
    configure_logging(level="DEBUG", json_logs=True)

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("psycopg").level == logging.WARNING
    assert get_logger("synthload.test").name == "synthload.test"

    configure_logging(level="INFO")

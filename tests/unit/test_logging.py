from __future__ import annotations

import json
import logging

from impact_dashboard.utils.logging import JsonFormatter, _json_formatter, configure_logging, get_logger

EXPECTED_RECORDS = 611
EXPECTED_SEED = 42


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.records = EXPECTED_RECORDS
    record.granularity = "monthly"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["records"] == EXPECTED_RECORDS
    assert payload["granularity"] == "monthly"
    assert "lineno" not in payload


def test_json_formatter_supports_nested_extra_field() -> None:
    record = _record()
    record.extra = {"seed": EXPECTED_SEED}

    payload = json.loads(_json_formatter(record))

    assert payload["seed"] == EXPECTED_SEED


def test_json_formatter_stringifies_unserializable_values() -> None:
    record = _record()
    record.path = object()

    payload = json.loads(JsonFormatter().format(record))

    assert payload["path"].startswith("<object")


def test_get_logger_defaults_to_root_logger() -> None:
    assert get_logger() is logging.getLogger()
    assert get_logger("impact_dashboard.pipeline").name == "impact_dashboard.pipeline"


def test_configure_logging_sets_root_level() -> None:
    configure_logging(level="DEBUG", json_logs=True)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
    configure_logging(level="INFO")
    assert logging.getLogger().level == logging.INFO

from __future__ import annotations

import json
import logging

from roster.utils.logging import JsonFormatter, _json_formatter, configure_logging

EXPECTED_STUDENT_ID = 10
EXPECTED_COUNT = 3


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
    record.student_id = EXPECTED_STUDENT_ID
    record.operation = "add"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["student_id"] == EXPECTED_STUDENT_ID
    assert payload["operation"] == "add"
    assert "pathname" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"count": EXPECTED_COUNT}

    payload = json.loads(_json_formatter(record))

    assert payload["count"] == EXPECTED_COUNT
    assert "extra" not in payload


def test_configure_logging_installs_json_formatter() -> None:
    configure_logging(level="debug", json_logs=True)

    root = logging.getLogger()

    assert root.level == logging.DEBUG
    assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
